import datetime as dt
from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.time_logs.schemas import TimeLogCreate, TimeLogUpdate, TimeLogResponse
from app.modules.time_logs.service import TimeLogService
from app.core.authorization import AccessFacts, Action, Principal, ResourceType, ensure_allowed
from app.core.dependencies import get_current_principal, check_task_access, check_time_log_access
from app.core.responses import ApiResponse, MessageResponse
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/time-logs", tags=["time-logs"])
scoped_router = APIRouter(tags=["time-logs"])


def get_time_log_service(supabase: Client = Depends(get_supabase)) -> TimeLogService:
    return TimeLogService(supabase)


@router.get("", response_model=ApiResponse[List[TimeLogResponse]])
async def list_my_time_logs(
    start_date: Optional[dt.date] = None,
    end_date: Optional[dt.date] = None,
    principal: Principal = Depends(get_current_principal),
    service: TimeLogService = Depends(get_time_log_service)
):
    """List the caller's own time logs, optionally within a date range"""
    return ApiResponse.ok(service.list_for_user(principal.id, start_date=start_date, end_date=end_date))


@router.post("", response_model=ApiResponse[TimeLogResponse], status_code=201)
async def create_time_log(
    data: TimeLogCreate,
    principal: Principal = Depends(get_current_principal),
    service: TimeLogService = Depends(get_time_log_service),
    supabase: Client = Depends(get_supabase)
):
    """Log time against a task the caller can access"""
    check_task_access(data.task_id, principal, supabase, Action.READ)
    return ApiResponse.ok(service.create_time_log(data, principal.id), "Time logged")


@router.get("/{time_log_id}", response_model=ApiResponse[TimeLogResponse])
async def get_time_log(
    time_log_id: str,
    principal: Principal = Depends(get_current_principal),
    supabase: Client = Depends(get_supabase)
):
    return ApiResponse.ok(check_time_log_access(time_log_id, principal, supabase, Action.READ))


@router.put("/{time_log_id}", response_model=ApiResponse[TimeLogResponse])
async def update_time_log(
    time_log_id: str,
    data: TimeLogUpdate,
    principal: Principal = Depends(get_current_principal),
    service: TimeLogService = Depends(get_time_log_service),
    supabase: Client = Depends(get_supabase)
):
    time_log = check_time_log_access(time_log_id, principal, supabase, Action.UPDATE)
    return ApiResponse.ok(service.update_time_log(time_log, data), "Time log updated")


@router.delete("/{time_log_id}", response_model=MessageResponse)
async def delete_time_log(
    time_log_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TimeLogService = Depends(get_time_log_service),
    supabase: Client = Depends(get_supabase)
):
    time_log = check_time_log_access(time_log_id, principal, supabase, Action.DELETE)
    service.delete_time_log(time_log)
    return MessageResponse(message="Time log deleted")


@scoped_router.get("/tasks/{task_id}/time-logs", response_model=ApiResponse[List[TimeLogResponse]])
async def list_task_time_logs(
    task_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TimeLogService = Depends(get_time_log_service),
    supabase: Client = Depends(get_supabase)
):
    """All time logged against a task (anyone with access to the task)"""
    check_task_access(task_id, principal, supabase, Action.READ)
    return ApiResponse.ok(service.list_for_task(task_id))


@scoped_router.get("/users/{user_id}/time-logs", response_model=ApiResponse[List[TimeLogResponse]])
async def list_user_time_logs(
    user_id: str,
    start_date: Optional[dt.date] = None,
    end_date: Optional[dt.date] = None,
    principal: Principal = Depends(get_current_principal),
    service: TimeLogService = Depends(get_time_log_service)
):
    """A user's time logs (the user themselves or an admin)"""
    ensure_allowed(
        principal, ResourceType.USER, Action.READ_TIME_LOGS,
        AccessFacts(is_owner=user_id == principal.id),
        message="You can only view your own time logs",
    )
    return ApiResponse.ok(service.list_for_user(user_id, start_date=start_date, end_date=end_date))
