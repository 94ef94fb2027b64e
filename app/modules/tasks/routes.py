from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.tasks.schemas import TaskCreate, TaskUpdate, TaskResponse
from app.modules.tasks.service import TaskService
from app.core.authorization import Action, Principal, ResourceType
from app.core.dependencies import get_current_principal, check_project_access, check_task_access
from app.core.enums import TaskStatus
from app.core.responses import ApiResponse, MessageResponse
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service(supabase: Client = Depends(get_supabase)) -> TaskService:
    return TaskService(supabase)


@router.get("", response_model=ApiResponse[List[TaskResponse]])
async def list_tasks(
    project_id: Optional[str] = None,
    status: Optional[TaskStatus] = None,
    assignee_id: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service),
    supabase: Client = Depends(get_supabase)
):
    """List tasks in projects the caller can access, optionally filtered"""
    if project_id:
        check_project_access(project_id, principal, supabase, Action.READ)
        tasks = service.list_project_tasks(project_id, status=status)
        if assignee_id:
            tasks = [t for t in tasks if t.assignee_id == assignee_id]
        return ApiResponse.ok(tasks)
    return ApiResponse.ok(service.list_tasks(principal, status=status, assignee_id=assignee_id))


@router.post("", response_model=ApiResponse[TaskResponse], status_code=201)
async def create_task(
    task_data: TaskCreate,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service),
    supabase: Client = Depends(get_supabase)
):
    """Create a task in a project the caller can access"""
    check_project_access(task_data.project_id, principal, supabase, Action.CREATE, resource=ResourceType.TASK)
    return ApiResponse.ok(service.create_task(task_data, principal.id), "Task created")


@router.get("/{task_id}", response_model=ApiResponse[TaskResponse])
async def get_task(
    task_id: str,
    principal: Principal = Depends(get_current_principal),
    supabase: Client = Depends(get_supabase)
):
    return ApiResponse.ok(check_task_access(task_id, principal, supabase, Action.READ))


@router.put("/{task_id}", response_model=ApiResponse[TaskResponse])
async def update_task(
    task_id: str,
    task_data: TaskUpdate,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service),
    supabase: Client = Depends(get_supabase)
):
    """Update a task (project owner, project member or admin)"""
    task = check_task_access(task_id, principal, supabase, Action.UPDATE)
    return ApiResponse.ok(service.update_task(task, task_data, principal.id), "Task updated")


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TaskService = Depends(get_task_service),
    supabase: Client = Depends(get_supabase)
):
    """Delete a task (project owner or admin)"""
    task = check_task_access(task_id, principal, supabase, Action.DELETE)
    service.delete_task(task, principal.id)
    return MessageResponse(message="Task deleted")
