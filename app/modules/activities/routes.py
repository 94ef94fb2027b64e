from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase
from app.modules.activities.schemas import ActivityLogResponse
from app.modules.activities.service import ActivityService
from app.modules.projects.repository import ProjectRepository
from app.core.authorization import Action, Principal
from app.core.dependencies import get_current_principal, check_project_access
from app.core.responses import ApiResponse
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/activities", tags=["activities"])

MAX_LIMIT = 100


def get_activity_service(supabase: Client = Depends(get_supabase)) -> ActivityService:
    return ActivityService(supabase)


@router.get("", response_model=ApiResponse[List[ActivityLogResponse]])
async def list_activities(
    limit: int = Query(50, ge=1),
    offset: int = Query(0, ge=0),
    project_id: Optional[str] = None,
    user_id: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    service: ActivityService = Depends(get_activity_service),
    supabase: Client = Depends(get_supabase)
):
    """Activity feed, newest first. Non-admins only see their projects and their own actions."""
    limit = min(limit, MAX_LIMIT)
    accessible = None
    if project_id:
        check_project_access(project_id, principal, supabase, Action.READ)
    elif not principal.is_admin:
        accessible = ProjectRepository(supabase).accessible_ids(principal.id)
    return ApiResponse.ok(service.list_activities(
        principal, accessible, limit=limit, offset=offset, project_id=project_id, user_id=user_id
    ))
