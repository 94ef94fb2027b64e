from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.projects.schemas import (
    ProjectCreate, ProjectUpdate, ProjectResponse,
    ProjectMemberAdd, ProjectMemberResponse, MilestoneResponse
)
from app.modules.projects.service import ProjectService
from app.modules.tasks.schemas import TaskResponse
from app.modules.tasks.service import TaskService
from app.core.authorization import Action, Principal
from app.core.dependencies import get_current_principal, check_project_access
from app.core.enums import TaskStatus
from app.core.responses import ApiResponse, MessageResponse
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/projects", tags=["projects"])


def get_project_service(supabase: Client = Depends(get_supabase)) -> ProjectService:
    return ProjectService(supabase)


@router.get("", response_model=ApiResponse[List[ProjectResponse]])
async def list_projects(
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service)
):
    """List projects the caller owns or is a member of (all projects for admins)"""
    return ApiResponse.ok(service.list_projects(principal))


@router.post("", response_model=ApiResponse[ProjectResponse], status_code=201)
async def create_project(
    project_data: ProjectCreate,
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service)
):
    """Create a project owned by the caller"""
    return ApiResponse.ok(service.create_project(project_data, principal.id), "Project created")


@router.get("/{project_id}", response_model=ApiResponse[ProjectResponse])
async def get_project(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    supabase: Client = Depends(get_supabase)
):
    return ApiResponse.ok(check_project_access(project_id, principal, supabase, Action.READ))


@router.put("/{project_id}", response_model=ApiResponse[ProjectResponse])
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service),
    supabase: Client = Depends(get_supabase)
):
    """Update project (owner or admin)"""
    project = check_project_access(project_id, principal, supabase, Action.UPDATE)
    return ApiResponse.ok(service.update_project(project, project_data, principal.id), "Project updated")


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service),
    supabase: Client = Depends(get_supabase)
):
    """Delete project (owner or admin)"""
    project = check_project_access(project_id, principal, supabase, Action.DELETE)
    service.delete_project(project, principal.id)
    return MessageResponse(message="Project deleted")


@router.get("/{project_id}/tasks", response_model=ApiResponse[List[TaskResponse]])
async def list_project_tasks(
    project_id: str,
    status: Optional[TaskStatus] = None,
    principal: Principal = Depends(get_current_principal),
    supabase: Client = Depends(get_supabase)
):
    check_project_access(project_id, principal, supabase, Action.READ)
    return ApiResponse.ok(TaskService(supabase).list_project_tasks(project_id, status=status))


@router.get("/{project_id}/milestones", response_model=ApiResponse[List[MilestoneResponse]])
async def list_milestones(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service),
    supabase: Client = Depends(get_supabase)
):
    check_project_access(project_id, principal, supabase, Action.READ)
    return ApiResponse.ok(service.list_milestones(project_id))


@router.get("/{project_id}/members", response_model=ApiResponse[List[ProjectMemberResponse]])
async def list_members(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service),
    supabase: Client = Depends(get_supabase)
):
    check_project_access(project_id, principal, supabase, Action.READ)
    return ApiResponse.ok(service.list_members(project_id))


@router.post("/{project_id}/members", response_model=ApiResponse[ProjectMemberResponse], status_code=201)
async def add_member(
    project_id: str,
    member_data: ProjectMemberAdd,
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service),
    supabase: Client = Depends(get_supabase)
):
    """Add a member to the project (owner or admin)"""
    project = check_project_access(project_id, principal, supabase, Action.MANAGE_MEMBERS)
    return ApiResponse.ok(service.add_member(project, member_data, principal.id), "Member added")


@router.delete("/{project_id}/members/{user_id}", response_model=MessageResponse)
async def remove_member(
    project_id: str,
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ProjectService = Depends(get_project_service),
    supabase: Client = Depends(get_supabase)
):
    """Remove a member from the project (owner or admin)"""
    project = check_project_access(project_id, principal, supabase, Action.MANAGE_MEMBERS)
    service.remove_member(project, user_id, principal.id)
    return MessageResponse(message="Member removed")
