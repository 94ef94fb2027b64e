from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.tags.schemas import TagCreate, TagUpdate, TagResponse, TaskTagsSet
from app.modules.tags.service import TagService
from app.core.authorization import Action, Principal, ResourceType, ensure_allowed
from app.core.dependencies import get_current_principal, check_task_access
from app.core.responses import ApiResponse, MessageResponse
from supabase import Client
from typing import List

router = APIRouter(prefix="/tags", tags=["tags"])
task_tags_router = APIRouter(prefix="/tasks/{task_id}/tags", tags=["tags"])


def get_tag_service(supabase: Client = Depends(get_supabase)) -> TagService:
    return TagService(supabase)


@router.get("", response_model=ApiResponse[List[TagResponse]])
async def list_tags(
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service)
):
    ensure_allowed(principal, ResourceType.TAG, Action.READ)
    return ApiResponse.ok(service.list_tags())


@router.post("", response_model=ApiResponse[TagResponse], status_code=201)
async def create_tag(
    tag_data: TagCreate,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service)
):
    """Create a tag; names are unique (case-sensitive)"""
    ensure_allowed(principal, ResourceType.TAG, Action.CREATE)
    return ApiResponse.ok(service.create_tag(tag_data), "Tag created")


@router.get("/{tag_id}", response_model=ApiResponse[TagResponse])
async def get_tag(
    tag_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service)
):
    ensure_allowed(principal, ResourceType.TAG, Action.READ)
    return ApiResponse.ok(service.get_tag(tag_id))


@router.put("/{tag_id}", response_model=ApiResponse[TagResponse])
async def update_tag(
    tag_id: str,
    tag_data: TagUpdate,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service)
):
    ensure_allowed(principal, ResourceType.TAG, Action.UPDATE)
    return ApiResponse.ok(service.update_tag(tag_id, tag_data), "Tag updated")


@router.delete("/{tag_id}", response_model=MessageResponse)
async def delete_tag(
    tag_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service)
):
    ensure_allowed(principal, ResourceType.TAG, Action.DELETE)
    service.delete_tag(tag_id)
    return MessageResponse(message="Tag deleted")


@task_tags_router.get("", response_model=ApiResponse[List[TagResponse]])
async def get_task_tags(
    task_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service),
    supabase: Client = Depends(get_supabase)
):
    check_task_access(task_id, principal, supabase, Action.READ)
    return ApiResponse.ok(service.get_task_tags(task_id))


@task_tags_router.put("", response_model=ApiResponse[List[TagResponse]])
async def set_task_tags(
    task_id: str,
    data: TaskTagsSet,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service),
    supabase: Client = Depends(get_supabase)
):
    """Replace all tags on a task"""
    check_task_access(task_id, principal, supabase, Action.UPDATE)
    return ApiResponse.ok(service.set_task_tags(task_id, data.tag_ids), "Task tags updated")


@task_tags_router.post("/{tag_id}", response_model=ApiResponse[List[TagResponse]])
async def add_tag_to_task(
    task_id: str,
    tag_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service),
    supabase: Client = Depends(get_supabase)
):
    check_task_access(task_id, principal, supabase, Action.UPDATE)
    return ApiResponse.ok(service.add_tag_to_task(task_id, tag_id), "Tag added to task")


@task_tags_router.delete("/{tag_id}", response_model=MessageResponse)
async def remove_tag_from_task(
    task_id: str,
    tag_id: str,
    principal: Principal = Depends(get_current_principal),
    service: TagService = Depends(get_tag_service),
    supabase: Client = Depends(get_supabase)
):
    check_task_access(task_id, principal, supabase, Action.UPDATE)
    service.remove_tag_from_task(task_id, tag_id)
    return MessageResponse(message="Tag removed from task")
