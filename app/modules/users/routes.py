from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase
from app.modules.users.schemas import UserUpdate, UserRoleUpdate, UserResponse
from app.modules.users.service import UserService
from app.core.authorization import Action, Principal, ResourceType, ensure_allowed
from app.core.dependencies import get_current_principal
from app.core.responses import ApiResponse
from supabase import Client
from typing import List

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


@router.get("", response_model=ApiResponse[List[UserResponse]])
async def list_users(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service)
):
    """List users (e.g. for picking assignees and members)"""
    return ApiResponse.ok(service.list_users(limit=limit, offset=offset))


@router.put("/me", response_model=ApiResponse[UserResponse])
async def update_me(
    data: UserUpdate,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service)
):
    """Update the caller's own profile"""
    return ApiResponse.ok(service.update_profile(principal.id, data), "Profile updated")


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service)
):
    return ApiResponse.ok(service.get_user(user_id))


@router.put("/{user_id}/role", response_model=ApiResponse[UserResponse])
async def set_user_role(
    user_id: str,
    data: UserRoleUpdate,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service)
):
    """Set a user's global role (admin only)"""
    ensure_allowed(principal, ResourceType.USER, Action.MANAGE_ROLES, message="Only admins can change user roles")
    return ApiResponse.ok(service.set_role(user_id, data.role), "Role updated")
