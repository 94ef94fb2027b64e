from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase
from app.modules.notifications.schemas import NotificationResponse, UnreadCountResponse, MarkAllReadResponse
from app.modules.notifications.service import NotificationService
from app.core.authorization import Action, Principal
from app.core.dependencies import get_current_principal, check_notification_access
from app.core.responses import ApiResponse, MessageResponse
from supabase import Client
from typing import List

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_notification_service(supabase: Client = Depends(get_supabase)) -> NotificationService:
    return NotificationService(supabase)


@router.get("", response_model=ApiResponse[List[NotificationResponse]])
async def list_notifications(
    unread_only: bool = False,
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    principal: Principal = Depends(get_current_principal),
    service: NotificationService = Depends(get_notification_service)
):
    """The caller's notifications, newest first"""
    return ApiResponse.ok(service.list_notifications(principal.id, unread_only=unread_only, limit=limit, offset=offset))


@router.get("/unread-count", response_model=ApiResponse[UnreadCountResponse])
async def unread_count(
    principal: Principal = Depends(get_current_principal),
    service: NotificationService = Depends(get_notification_service)
):
    return ApiResponse.ok(UnreadCountResponse(count=service.unread_count(principal.id)))


@router.put("/read-all", response_model=ApiResponse[MarkAllReadResponse])
async def mark_all_read(
    principal: Principal = Depends(get_current_principal),
    service: NotificationService = Depends(get_notification_service)
):
    updated = service.mark_all_read(principal.id)
    return ApiResponse.ok(MarkAllReadResponse(updated=updated), "All notifications marked as read")


@router.put("/{notification_id}/read", response_model=ApiResponse[NotificationResponse])
async def mark_read(
    notification_id: str,
    principal: Principal = Depends(get_current_principal),
    service: NotificationService = Depends(get_notification_service),
    supabase: Client = Depends(get_supabase)
):
    notification = check_notification_access(notification_id, principal, supabase, Action.UPDATE)
    return ApiResponse.ok(service.mark_read(notification), "Notification marked as read")


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: str,
    principal: Principal = Depends(get_current_principal),
    service: NotificationService = Depends(get_notification_service),
    supabase: Client = Depends(get_supabase)
):
    notification = check_notification_access(notification_id, principal, supabase, Action.DELETE)
    service.delete(notification)
    return MessageResponse(message="Notification deleted")
