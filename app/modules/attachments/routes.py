from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse
from app.database.supabase_client import get_supabase
from app.modules.attachments.schemas import AttachmentResponse
from app.modules.attachments.service import AttachmentService
from app.core.authorization import Action, Principal, ResourceType
from app.core.dependencies import get_current_principal, check_task_access, check_attachment_access
from app.core.responses import ApiResponse, MessageResponse
from supabase import Client
from typing import List

router = APIRouter(prefix="/attachments", tags=["attachments"])
task_attachments_router = APIRouter(prefix="/tasks/{task_id}/attachments", tags=["attachments"])


def get_attachment_service(supabase: Client = Depends(get_supabase)) -> AttachmentService:
    return AttachmentService(supabase)


@task_attachments_router.get("", response_model=ApiResponse[List[AttachmentResponse]])
async def list_task_attachments(
    task_id: str,
    principal: Principal = Depends(get_current_principal),
    service: AttachmentService = Depends(get_attachment_service),
    supabase: Client = Depends(get_supabase)
):
    check_task_access(task_id, principal, supabase, Action.READ, resource=ResourceType.ATTACHMENT)
    attachments = service.list_for_task(task_id)
    return ApiResponse.ok([AttachmentResponse.from_attachment(a) for a in attachments])


@task_attachments_router.post("", response_model=ApiResponse[AttachmentResponse], status_code=201)
async def upload_attachment(
    task_id: str,
    file: UploadFile = File(...),
    principal: Principal = Depends(get_current_principal),
    service: AttachmentService = Depends(get_attachment_service),
    supabase: Client = Depends(get_supabase)
):
    """Upload a file to a task (max 10 MB, document/archive/image types only)"""
    check_task_access(task_id, principal, supabase, Action.CREATE, resource=ResourceType.ATTACHMENT)
    content = await file.read()
    attachment = service.upload(
        task_id=task_id,
        uploaded_by=principal.id,
        original_filename=file.filename or "",
        content=content,
        content_type=file.content_type,
    )
    return ApiResponse.ok(AttachmentResponse.from_attachment(attachment), "File uploaded")


@router.get("/{attachment_id}")
async def download_attachment(
    attachment_id: str,
    principal: Principal = Depends(get_current_principal),
    service: AttachmentService = Depends(get_attachment_service),
    supabase: Client = Depends(get_supabase)
):
    """Stream the file back under its original name"""
    attachment = check_attachment_access(attachment_id, principal, supabase, Action.READ)
    return FileResponse(
        service.file_path(attachment),
        media_type=attachment.content_type,
        filename=attachment.original_filename,
    )


@router.delete("/{attachment_id}", response_model=MessageResponse)
async def delete_attachment(
    attachment_id: str,
    principal: Principal = Depends(get_current_principal),
    service: AttachmentService = Depends(get_attachment_service),
    supabase: Client = Depends(get_supabase)
):
    attachment = check_attachment_access(attachment_id, principal, supabase, Action.DELETE)
    service.delete(attachment)
    return MessageResponse(message="Attachment deleted")
