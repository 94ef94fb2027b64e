import logging
from pathlib import Path
from typing import List, Optional

from supabase import Client

from app.config import settings
from app.core.errors import NotFound
from app.core.models import new_id, utcnow
from app.modules.attachments.models import Attachment, validate_upload
from app.modules.attachments.repository import AttachmentRepository
from app.modules.attachments.storage import LocalStorage

logger = logging.getLogger(__name__)


class AttachmentService:
    def __init__(self, supabase: Client, storage: Optional[LocalStorage] = None):
        self.repository = AttachmentRepository(supabase)
        self.storage = storage or LocalStorage()

    def get_attachment(self, attachment_id: str) -> Attachment:
        attachment = self.repository.find_by_id(attachment_id)
        if attachment is None:
            raise NotFound(f"Attachment with id {attachment_id} not found")
        return attachment

    def list_for_task(self, task_id: str) -> List[Attachment]:
        return self.repository.find_by_task(task_id)

    def upload(
        self,
        task_id: str,
        uploaded_by: str,
        original_filename: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> Attachment:
        extension = validate_upload(original_filename, len(content), settings.max_upload_size_bytes)
        attachment_id = new_id()
        filename = f"{attachment_id}.{extension}"
        storage_path = f"{task_id}/{filename}"
        self.storage.upload_file(content, storage_path)
        try:
            attachment = self.repository.create(Attachment(
                id=attachment_id,
                task_id=task_id,
                uploaded_by=uploaded_by,
                filename=filename,
                original_filename=original_filename,
                content_type=content_type or "application/octet-stream",
                size_bytes=len(content),
                storage_path=storage_path,
                created_at=utcnow(),
            ))
        except Exception:
            logger.error("Failed to record attachment %s; removing stored file", storage_path)
            self.storage.delete_file(storage_path)
            raise
        logger.info("Attachment %s uploaded to task %s by %s (%d bytes)", attachment.id, task_id, uploaded_by, len(content))
        return attachment

    def file_path(self, attachment: Attachment) -> Path:
        return self.storage.get_file(attachment.storage_path)

    def delete(self, attachment: Attachment) -> None:
        self.storage.delete_file(attachment.storage_path)
        self.repository.delete(attachment.id)
        logger.info("Attachment %s deleted", attachment.id)
