from pydantic import BaseModel
from datetime import datetime

from app.modules.attachments.models import Attachment


class AttachmentResponse(BaseModel):
    id: str
    task_id: str
    uploaded_by: str
    filename: str
    original_filename: str
    content_type: str
    size_bytes: int
    formatted_size: str
    is_image: bool
    created_at: datetime

    class Config:
        from_attributes = True

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> "AttachmentResponse":
        return cls(
            **attachment.model_dump(exclude={"storage_path"}),
            formatted_size=attachment.formatted_size,
            is_image=attachment.is_image,
        )
