# Supabase table: attachments
# This file documents the expected database schema and defines the row model
# File contents live on local disk under settings.upload_dir (see storage.py)

"""
Expected Supabase table structure:

attachments:
- id: uuid (primary key)
- task_id: uuid (foreign key to tasks.id, not null, on delete cascade)
- uploaded_by: uuid (foreign key to users.id, not null)
- filename: text (not null) - generated "{uuid}.{ext}", never user supplied
- original_filename: text (not null) - display only
- content_type: text (not null)
- size_bytes: bigint (not null)
- storage_path: text (not null) - "{task_id}/{filename}" relative to upload_dir
- created_at: timestamp (default: now())
"""

from datetime import datetime

from app.core.errors import ValidationError
from app.core.models import Entity

MAX_FILE_SIZE = 10 * 1024 * 1024

ALLOWED_EXTENSIONS = frozenset({
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "txt", "csv",
    "zip", "rar", "7z",
    "png", "jpg", "jpeg", "gif", "webp", "svg", "bmp",
})

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp", "svg", "bmp"})


def file_extension(filename: str) -> str:
    """Lowercased text after the last '.', or '' when there is none."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def validate_upload(filename: str, size_bytes: int, max_size: int = MAX_FILE_SIZE) -> str:
    """Check size and extension of an upload; returns the normalized extension."""
    if size_bytes > max_size:
        raise ValidationError(f"File size exceeds maximum allowed size of {max_size // (1024 * 1024)} MB")
    extension = file_extension(filename)
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(f"File type '{extension}' is not allowed")
    return extension


def format_size(size_bytes: int) -> str:
    size = float(size_bytes)
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} GB"


class Attachment(Entity):
    task_id: str
    uploaded_by: str
    filename: str
    original_filename: str
    content_type: str
    size_bytes: int
    storage_path: str
    created_at: datetime

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/") or file_extension(self.filename) in IMAGE_EXTENSIONS

    @property
    def formatted_size(self) -> str:
        return format_size(self.size_bytes)
