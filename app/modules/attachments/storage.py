import logging
from pathlib import Path

from app.config import settings
from app.core.errors import InternalError, NotFound, ValidationError

logger = logging.getLogger(__name__)


class LocalStorage:
    """Stores attachment bytes under a root directory, addressed by relative key."""

    def __init__(self, root: str = None):
        self.root = Path(root or settings.upload_dir).resolve()

    def path_for(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if self.root not in path.parents:
            raise ValidationError("Invalid storage path")
        return path

    def upload_file(self, file_content: bytes, key: str) -> Path:
        """Write bytes to `key` and return the absolute path"""
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(file_content)
        except OSError as e:
            logger.error(f"Failed to write attachment {key}: {str(e)}")
            raise InternalError("Failed to store file")
        return path

    def get_file(self, key: str) -> Path:
        path = self.path_for(key)
        if not path.is_file():
            raise NotFound("File not found on disk")
        return path

    def delete_file(self, key: str) -> bool:
        path = self.path_for(key)
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            logger.warning(f"Attachment file already missing: {key}")
            return False
        except OSError as e:
            logger.error(f"Failed to delete attachment {key}: {str(e)}")
            raise InternalError("Failed to delete file")
