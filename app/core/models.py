from datetime import datetime, timezone
from typing import Any, Dict
from uuid import uuid4

from pydantic import BaseModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


class Entity(BaseModel):
    """Base for persisted rows. Every entity carries a string uuid id."""
    id: str

    def apply(self, changes: Dict[str, Any]):
        """Return a copy with the non-None fields of `changes` applied; bumps updated_at when present."""
        fields = {k: v for k, v in changes.items() if v is not None and k in type(self).model_fields and k != "id"}
        if "updated_at" in type(self).model_fields:
            fields["updated_at"] = utcnow()
        return self.model_copy(update=fields)
