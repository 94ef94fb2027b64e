from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from app.modules.tags.models import DEFAULT_TAG_COLOR

COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class TagCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(DEFAULT_TAG_COLOR, pattern=COLOR_PATTERN)
    description: Optional[str] = None


class TagUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    description: Optional[str] = None


class TagResponse(BaseModel):
    id: str
    name: str
    color: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TaskTagsSet(BaseModel):
    tag_ids: List[str]
