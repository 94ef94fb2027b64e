from pydantic import BaseModel
from typing import Any, Dict, Optional
from datetime import datetime


class ActivityLogResponse(BaseModel):
    id: str
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    action: str
    entity_type: str
    entity_id: str
    details: Optional[Dict[str, Any]] = None
    created_at: datetime

    class Config:
        from_attributes = True
