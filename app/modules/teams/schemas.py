from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.core.enums import TeamMemberRole


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    lead_id: Optional[str] = None


class TeamUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    lead_id: Optional[str] = None


class TeamResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    lead_id: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TeamMemberAdd(BaseModel):
    user_id: str
    role: TeamMemberRole = TeamMemberRole.MEMBER


class TeamMemberResponse(BaseModel):
    id: str
    team_id: str
    user_id: str
    role: TeamMemberRole
    joined_at: datetime

    class Config:
        from_attributes = True
