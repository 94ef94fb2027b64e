import datetime as dt
from pydantic import BaseModel, Field
from typing import Optional


class TimeLogCreate(BaseModel):
    task_id: str
    hours: float = Field(..., gt=0, le=24)
    date: dt.date
    description: Optional[str] = None


class TimeLogUpdate(BaseModel):
    hours: Optional[float] = Field(None, gt=0, le=24)
    date: Optional[dt.date] = None
    description: Optional[str] = None


class TimeLogResponse(BaseModel):
    id: str
    task_id: str
    user_id: str
    hours: float
    date: dt.date
    description: Optional[str] = None
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True
