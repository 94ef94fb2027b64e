from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from app.core.enums import Priority, TaskStatus


class TaskCreate(BaseModel):
    project_id: str
    milestone_id: Optional[str] = None
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    assignee_id: Optional[str] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[float] = Field(None, ge=0)


class TaskUpdate(BaseModel):
    milestone_id: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    assignee_id: Optional[str] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[float] = Field(None, ge=0)
    actual_hours: Optional[float] = Field(None, ge=0)


class TaskResponse(BaseModel):
    id: str
    project_id: str
    milestone_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: Priority
    assignee_id: Optional[str] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
