# Supabase table: tasks
# This file documents the expected database schema and defines the row model
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

tasks:
- id: uuid (primary key)
- project_id: uuid (foreign key to projects.id, not null, on delete cascade)
- milestone_id: uuid (foreign key to milestones.id, nullable, on delete set null)
- title: text (not null)
- description: text (nullable)
- status: text (not null, default: 'todo') - values: todo, inprogress, review, done, blocked
- priority: text (not null, default: 'medium') - values: low, medium, high, critical
- assignee_id: uuid (foreign key to users.id, nullable, on delete set null)
- due_date: date (nullable)
- estimated_hours: double precision (nullable)
- actual_hours: double precision (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Tasks carry no access list of their own: whoever can access the project can
access its tasks.
"""

from datetime import date, datetime
from typing import Optional

from app.core.enums import Priority, TaskStatus
from app.core.models import Entity, utcnow


class Task(Entity):
    project_id: str
    milestone_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    assignee_id: Optional[str] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    created_at: datetime
    updated_at: datetime

    def set_status(self, status: TaskStatus) -> "Task":
        return self.model_copy(update={"status": status, "updated_at": utcnow()})
