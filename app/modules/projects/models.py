# Supabase tables: projects, project_members, milestones
# This file documents the expected database schema and defines the row models
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

projects:
- id: uuid (primary key)
- name: text (not null)
- description: text (nullable)
- status: text (not null, default: 'planning') - values: planning, active, onhold, completed, cancelled
- priority: text (not null, default: 'medium') - values: low, medium, high, critical
- start_date: date (nullable)
- end_date: date (nullable)
- budget: numeric(15, 2) (nullable)
- owner_id: uuid (foreign key to users.id, not null) - set at creation, never reassigned
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

project_members:
- id: uuid (primary key)
- project_id: uuid (foreign key to projects.id, not null, on delete cascade)
- user_id: uuid (foreign key to users.id, not null, on delete cascade)
- role: text (not null, default: 'member') - free-text label, grants nothing by itself
- joined_at: timestamp (default: now())
- unique constraint on (project_id, user_id)

milestones:
- id: uuid (primary key)
- project_id: uuid (foreign key to projects.id, not null, on delete cascade)
- name: text (not null)
- description: text (nullable)
- due_date: date (nullable)
- completed: boolean (not null, default: false)
- created_at: timestamp (default: now())
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from app.core.enums import Priority, ProjectStatus
from app.core.models import Entity, utcnow


class Project(Entity):
    name: str
    description: Optional[str] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    priority: Priority = Priority.MEDIUM
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[Decimal] = None
    owner_id: str
    created_at: datetime
    updated_at: datetime

    def set_status(self, status: ProjectStatus) -> "Project":
        return self.model_copy(update={"status": status, "updated_at": utcnow()})


class ProjectMember(Entity):
    project_id: str
    user_id: str
    role: str = "member"
    joined_at: datetime


class Milestone(Entity):
    project_id: str
    name: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: bool = False
    created_at: Optional[datetime] = None
