# Supabase table: notifications
# This file documents the expected database schema and defines the row model
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

notifications:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id, not null, on delete cascade) - recipient
- notification_type: text (not null) - values: task_assigned, task_updated,
  task_completed, task_due_soon, project_updated, comment_added, mention, system
- title: text (not null)
- message: text (not null)
- link: text (nullable)
- is_read: boolean (not null, default: false)
- created_at: timestamp (default: now())
"""

from datetime import datetime
from typing import Optional

from app.core.enums import NotificationType
from app.core.models import Entity


class Notification(Entity):
    user_id: str
    notification_type: NotificationType
    title: str
    message: str
    link: Optional[str] = None
    is_read: bool = False
    created_at: datetime

    def mark_read(self) -> "Notification":
        return self.model_copy(update={"is_read": True})
