# Supabase table: activity_logs
# This file documents the expected database schema and defines the row model
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

activity_logs:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id, nullable, on delete set null)
- project_id: uuid (foreign key to projects.id, nullable, on delete set null)
- action: text (not null) - e.g. created, updated, deleted, member_added
- entity_type: text (not null) - e.g. project, task, team
- entity_id: uuid (not null)
- details: jsonb (nullable)
- created_at: timestamp (default: now())
"""

from datetime import datetime
from typing import Any, Dict, Optional

from app.core.models import Entity


class ActivityLog(Entity):
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    action: str
    entity_type: str
    entity_id: str
    details: Optional[Dict[str, Any]] = None
    created_at: datetime
