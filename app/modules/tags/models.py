# Supabase tables: tags, task_tags
# This file documents the expected database schema and defines the row models
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

tags:
- id: uuid (primary key)
- name: text (not null) - unique constraint on (name), case-sensitive
- color: text (not null, default: '#6b7280')
- description: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

task_tags:
- id: uuid (primary key)
- task_id: uuid (foreign key to tasks.id, not null, on delete cascade)
- tag_id: uuid (foreign key to tags.id, not null, on delete cascade)
- created_at: timestamp (default: now())
- unique constraint on (task_id, tag_id)
"""

from datetime import datetime
from typing import Optional

from app.core.models import Entity

DEFAULT_TAG_COLOR = "#6b7280"


class Tag(Entity):
    name: str
    color: str = DEFAULT_TAG_COLOR
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class TaskTag(Entity):
    task_id: str
    tag_id: str
    created_at: datetime
