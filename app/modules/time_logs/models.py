# Supabase table: time_logs
# This file documents the expected database schema and defines the row model
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

time_logs:
- id: uuid (primary key)
- task_id: uuid (foreign key to tasks.id, not null, on delete cascade)
- user_id: uuid (foreign key to users.id, not null, on delete cascade) - author
- hours: double precision (not null, > 0)
- date: date (not null) - the day the work was done
- description: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""

import datetime as dt
from typing import Optional

from app.core.models import Entity


class TimeLog(Entity):
    task_id: str
    user_id: str
    hours: float
    date: dt.date
    description: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime
