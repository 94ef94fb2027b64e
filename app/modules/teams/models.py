# Supabase tables: teams, team_members
# This file documents the expected database schema and defines the row models
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

teams:
- id: uuid (primary key)
- name: text (not null)
- description: text (nullable)
- lead_id: uuid (foreign key to users.id, nullable, on delete set null) - the only source of lead authority
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

team_members:
- id: uuid (primary key)
- team_id: uuid (foreign key to teams.id, not null, on delete cascade)
- user_id: uuid (foreign key to users.id, not null, on delete cascade)
- role: text (not null, default: 'member') - values: lead, member (informational only)
- joined_at: timestamp (default: now())
- unique constraint on (team_id, user_id)
"""

from datetime import datetime
from typing import Optional

from app.core.enums import TeamMemberRole
from app.core.models import Entity


class Team(Entity):
    name: str
    description: Optional[str] = None
    lead_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class TeamMember(Entity):
    team_id: str
    user_id: str
    role: TeamMemberRole = TeamMemberRole.MEMBER
    joined_at: datetime
