# Supabase table: users
# This file documents the expected database schema and defines the row model
# Actual operations are handled via Supabase SDK in repository.py

"""
Expected Supabase table structure:

users:
- id: uuid (primary key)
- email: text (unique, not null) - stored lowercase
- password_hash: text (not null) - argon2 encoded hash
- name: text (not null)
- role: text (not null, default: 'member') - values: admin, manager, member
- avatar_url: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""

from datetime import datetime
from typing import Optional

from app.core.enums import UserRole
from app.core.errors import ValidationError
from app.core.models import Entity


def normalize_email(raw: str) -> str:
    """Validate an email address and return it lowercased."""
    email = (raw or "").strip()
    if not email:
        raise ValidationError("Email cannot be empty")
    if "@" not in email or "." not in email:
        raise ValidationError("Invalid email format")
    return email.lower()


class User(Entity):
    email: str
    password_hash: str
    name: str
    role: UserRole = UserRole.MEMBER
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
