"""
Enumerations shared across modules.
Values are the lowercase strings stored in the database and sent over the API.
"""

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    MEMBER = "member"


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    ON_HOLD = "onhold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "inprogress"
    REVIEW = "review"
    DONE = "done"
    BLOCKED = "blocked"


class TeamMemberRole(str, Enum):
    LEAD = "lead"
    MEMBER = "member"


class NotificationType(str, Enum):
    TASK_ASSIGNED = "task_assigned"
    TASK_UPDATED = "task_updated"
    TASK_COMPLETED = "task_completed"
    TASK_DUE_SOON = "task_due_soon"
    PROJECT_UPDATED = "project_updated"
    COMMENT_ADDED = "comment_added"
    MENTION = "mention"
    SYSTEM = "system"
