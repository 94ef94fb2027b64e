"""
Authorization predicate evaluator.

Decisions are pure: they depend only on the principal, the resource type,
the action and the relation facts the caller looked up beforehand
(is the principal the owner/lead/recipient, is the principal a member).
The rule table lives in app.config.permissions_config.
"""

import logging
from enum import Enum
from typing import Optional, Set

from pydantic import BaseModel

from app.config.permissions_config import ACCESS_RULES, ANY, MEMBER, OWNER
from app.core.enums import UserRole
from app.core.errors import Forbidden

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    PROJECT = "project"
    TASK = "task"
    TEAM = "team"
    NOTIFICATION = "notification"
    TAG = "tag"
    TIME_LOG = "time_log"
    ATTACHMENT = "attachment"
    USER = "user"


class Action(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE_MEMBERS = "manage_members"
    READ_TIME_LOGS = "read_time_logs"
    MANAGE_ROLES = "manage_roles"


class Principal(BaseModel):
    """The authenticated caller."""
    id: str
    role: UserRole
    email: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class AccessFacts(BaseModel):
    is_owner: bool = False
    is_member: bool = False

    def relations(self) -> Set[str]:
        held = {ANY}
        if self.is_owner:
            held.add(OWNER)
        if self.is_member:
            held.add(MEMBER)
        return held


def is_allowed(
    principal: Principal,
    resource: ResourceType,
    action: Action,
    facts: Optional[AccessFacts] = None,
) -> bool:
    rule = ACCESS_RULES.get(resource.value)
    if rule is None:
        logger.warning("No access rule for resource %s; denying", resource.value)
        return False
    required = rule["actions"].get(action.value)
    if required is None:
        logger.warning("No access rule for %s:%s; denying", resource.value, action.value)
        return False
    if rule["admin_override"] and principal.is_admin:
        return True
    held = (facts or AccessFacts()).relations()
    return bool(required & held)


def ensure_allowed(
    principal: Principal,
    resource: ResourceType,
    action: Action,
    facts: Optional[AccessFacts] = None,
    message: Optional[str] = None,
) -> None:
    """Raise Forbidden unless is_allowed()."""
    if is_allowed(principal, resource, action, facts):
        return
    logger.warning(
        "Access denied: user=%s role=%s %s:%s",
        principal.id, principal.role.value, resource.value, action.value,
    )
    raise Forbidden(message or f"You do not have permission to {action.value.replace('_', ' ')} this {resource.value.replace('_', ' ')}")
