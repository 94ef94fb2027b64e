"""
Core dependencies for route protection and access checking.

Every check_* helper loads the resource first (NotFound when missing), then
evaluates the access rule for the requested action (Forbidden when denied),
and returns the loaded resource so routes do not fetch it twice.
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.authorization import AccessFacts, Action, Principal, ResourceType, ensure_allowed
from app.core.errors import NotFound, Unauthorized
from app.core.security import decode_access_token
from app.database.supabase_client import get_supabase
from app.modules.attachments.models import Attachment
from app.modules.attachments.repository import AttachmentRepository
from app.modules.notifications.models import Notification
from app.modules.notifications.repository import NotificationRepository
from app.modules.projects.models import Project
from app.modules.projects.repository import ProjectRepository
from app.modules.tasks.models import Task
from app.modules.tasks.repository import TaskRepository
from app.modules.teams.models import Team
from app.modules.teams.repository import TeamRepository
from app.modules.time_logs.models import TimeLog
from app.modules.time_logs.repository import TimeLogRepository
from app.modules.users.repository import UserRepository
from supabase import Client
from typing import Optional
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    supabase: Client = Depends(get_supabase)
) -> Principal:
    """Resolve the bearer token to the calling user"""
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing authorization token")
    claims = decode_access_token(credentials.credentials)
    user = UserRepository(supabase).find_by_id(claims["sub"])
    if user is None:
        raise Unauthorized("User not found")
    return Principal(id=user.id, role=user.role, email=user.email)


def project_facts(project: Project, principal: Principal, supabase: Client) -> AccessFacts:
    is_owner = project.owner_id == principal.id
    if is_owner or principal.is_admin:
        return AccessFacts(is_owner=is_owner)
    return AccessFacts(is_member=ProjectRepository(supabase).is_member(project.id, principal.id))


def check_project_access(
    project_id: str,
    principal: Principal,
    supabase: Client,
    action: Action = Action.READ,
    resource: ResourceType = ResourceType.PROJECT
) -> Project:
    """Project rules; pass resource=TASK with action=CREATE to check task creation in this project"""
    project = ProjectRepository(supabase).find_by_id(project_id)
    if project is None:
        raise NotFound(f"Project with id {project_id} not found")
    ensure_allowed(principal, resource, action, project_facts(project, principal, supabase))
    return project


def check_task_access(
    task_id: str,
    principal: Principal,
    supabase: Client,
    action: Action = Action.READ,
    resource: ResourceType = ResourceType.TASK
) -> Task:
    """Task rules derive from the parent project: its owner is the task owner, its members are task members"""
    task = TaskRepository(supabase).find_by_id(task_id)
    if task is None:
        raise NotFound(f"Task with id {task_id} not found")
    project = ProjectRepository(supabase).find_by_id(task.project_id)
    if project is None:
        raise NotFound(f"Project with id {task.project_id} not found")
    ensure_allowed(principal, resource, action, project_facts(project, principal, supabase))
    return task


def check_team_access(team_id: str, principal: Principal, supabase: Client, action: Action = Action.READ) -> Team:
    repository = TeamRepository(supabase)
    team = repository.find_by_id(team_id)
    if team is None:
        raise NotFound(f"Team with id {team_id} not found")
    is_lead = team.lead_id is not None and team.lead_id == principal.id
    if is_lead or principal.is_admin:
        facts = AccessFacts(is_owner=is_lead)
    else:
        facts = AccessFacts(is_member=repository.is_member(team.id, principal.id))
    ensure_allowed(principal, ResourceType.TEAM, action, facts)
    return team


def check_notification_access(
    notification_id: str,
    principal: Principal,
    supabase: Client,
    action: Action = Action.READ
) -> Notification:
    notification = NotificationRepository(supabase).find_by_id(notification_id)
    if notification is None:
        raise NotFound(f"Notification with id {notification_id} not found")
    ensure_allowed(
        principal, ResourceType.NOTIFICATION, action,
        AccessFacts(is_owner=notification.user_id == principal.id),
        message="You can only access your own notifications",
    )
    return notification


def check_time_log_access(
    time_log_id: str,
    principal: Principal,
    supabase: Client,
    action: Action = Action.READ
) -> TimeLog:
    time_log = TimeLogRepository(supabase).find_by_id(time_log_id)
    if time_log is None:
        raise NotFound(f"Time log with id {time_log_id} not found")
    ensure_allowed(
        principal, ResourceType.TIME_LOG, action,
        AccessFacts(is_owner=time_log.user_id == principal.id),
        message="You can only access your own time logs",
    )
    return time_log


def check_attachment_access(
    attachment_id: str,
    principal: Principal,
    supabase: Client,
    action: Action = Action.READ
) -> Attachment:
    attachment = AttachmentRepository(supabase).find_by_id(attachment_id)
    if attachment is None:
        raise NotFound(f"Attachment with id {attachment_id} not found")
    check_task_access(attachment.task_id, principal, supabase, action, resource=ResourceType.ATTACHMENT)
    return attachment
