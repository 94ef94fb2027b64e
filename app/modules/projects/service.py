import logging
from datetime import date
from typing import List, Optional

from supabase import Client

from app.core.authorization import Principal
from app.core.errors import NotFound, ValidationError
from app.core.models import new_id, utcnow
from app.modules.activities.service import ActivityService
from app.modules.projects.models import Milestone, Project, ProjectMember
from app.modules.projects.repository import MilestoneRepository, ProjectMemberRepository, ProjectRepository
from app.modules.projects.schemas import ProjectCreate, ProjectMemberAdd, ProjectUpdate
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)


def _check_dates(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise ValidationError("End date cannot be before start date")


class ProjectService:
    def __init__(self, supabase: Client):
        self.repository = ProjectRepository(supabase)
        self.members = ProjectMemberRepository(supabase)
        self.milestones = MilestoneRepository(supabase)
        self.users = UserRepository(supabase)
        self.activity = ActivityService(supabase)

    def get_project(self, project_id: str) -> Project:
        project = self.repository.find_by_id(project_id)
        if project is None:
            raise NotFound(f"Project with id {project_id} not found")
        return project

    def list_projects(self, principal: Principal) -> List[Project]:
        """Admins see every project; everyone else sees owned and member projects"""
        if principal.is_admin:
            return self.repository.list_all()
        return self.repository.find_accessible_by_user(principal.id)

    def create_project(self, data: ProjectCreate, owner_id: str) -> Project:
        _check_dates(data.start_date, data.end_date)
        now = utcnow()
        project = self.repository.create(Project(
            id=new_id(),
            name=data.name,
            description=data.description,
            status=data.status,
            priority=data.priority,
            start_date=data.start_date,
            end_date=data.end_date,
            budget=data.budget,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        ))
        self.activity.record(owner_id, "created", "project", project.id, project_id=project.id, details={"name": project.name})
        logger.info("Project %s created by %s", project.id, owner_id)
        return project

    def update_project(self, project: Project, data: ProjectUpdate, actor_id: str) -> Project:
        changes = data.model_dump(exclude_none=True)
        status = changes.pop("status", None)
        updated = project.apply(changes)
        if status is not None and status != project.status:
            updated = updated.set_status(status)
        _check_dates(updated.start_date, updated.end_date)
        updated = self.repository.update(updated)
        details = {"fields": sorted(data.model_dump(exclude_none=True).keys())}
        if status is not None and status != project.status:
            details["status"] = {"from": project.status.value, "to": status.value}
        self.activity.record(actor_id, "updated", "project", project.id, project_id=project.id, details=details)
        return updated

    def delete_project(self, project: Project, actor_id: str) -> None:
        self.members.delete_by_project(project.id)
        self.repository.delete(project.id)
        self.activity.record(actor_id, "deleted", "project", project.id, details={"name": project.name})
        logger.info("Project %s deleted by %s", project.id, actor_id)

    def list_members(self, project_id: str) -> List[ProjectMember]:
        return self.members.list_by_project(project_id)

    def add_member(self, project: Project, data: ProjectMemberAdd, actor_id: str) -> ProjectMember:
        if self.users.find_by_id(data.user_id) is None:
            raise NotFound(f"User with id {data.user_id} not found")
        member = self.members.create(ProjectMember(
            id=new_id(),
            project_id=project.id,
            user_id=data.user_id,
            role=data.role,
            joined_at=utcnow(),
        ))
        self.activity.record(actor_id, "member_added", "project", project.id, project_id=project.id, details={"user_id": data.user_id})
        return member

    def remove_member(self, project: Project, user_id: str, actor_id: str) -> None:
        if not self.members.remove(project.id, user_id):
            raise NotFound(f"User {user_id} is not a member of this project")
        self.activity.record(actor_id, "member_removed", "project", project.id, project_id=project.id, details={"user_id": user_id})

    def list_milestones(self, project_id: str) -> List[Milestone]:
        return self.milestones.list_by_project(project_id)
