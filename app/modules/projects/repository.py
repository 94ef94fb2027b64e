from typing import List, Optional

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.projects.models import Milestone, Project, ProjectMember


class ProjectRepository(BaseRepository[Project]):
    table = "projects"
    model = Project

    def list_all(self) -> List[Project]:
        result = execute(self.query().select("*").order("created_at", desc=True))
        return self._many(result)

    def find_by_owner(self, owner_id: str) -> List[Project]:
        result = execute(
            self.query()
            .select("*")
            .eq("owner_id", owner_id)
            .order("created_at", desc=True)
        )
        return self._many(result)

    def find_accessible_by_user(self, user_id: str) -> List[Project]:
        """Projects the user owns plus projects they are a member of, each once."""
        projects = {p.id: p for p in self.find_by_owner(user_id)}
        member_ids = [pid for pid in ProjectMemberRepository(self.supabase).project_ids_for_user(user_id) if pid not in projects]
        for project in self.find_by_ids(member_ids):
            projects[project.id] = project
        return sorted(projects.values(), key=lambda p: p.created_at, reverse=True)

    def accessible_ids(self, user_id: str) -> List[str]:
        return [p.id for p in self.find_accessible_by_user(user_id)]

    def is_owner(self, project_id: str, user_id: str) -> bool:
        result = execute(
            self.query()
            .select("id")
            .eq("id", project_id)
            .eq("owner_id", user_id)
            .limit(1)
        )
        return bool(result.data)

    def is_member(self, project_id: str, user_id: str) -> bool:
        return ProjectMemberRepository(self.supabase).find_membership(project_id, user_id) is not None

    def can_user_access(self, project_id: str, user_id: str) -> bool:
        return self.is_owner(project_id, user_id) or self.is_member(project_id, user_id)


class ProjectMemberRepository(BaseRepository[ProjectMember]):
    table = "project_members"
    model = ProjectMember
    conflict_message = "User is already a member of this project"

    def list_by_project(self, project_id: str) -> List[ProjectMember]:
        result = execute(
            self.query()
            .select("*")
            .eq("project_id", project_id)
            .order("joined_at")
        )
        return self._many(result)

    def project_ids_for_user(self, user_id: str) -> List[str]:
        result = execute(self.query().select("project_id").eq("user_id", user_id))
        return [row["project_id"] for row in (result.data or [])]

    def find_membership(self, project_id: str, user_id: str) -> Optional[ProjectMember]:
        result = execute(
            self.query()
            .select("*")
            .eq("project_id", project_id)
            .eq("user_id", user_id)
            .limit(1)
        )
        return self._one(result)

    def remove(self, project_id: str, user_id: str) -> bool:
        result = execute(
            self.query()
            .delete()
            .eq("project_id", project_id)
            .eq("user_id", user_id)
        )
        return bool(result.data)

    def delete_by_project(self, project_id: str) -> None:
        execute(self.query().delete().eq("project_id", project_id))


class MilestoneRepository(BaseRepository[Milestone]):
    table = "milestones"
    model = Milestone

    def list_by_project(self, project_id: str) -> List[Milestone]:
        result = execute(
            self.query()
            .select("*")
            .eq("project_id", project_id)
            .order("due_date")
        )
        return self._many(result)
