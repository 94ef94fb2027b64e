from typing import List, Optional

from app.core.enums import TaskStatus
from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.projects.repository import ProjectRepository
from app.modules.tasks.models import Task


class TaskRepository(BaseRepository[Task]):
    table = "tasks"
    model = Task

    def _filtered(self, query, status: Optional[TaskStatus] = None, assignee_id: Optional[str] = None):
        if status is not None:
            query = query.eq("status", status.value)
        if assignee_id:
            query = query.eq("assignee_id", assignee_id)
        return query

    def list_all(self, status: Optional[TaskStatus] = None, assignee_id: Optional[str] = None) -> List[Task]:
        query = self._filtered(self.query().select("*"), status, assignee_id)
        result = execute(query.order("created_at", desc=True))
        return self._many(result)

    def find_by_project(self, project_id: str, status: Optional[TaskStatus] = None, assignee_id: Optional[str] = None) -> List[Task]:
        query = self._filtered(self.query().select("*").eq("project_id", project_id), status, assignee_id)
        result = execute(query.order("created_at", desc=True))
        return self._many(result)

    def find_by_projects(self, project_ids: List[str], status: Optional[TaskStatus] = None, assignee_id: Optional[str] = None) -> List[Task]:
        if not project_ids:
            return []
        query = self._filtered(self.query().select("*").in_("project_id", project_ids), status, assignee_id)
        result = execute(query.order("created_at", desc=True))
        return self._many(result)

    def find_accessible_by_user(self, user_id: str, status: Optional[TaskStatus] = None, assignee_id: Optional[str] = None) -> List[Task]:
        project_ids = ProjectRepository(self.supabase).accessible_ids(user_id)
        return self.find_by_projects(project_ids, status, assignee_id)

    def can_user_access(self, task_id: str, user_id: str) -> bool:
        task = self.find_by_id(task_id)
        if task is None:
            return False
        return ProjectRepository(self.supabase).can_user_access(task.project_id, user_id)

    def is_project_owner(self, task_id: str, user_id: str) -> bool:
        task = self.find_by_id(task_id)
        if task is None:
            return False
        return ProjectRepository(self.supabase).is_owner(task.project_id, user_id)
