import logging
from typing import List, Optional

from supabase import Client

from app.core.authorization import Principal
from app.core.enums import NotificationType, TaskStatus
from app.core.errors import NotFound, ValidationError
from app.core.models import new_id, utcnow
from app.modules.activities.service import ActivityService
from app.modules.notifications.service import NotificationService
from app.modules.projects.repository import MilestoneRepository
from app.modules.tasks.models import Task
from app.modules.tasks.repository import TaskRepository
from app.modules.tasks.schemas import TaskCreate, TaskUpdate
from app.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, supabase: Client):
        self.repository = TaskRepository(supabase)
        self.milestones = MilestoneRepository(supabase)
        self.users = UserRepository(supabase)
        self.notifications = NotificationService(supabase)
        self.activity = ActivityService(supabase)

    def get_task(self, task_id: str) -> Task:
        task = self.repository.find_by_id(task_id)
        if task is None:
            raise NotFound(f"Task with id {task_id} not found")
        return task

    def list_tasks(
        self,
        principal: Principal,
        status: Optional[TaskStatus] = None,
        assignee_id: Optional[str] = None,
    ) -> List[Task]:
        if principal.is_admin:
            return self.repository.list_all(status=status, assignee_id=assignee_id)
        return self.repository.find_accessible_by_user(principal.id, status=status, assignee_id=assignee_id)

    def list_project_tasks(self, project_id: str, status: Optional[TaskStatus] = None) -> List[Task]:
        return self.repository.find_by_project(project_id, status=status)

    def _check_references(self, project_id: str, milestone_id: Optional[str], assignee_id: Optional[str]) -> None:
        if milestone_id:
            milestone = self.milestones.find_by_id(milestone_id)
            if milestone is None or milestone.project_id != project_id:
                raise ValidationError("Milestone does not belong to this project")
        if assignee_id and self.users.find_by_id(assignee_id) is None:
            raise NotFound(f"User with id {assignee_id} not found")

    def create_task(self, data: TaskCreate, actor_id: str) -> Task:
        self._check_references(data.project_id, data.milestone_id, data.assignee_id)
        now = utcnow()
        task = self.repository.create(Task(
            id=new_id(),
            project_id=data.project_id,
            milestone_id=data.milestone_id,
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            assignee_id=data.assignee_id,
            due_date=data.due_date,
            estimated_hours=data.estimated_hours,
            created_at=now,
            updated_at=now,
        ))
        self.activity.record(actor_id, "created", "task", task.id, project_id=task.project_id, details={"title": task.title})
        if task.assignee_id and task.assignee_id != actor_id:
            self._notify_assigned(task)
        logger.info("Task %s created in project %s by %s", task.id, task.project_id, actor_id)
        return task

    def update_task(self, task: Task, data: TaskUpdate, actor_id: str) -> Task:
        changes = data.model_dump(exclude_none=True)
        self._check_references(task.project_id, changes.get("milestone_id"), changes.get("assignee_id"))
        status = changes.pop("status", None)
        updated = task.apply(changes)
        if status is not None and status != task.status:
            updated = updated.set_status(status)
        updated = self.repository.update(updated)

        self.activity.record(
            actor_id, "updated", "task", task.id,
            project_id=task.project_id,
            details={"fields": sorted(data.model_dump(exclude_none=True).keys())},
        )
        if updated.assignee_id and updated.assignee_id != task.assignee_id and updated.assignee_id != actor_id:
            self._notify_assigned(updated)
        if status == TaskStatus.DONE and task.status != TaskStatus.DONE and updated.assignee_id and updated.assignee_id != actor_id:
            self.notifications.notify(
                updated.assignee_id,
                NotificationType.TASK_COMPLETED,
                "Task completed",
                f"Task '{updated.title}' was marked as done",
                link=f"/tasks/{updated.id}",
            )
        return updated

    def delete_task(self, task: Task, actor_id: str) -> None:
        self.repository.delete(task.id)
        self.activity.record(actor_id, "deleted", "task", task.id, project_id=task.project_id, details={"title": task.title})
        logger.info("Task %s deleted by %s", task.id, actor_id)

    def _notify_assigned(self, task: Task) -> None:
        self.notifications.notify(
            task.assignee_id,
            NotificationType.TASK_ASSIGNED,
            "New task assigned",
            f"You have been assigned to task '{task.title}'",
            link=f"/tasks/{task.id}",
        )
