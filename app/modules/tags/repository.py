from typing import List, Optional

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.tags.models import Tag, TaskTag


class TagRepository(BaseRepository[Tag]):
    table = "tags"
    model = Tag
    conflict_message = "Tag with this name already exists"

    def list_all(self) -> List[Tag]:
        result = execute(self.query().select("*").order("name"))
        return self._many(result)

    def find_by_name(self, name: str) -> Optional[Tag]:
        """Exact, case-sensitive match"""
        result = execute(self.query().select("*").eq("name", name).limit(1))
        return self._one(result)


class TaskTagRepository(BaseRepository[TaskTag]):
    table = "task_tags"
    model = TaskTag
    conflict_message = "Tag is already attached to this task"

    def tag_ids_for_task(self, task_id: str) -> List[str]:
        result = execute(self.query().select("tag_id").eq("task_id", task_id))
        return [row["tag_id"] for row in (result.data or [])]

    def remove(self, task_id: str, tag_id: str) -> bool:
        result = execute(
            self.query()
            .delete()
            .eq("task_id", task_id)
            .eq("tag_id", tag_id)
        )
        return bool(result.data)

    def delete_by_task(self, task_id: str) -> None:
        execute(self.query().delete().eq("task_id", task_id))

    def delete_by_tag(self, tag_id: str) -> None:
        execute(self.query().delete().eq("tag_id", tag_id))
