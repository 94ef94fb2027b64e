import logging
from typing import List

from supabase import Client

from app.core.errors import NotFound, ValidationError
from app.core.models import new_id, utcnow
from app.modules.tags.models import Tag, TaskTag
from app.modules.tags.repository import TagRepository, TaskTagRepository
from app.modules.tags.schemas import TagCreate, TagUpdate

logger = logging.getLogger(__name__)


class TagService:
    def __init__(self, supabase: Client):
        self.repository = TagRepository(supabase)
        self.task_tags = TaskTagRepository(supabase)

    def list_tags(self) -> List[Tag]:
        return self.repository.list_all()

    def get_tag(self, tag_id: str) -> Tag:
        tag = self.repository.find_by_id(tag_id)
        if tag is None:
            raise NotFound(f"Tag with id {tag_id} not found")
        return tag

    def create_tag(self, data: TagCreate) -> Tag:
        if self.repository.find_by_name(data.name) is not None:
            raise ValidationError("Tag with this name already exists")
        now = utcnow()
        tag = self.repository.create(Tag(
            id=new_id(),
            name=data.name,
            color=data.color,
            description=data.description,
            created_at=now,
            updated_at=now,
        ))
        logger.info("Tag %s created (%s)", tag.id, tag.name)
        return tag

    def update_tag(self, tag_id: str, data: TagUpdate) -> Tag:
        tag = self.get_tag(tag_id)
        if data.name is not None:
            existing = self.repository.find_by_name(data.name)
            if existing is not None and existing.id != tag.id:
                raise ValidationError("Tag with this name already exists")
        return self.repository.update(tag.apply(data.model_dump(exclude_none=True)))

    def delete_tag(self, tag_id: str) -> None:
        tag = self.get_tag(tag_id)
        self.task_tags.delete_by_tag(tag.id)
        self.repository.delete(tag.id)

    def get_task_tags(self, task_id: str) -> List[Tag]:
        tags = self.repository.find_by_ids(self.task_tags.tag_ids_for_task(task_id))
        return sorted(tags, key=lambda t: t.name)

    def add_tag_to_task(self, task_id: str, tag_id: str) -> List[Tag]:
        self.get_tag(tag_id)
        if tag_id not in self.task_tags.tag_ids_for_task(task_id):
            self.task_tags.create(TaskTag(id=new_id(), task_id=task_id, tag_id=tag_id, created_at=utcnow()))
        return self.get_task_tags(task_id)

    def remove_tag_from_task(self, task_id: str, tag_id: str) -> None:
        if not self.task_tags.remove(task_id, tag_id):
            raise NotFound("Tag is not attached to this task")

    def set_task_tags(self, task_id: str, tag_ids: List[str]) -> List[Tag]:
        """Replace the task's tags with exactly `tag_ids`"""
        unique_ids = list(dict.fromkeys(tag_ids))
        found = {tag.id for tag in self.repository.find_by_ids(unique_ids)}
        for tag_id in unique_ids:
            if tag_id not in found:
                raise NotFound(f"Tag {tag_id} not found")
        self.task_tags.delete_by_task(task_id)
        now = utcnow()
        for tag_id in unique_ids:
            self.task_tags.create(TaskTag(id=new_id(), task_id=task_id, tag_id=tag_id, created_at=now))
        return self.get_task_tags(task_id)
