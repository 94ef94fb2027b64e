from typing import List

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.attachments.models import Attachment


class AttachmentRepository(BaseRepository[Attachment]):
    table = "attachments"
    model = Attachment

    def find_by_task(self, task_id: str) -> List[Attachment]:
        result = execute(
            self.query()
            .select("*")
            .eq("task_id", task_id)
            .order("created_at", desc=True)
        )
        return self._many(result)
