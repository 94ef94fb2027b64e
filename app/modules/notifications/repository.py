from typing import List

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.notifications.models import Notification


class NotificationRepository(BaseRepository[Notification]):
    table = "notifications"
    model = Notification

    def find_by_user(self, user_id: str, unread_only: bool = False, limit: int = 50, offset: int = 0) -> List[Notification]:
        query = self.query().select("*").eq("user_id", user_id)
        if unread_only:
            query = query.eq("is_read", False)
        result = execute(
            query.order("created_at", desc=True)
            .limit(limit)
            .offset(offset)
        )
        return self._many(result)

    def count_unread(self, user_id: str) -> int:
        result = execute(
            self.query()
            .select("id")
            .eq("user_id", user_id)
            .eq("is_read", False)
        )
        return len(result.data or [])

    def mark_all_read(self, user_id: str) -> int:
        result = execute(
            self.query()
            .update({"is_read": True})
            .eq("user_id", user_id)
            .eq("is_read", False)
        )
        return len(result.data or [])
