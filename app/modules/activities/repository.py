from typing import List, Optional

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.activities.models import ActivityLog


class ActivityLogRepository(BaseRepository[ActivityLog]):
    table = "activity_logs"
    model = ActivityLog

    def list_logs(
        self,
        limit: int = 50,
        offset: int = 0,
        project_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> List[ActivityLog]:
        query = self.query().select("*")
        if project_id:
            query = query.eq("project_id", project_id)
        if user_id:
            query = query.eq("user_id", user_id)
        result = execute(
            query.order("created_at", desc=True)
            .limit(limit)
            .offset(offset)
        )
        return self._many(result)

    def list_visible(
        self,
        project_ids: List[str],
        viewer_id: str,
        limit: int = 50,
        offset: int = 0,
        user_id: Optional[str] = None,
    ) -> List[ActivityLog]:
        """Logs on any of `project_ids` or performed by `viewer_id`, newest first, optionally only those by `user_id`."""
        window = limit + offset
        rows = {}
        if project_ids:
            query = self.query().select("*").in_("project_id", project_ids)
            if user_id:
                query = query.eq("user_id", user_id)
            result = execute(query.order("created_at", desc=True).limit(window))
            rows.update({log.id: log for log in self._many(result)})
        if user_id is None or user_id == viewer_id:
            result = execute(
                self.query()
                .select("*")
                .eq("user_id", viewer_id)
                .order("created_at", desc=True)
                .limit(window)
            )
            rows.update({log.id: log for log in self._many(result)})
        ordered = sorted(rows.values(), key=lambda log: log.created_at, reverse=True)
        return ordered[offset:window]
