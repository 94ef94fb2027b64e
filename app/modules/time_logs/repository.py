import datetime as dt
from typing import List, Optional

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.time_logs.models import TimeLog


class TimeLogRepository(BaseRepository[TimeLog]):
    table = "time_logs"
    model = TimeLog

    def find_by_user(
        self,
        user_id: str,
        start_date: Optional[dt.date] = None,
        end_date: Optional[dt.date] = None,
    ) -> List[TimeLog]:
        query = self.query().select("*").eq("user_id", user_id)
        if start_date:
            query = query.gte("date", start_date.isoformat())
        if end_date:
            query = query.lte("date", end_date.isoformat())
        result = execute(query.order("date", desc=True))
        return self._many(result)

    def find_by_task(self, task_id: str) -> List[TimeLog]:
        result = execute(
            self.query()
            .select("*")
            .eq("task_id", task_id)
            .order("date", desc=True)
        )
        return self._many(result)
