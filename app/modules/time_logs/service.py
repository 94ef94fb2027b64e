import datetime as dt
import logging
from typing import List, Optional

from supabase import Client

from app.core.errors import NotFound, ValidationError
from app.core.models import new_id, utcnow
from app.modules.time_logs.models import TimeLog
from app.modules.time_logs.repository import TimeLogRepository
from app.modules.time_logs.schemas import TimeLogCreate, TimeLogUpdate

logger = logging.getLogger(__name__)


class TimeLogService:
    def __init__(self, supabase: Client):
        self.repository = TimeLogRepository(supabase)

    def get_time_log(self, time_log_id: str) -> TimeLog:
        time_log = self.repository.find_by_id(time_log_id)
        if time_log is None:
            raise NotFound(f"Time log with id {time_log_id} not found")
        return time_log

    def list_for_user(
        self,
        user_id: str,
        start_date: Optional[dt.date] = None,
        end_date: Optional[dt.date] = None,
    ) -> List[TimeLog]:
        if start_date and end_date and end_date < start_date:
            raise ValidationError("end_date cannot be before start_date")
        return self.repository.find_by_user(user_id, start_date=start_date, end_date=end_date)

    def list_for_task(self, task_id: str) -> List[TimeLog]:
        return self.repository.find_by_task(task_id)

    def create_time_log(self, data: TimeLogCreate, user_id: str) -> TimeLog:
        now = utcnow()
        time_log = self.repository.create(TimeLog(
            id=new_id(),
            task_id=data.task_id,
            user_id=user_id,
            hours=data.hours,
            date=data.date,
            description=data.description,
            created_at=now,
            updated_at=now,
        ))
        logger.info("User %s logged %.2fh on task %s", user_id, time_log.hours, time_log.task_id)
        return time_log

    def update_time_log(self, time_log: TimeLog, data: TimeLogUpdate) -> TimeLog:
        return self.repository.update(time_log.apply(data.model_dump(exclude_none=True)))

    def delete_time_log(self, time_log: TimeLog) -> None:
        self.repository.delete(time_log.id)
