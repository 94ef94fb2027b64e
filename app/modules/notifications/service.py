import logging
from typing import List, Optional

from supabase import Client

from app.core.enums import NotificationType
from app.core.models import new_id, utcnow
from app.modules.notifications.models import Notification
from app.modules.notifications.repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, supabase: Client):
        self.repository = NotificationRepository(supabase)

    def notify(
        self,
        user_id: str,
        notification_type: NotificationType,
        title: str,
        message: str,
        link: Optional[str] = None,
    ) -> Notification:
        notification = Notification(
            id=new_id(),
            user_id=user_id,
            notification_type=notification_type,
            title=title,
            message=message,
            link=link,
            created_at=utcnow(),
        )
        logger.info("Notification %s sent to user %s", notification_type.value, user_id)
        return self.repository.create(notification)

    def list_notifications(self, user_id: str, unread_only: bool = False, limit: int = 50, offset: int = 0) -> List[Notification]:
        return self.repository.find_by_user(user_id, unread_only=unread_only, limit=limit, offset=offset)

    def unread_count(self, user_id: str) -> int:
        return self.repository.count_unread(user_id)

    def mark_read(self, notification: Notification) -> Notification:
        if notification.is_read:
            return notification
        return self.repository.update(notification.mark_read())

    def mark_all_read(self, user_id: str) -> int:
        return self.repository.mark_all_read(user_id)

    def delete(self, notification: Notification) -> None:
        self.repository.delete(notification.id)
