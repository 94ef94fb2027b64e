import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from app.core.authorization import Principal
from app.core.models import new_id, utcnow
from app.modules.activities.models import ActivityLog
from app.modules.activities.repository import ActivityLogRepository

logger = logging.getLogger(__name__)


class ActivityService:
    def __init__(self, supabase: Client):
        self.repository = ActivityLogRepository(supabase)

    def record(
        self,
        user_id: Optional[str],
        action: str,
        entity_type: str,
        entity_id: str,
        project_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> ActivityLog:
        log = ActivityLog(
            id=new_id(),
            user_id=user_id,
            project_id=project_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
            created_at=utcnow(),
        )
        logger.debug("Activity %s %s %s by %s", action, entity_type, entity_id, user_id)
        return self.repository.create(log)

    def list_activities(
        self,
        principal: Principal,
        accessible_project_ids: Optional[List[str]],
        limit: int = 50,
        offset: int = 0,
        project_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> List[ActivityLog]:
        """Admins and project-scoped queries read directly; otherwise limited to the caller's projects and own actions."""
        if principal.is_admin or project_id:
            return self.repository.list_logs(limit=limit, offset=offset, project_id=project_id, user_id=user_id)
        return self.repository.list_visible(
            accessible_project_ids or [], principal.id, limit=limit, offset=offset, user_id=user_id
        )
