import logging
from typing import List

from supabase import Client

from app.core.enums import UserRole
from app.core.errors import NotFound
from app.modules.users.models import User
from app.modules.users.repository import UserRepository
from app.modules.users.schemas import UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, supabase: Client):
        self.repository = UserRepository(supabase)

    def get_user(self, user_id: str) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise NotFound(f"User with id {user_id} not found")
        return user

    def list_users(self, limit: int = 50, offset: int = 0) -> List[User]:
        return self.repository.list_users(limit=limit, offset=offset)

    def update_profile(self, user_id: str, data: UserUpdate) -> User:
        user = self.get_user(user_id)
        return self.repository.update(user.apply(data.model_dump(exclude_none=True)))

    def set_role(self, user_id: str, role: UserRole) -> User:
        """Change a user's global role (admin operation)"""
        user = self.get_user(user_id)
        updated = self.repository.update(user.apply({"role": role}))
        logger.info("User %s role set to %s", user_id, role.value)
        return updated
