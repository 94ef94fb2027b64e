from typing import List, Optional

from app.database.repository import BaseRepository
from app.database.supabase_client import execute
from app.modules.users.models import User


class UserRepository(BaseRepository[User]):
    table = "users"
    model = User
    conflict_message = "User with this email already exists"

    def find_by_email(self, email: str) -> Optional[User]:
        result = execute(self.query().select("*").eq("email", email).limit(1))
        return self._one(result)

    def list_users(self, limit: int = 50, offset: int = 0) -> List[User]:
        result = execute(
            self.query()
            .select("*")
            .order("name")
            .limit(limit)
            .offset(offset)
        )
        return self._many(result)
