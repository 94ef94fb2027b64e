from typing import Generic, List, Optional, Type, TypeVar

from supabase import Client

from app.core.errors import DatabaseError
from app.core.models import Entity
from app.database.supabase_client import execute

M = TypeVar("M", bound=Entity)


class BaseRepository(Generic[M]):
    """Supabase-backed table access shared by the module repositories."""

    table: str
    model: Type[M]
    conflict_message = "Resource already exists"

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def query(self):
        return self.supabase.table(self.table)

    def _one(self, result) -> Optional[M]:
        if not result.data:
            return None
        return self.model(**result.data[0])

    def _many(self, result) -> List[M]:
        return [self.model(**row) for row in (result.data or [])]

    def find_by_id(self, entity_id: str) -> Optional[M]:
        result = execute(self.query().select("*").eq("id", entity_id).limit(1))
        return self._one(result)

    def find_by_ids(self, entity_ids: List[str]) -> List[M]:
        if not entity_ids:
            return []
        result = execute(self.query().select("*").in_("id", list(entity_ids)))
        return self._many(result)

    def create(self, entity: M) -> M:
        result = execute(self.query().insert(entity.model_dump(mode="json")), self.conflict_message)
        created = self._one(result)
        if created is None:
            raise DatabaseError(f"Failed to insert into {self.table}")
        return created

    def update(self, entity: M) -> M:
        payload = entity.model_dump(mode="json", exclude={"id", "created_at"})
        result = execute(self.query().update(payload).eq("id", entity.id), self.conflict_message)
        updated = self._one(result)
        if updated is None:
            raise DatabaseError(f"Failed to update {self.table} row {entity.id}")
        return updated

    def delete(self, entity_id: str) -> bool:
        result = execute(self.query().delete().eq("id", entity_id))
        return bool(result.data)
