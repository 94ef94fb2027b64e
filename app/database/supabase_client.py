import logging

from postgrest.exceptions import APIError
from supabase import create_client, Client

from app.config import settings
from app.core.errors import AlreadyExists, DatabaseError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Use in scripts."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def execute(query, conflict_message: str = "Resource already exists"):
    """Run a PostgREST query, translating driver errors into domain errors."""
    try:
        return query.execute()
    except APIError as e:
        if e.code == UNIQUE_VIOLATION:
            raise AlreadyExists(conflict_message)
        logger.error("Database error (%s): %s", e.code, e.message)
        raise DatabaseError(e.message or "Database error")
