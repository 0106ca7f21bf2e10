import logging
from typing import Optional

from supabase import create_client, Client
from app.config import settings

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Process-wide Supabase handle: built once at startup, released at shutdown."""

    _client: Optional[Client] = None

    @classmethod
    def init(cls) -> Client:
        if cls._client is None:
            # Service role key bypasses RLS; the API enforces ownership itself.
            key = settings.supabase_service_role_key or settings.supabase_key
            cls._client = create_client(settings.supabase_url, key)
            logger.info("Supabase client initialised for %s", settings.supabase_url)
        return cls._client

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            return cls.init()
        return cls._client

    @classmethod
    def close(cls):
        if cls._client is not None:
            logger.info("Releasing Supabase client")
        cls._client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()
