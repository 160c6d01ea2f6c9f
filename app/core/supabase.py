import logging
from typing import Optional
from supabase import create_async_client, AsyncClient
from app.core.config import settings

logger = logging.getLogger(__name__)

class StoreNotConfiguredError(Exception):
    pass

class SupabaseManager:
    """
    Holds the process-wide Supabase clients that back the order store.
    Clients are created lazily on first use and reused by every request.
    """
    client: Optional[AsyncClient] = None
    service_client: Optional[AsyncClient] = None

    @classmethod
    async def get_client(cls) -> AsyncClient:
        if cls.client is None:
            url: str = settings.SUPABASE_URL
            key: str = settings.SUPABASE_KEY
            if not url or not key:
                raise StoreNotConfiguredError("SUPABASE_URL and SUPABASE_KEY must be set to reach the order store.")
            cls.client = await create_async_client(url, key)
        return cls.client

    @classmethod
    async def get_service_client(cls) -> AsyncClient:
        """
        Returns a client built with the Service Role Key when one is configured,
        so order writes are not blocked by RLS. Falls back to the standard client.
        """
        if cls.service_client is None:
            key: Optional[str] = settings.SUPABASE_SERVICE_ROLE_KEY
            if not key:
                return await cls.get_client()

            url: str = settings.SUPABASE_URL
            if not url:
                raise StoreNotConfiguredError("SUPABASE_URL must be set to reach the order store.")
            logger.info("Initializing Supabase client with Service Role Key.")
            cls.service_client = await create_async_client(url, key)

        return cls.service_client

    @classmethod
    async def connect(cls) -> AsyncClient:
        client = await cls.get_service_client()
        logger.info("Supabase client initialized.")
        return client

    @classmethod
    def reset(cls) -> None:
        cls.client = None
        cls.service_client = None

# Global instance to access the client manager
db = SupabaseManager()
