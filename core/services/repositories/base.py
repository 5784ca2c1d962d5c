"""Base repository with shared Supabase client."""
from typing import Any

from supabase._async.client import AsyncClient

from core.errors import RemoteCallError
from core.logging import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """Base class for all repositories.

    Takes the async Supabase client (or any object exposing the same
    table()/execute() surface) so call sites can be tested against a fake.
    """

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def _execute(self, query: Any, operation: str) -> Any:
        """Run a query, converting any client failure into RemoteCallError."""
        try:
            return await query.execute()
        except Exception as e:
            logger.error(f"{operation} failed: {e}")
            raise RemoteCallError(operation, e) from e
