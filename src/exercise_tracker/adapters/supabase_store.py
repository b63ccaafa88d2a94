"""Supabase client lifecycle."""

import logging
from dataclasses import dataclass

from supabase import Client, create_client

logger = logging.getLogger(__name__)


@dataclass
class SupabaseStore:
    """Owns the Supabase client shared by the repositories."""

    client: Client

    @classmethod
    def create(cls, url: str, service_key: str) -> "SupabaseStore":
        """Create a store with a fresh Supabase client."""
        return cls(create_client(url, service_key))

    def close(self) -> None:
        """Release the HTTP session behind the PostgREST client."""
        self.client.postgrest.session.close()
        logger.info("Closed Supabase connection")
