"""Supabase-backed key-value blob store."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from bento_designer.adapters.blob_store import BlobStore

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseBlobStore(BlobStore):
    """Stores one JSON payload per key in a Supabase table."""

    client: Client
    table: str = "bento_blobs"

    async def load(self, key: str) -> str | None:
        """Return the payload stored under the key, if any."""
        return await asyncio.to_thread(self._load, key)

    async def save(self, key: str, payload: str) -> None:
        """Upsert the payload for the key."""
        await asyncio.to_thread(self._save, key, payload)

    async def delete(self, key: str) -> None:
        """Delete the row for the key."""
        await asyncio.to_thread(self._delete, key)

    def _load(self, key: str) -> str | None:
        response = (
            self.client.table(self.table)
            .select("payload")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        payload = response.data[0].get("payload")
        if not isinstance(payload, str):
            _logger.warning(
                "Ignoring non-text payload: key=%s type=%s", key, type(payload).__name__
            )
            return None
        return payload

    def _save(self, key: str, payload: str) -> None:
        response = (
            self.client.table(self.table)
            .upsert(
                {
                    "key": key,
                    "payload": payload,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to save blob: {key}")

    def _delete(self, key: str) -> None:
        self.client.table(self.table).delete().eq("key", key).execute()
