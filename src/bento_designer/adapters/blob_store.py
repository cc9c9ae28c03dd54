"""Repositories that keep record collections as JSON blobs in a key-value store."""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from bento_designer.domain.models import Item, PlacedItem
from bento_designer.domain.records import (
    RecordError,
    item_from_record,
    item_to_record,
    placed_item_from_record,
    placed_item_to_record,
)
from bento_designer.domain.validation import (
    ValidationResult,
    validate_item,
    validate_placed_item,
)

USER_ITEMS_KEY = "user_items"
BENTO_STATE_KEY = "bento_state"

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Key-value store holding one text payload per key."""

    async def load(self, key: str) -> str | None:
        """Return the payload stored under the key, if any."""

    async def save(self, key: str, payload: str) -> None:
        """Store the payload under the key, replacing any previous value."""

    async def delete(self, key: str) -> None:
        """Remove the key."""


@dataclass
class BlobCollectionRepository(Generic[T]):
    """Stores a whole collection under a single key."""

    store: BlobStore
    key: str
    encode: Callable[[T], dict[str, object]]
    decode: Callable[[Mapping[str, object]], T]
    validate: Callable[[T], ValidationResult]

    async def load(self) -> list[T]:
        """Return the stored collection, or an empty list when missing or unreadable."""
        payload = await self.store.load(self.key)
        if payload is None:
            return []
        try:
            records = json.loads(payload)
            if not isinstance(records, list):
                raise RecordError(f"{self.key} payload must be a list")
            return [self._decode_valid(record) for record in records]
        except (json.JSONDecodeError, RecordError) as exc:
            _logger.warning(
                "Discarding unreadable payload: key=%s error=%s", self.key, exc
            )
            return []

    async def save(self, entries: list[T]) -> None:
        """Overwrite the stored collection."""
        payload = json.dumps([self.encode(entry) for entry in entries])
        await self.store.save(self.key, payload)

    async def clear(self) -> None:
        await self.store.delete(self.key)

    def _decode_valid(self, record: Mapping[str, object]) -> T:
        entry = self.decode(record)
        result = self.validate(entry)
        if not result.is_valid:
            raise RecordError(", ".join(result.errors))
        return entry


def item_repository(store: BlobStore) -> BlobCollectionRepository[Item]:
    """Repository for user-added items."""
    return BlobCollectionRepository(
        store=store,
        key=USER_ITEMS_KEY,
        encode=item_to_record,
        decode=item_from_record,
        validate=validate_item,
    )


def placement_repository(store: BlobStore) -> BlobCollectionRepository[PlacedItem]:
    """Repository for the placed-item snapshot."""
    return BlobCollectionRepository(
        store=store,
        key=BENTO_STATE_KEY,
        encode=placed_item_to_record,
        decode=placed_item_from_record,
        validate=validate_placed_item,
    )
