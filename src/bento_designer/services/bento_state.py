"""Service for the persisted placed-item collection."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from bento_designer.domain.models import Box, Item, PlacedItem
from bento_designer.services.layout import DropEvent, PlacementOutcome, place_drop
from bento_designer.services.placement import add_placed_item, remove_placed_item

_logger = logging.getLogger(__name__)


class PlacementRepository(Protocol):
    """Persistence interface for placed items."""

    async def load(self) -> list[PlacedItem]:
        """Return the saved placements, or an empty list when nothing is stored."""

    async def save(self, placed_items: list[PlacedItem]) -> None:
        """Replace the saved placements."""

    async def clear(self) -> None:
        """Delete the saved placements."""


@dataclass
class PlacementStateService:
    """Loads, updates and saves the placement snapshot.

    Writes are serialized so each load, change and save runs as one unit.
    """

    repository: PlacementRepository
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def load(self) -> list[PlacedItem]:
        return await self.repository.load()

    async def save(self, placed_items: list[PlacedItem]) -> None:
        async with self._lock:
            await self.repository.save(placed_items)

    async def clear(self) -> None:
        async with self._lock:
            await self.repository.clear()

    async def drop(self, box: Box, item: Item, drop: DropEvent) -> PlacementOutcome:
        """Place a dropped item against the saved snapshot and persist on success."""
        async with self._lock:
            placed_items = await self.repository.load()
            outcome = place_drop(box, item, drop, placed_items)
            if outcome.success and outcome.placed_item is not None:
                updated = add_placed_item(placed_items, outcome.placed_item)
                await self.repository.save(updated)
                _logger.info(
                    "Placed item: id=%s item_id=%s partition_id=%s",
                    outcome.placed_item.id,
                    item.id,
                    drop.partition_id,
                )
        return outcome

    async def remove(self, placed_item_id: str) -> bool:
        """Remove a placement; returns False when it was not saved."""
        async with self._lock:
            placed_items = await self.repository.load()
            remaining = remove_placed_item(placed_items, placed_item_id)
            if remaining is placed_items:
                return False
            await self.repository.save(list(remaining))
        return True
