"""Layout engine that turns drop events into validated placements."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bento_designer.domain.factories import create_placed_item
from bento_designer.domain.geometry import Position, Size, contains_point
from bento_designer.domain.models import Box, Item, Partition, PlacedItem
from bento_designer.services.placement import check_rectangle

PARTITION_NOT_FOUND = "partition not found"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DropEvent:
    """An item dropped at a position inside a partition."""

    item_id: str
    partition_id: str
    position: Position


@dataclass(frozen=True)
class PlacementOutcome:
    """Result of a placement attempt."""

    success: bool
    placed_item: PlacedItem | None = None
    error: str | None = None


def locate_partition(box: Box, point: Position) -> Partition | None:
    """Return the first partition whose bounds contain the point."""
    for partition in box.partitions:
        if contains_point(partition.bounds, point):
            return partition
    return None


def place(  # noqa: PLR0913
    box: Box,
    item_id: str,
    partition_id: str,
    position: Position,
    size: Size,
    existing: Sequence[PlacedItem],
) -> PlacementOutcome:
    """Build and validate a placement without touching ``existing``."""
    partition = box.get_partition(partition_id)
    if partition is None:
        _logger.info("Placement rejected: partition_id=%s not found", partition_id)
        return PlacementOutcome(success=False, error=PARTITION_NOT_FOUND)

    placed_item = create_placed_item(
        item_id=item_id,
        partition_id=partition_id,
        position=position,
        size=size,
    )
    result = check_rectangle(position, size, partition, existing)
    if not result.can_place:
        _logger.info(
            "Placement rejected: item_id=%s partition_id=%s reason=%s",
            item_id,
            partition_id,
            result.reason,
        )
        return PlacementOutcome(success=False, error=result.reason)
    return PlacementOutcome(success=True, placed_item=placed_item)


def place_drop(
    box: Box, item: Item, drop: DropEvent, existing: Sequence[PlacedItem]
) -> PlacementOutcome:
    """Place a dropped item using its default footprint."""
    return place(
        box,
        item_id=drop.item_id,
        partition_id=drop.partition_id,
        position=drop.position,
        size=item.default_size,
        existing=existing,
    )
