"""Placement validation and pure operations on placed-item collections."""

from collections.abc import Sequence
from dataclasses import dataclass

from bento_designer.domain.geometry import Position, Size, fits_within, overlaps
from bento_designer.domain.models import Item, Partition, PlacedItem

EXTENDS_BEYOND_BOUNDS = "extends beyond partition bounds"
OVERLAPS_WITH_EXISTING = "overlaps with existing ingredient"


@dataclass(frozen=True)
class PlacementResult:
    """Whether a candidate placement is legal, with the reason when it is not."""

    can_place: bool
    reason: str | None = None


def can_place(
    item: Item,
    partition: Partition,
    position: Position,
    existing: Sequence[PlacedItem],
) -> PlacementResult:
    """Check whether the item fits at the position without overlapping others."""
    return check_rectangle(position, item.default_size, partition, existing)


def check_rectangle(
    position: Position,
    size: Size,
    partition: Partition,
    existing: Sequence[PlacedItem],
) -> PlacementResult:
    """Validate a rectangle against a partition and its current placements.

    Bounds are checked before overlaps. Only placements in the same partition
    are considered.
    """
    if not fits_within(position, size, partition.bounds):
        return PlacementResult(can_place=False, reason=EXTENDS_BEYOND_BOUNDS)
    for placed in placed_items_in_partition(existing, partition.id):
        if overlaps(position, size, placed.position, placed.size):
            return PlacementResult(can_place=False, reason=OVERLAPS_WITH_EXISTING)
    return PlacementResult(can_place=True)


def add_placed_item(
    placed_items: Sequence[PlacedItem], placed_item: PlacedItem
) -> list[PlacedItem]:
    """Return a new list with the placement appended."""
    return [*placed_items, placed_item]


def remove_placed_item(
    placed_items: Sequence[PlacedItem], placed_item_id: str
) -> Sequence[PlacedItem]:
    """Return a new list without the placement, or the input when it is absent."""
    if not any(placed.id == placed_item_id for placed in placed_items):
        return placed_items
    return [placed for placed in placed_items if placed.id != placed_item_id]


def placed_items_in_partition(
    placed_items: Sequence[PlacedItem], partition_id: str
) -> list[PlacedItem]:
    """Return the placements that belong to a partition."""
    return [placed for placed in placed_items if placed.partition_id == partition_id]
