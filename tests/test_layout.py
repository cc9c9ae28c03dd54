"""Tests for drop handling in the layout engine."""

from bento_designer.domain.factories import create_placed_item
from bento_designer.domain.geometry import Position, Size
from bento_designer.services.layout import (
    PARTITION_NOT_FOUND,
    DropEvent,
    locate_partition,
    place,
    place_drop,
)
from bento_designer.services.placement import OVERLAPS_WITH_EXISTING
from tests.conftest import make_box, make_item


def test_locate_partition_by_point() -> None:
    box = make_box()
    rice, side = box.partitions

    assert locate_partition(box, Position(x=10, y=10)) == rice
    assert locate_partition(box, Position(x=200, y=10)) == side


def test_locate_partition_shared_edge_returns_first() -> None:
    box = make_box()

    assert locate_partition(box, Position(x=150, y=100)) == box.partitions[0]


def test_locate_partition_outside_box() -> None:
    assert locate_partition(make_box(), Position(x=301, y=10)) is None


def test_place_unknown_partition() -> None:
    outcome = place(
        make_box(),
        item_id="ingredient-001",
        partition_id="partition-missing",
        position=Position(x=0, y=0),
        size=Size(width=10, height=10),
        existing=[],
    )

    assert not outcome.success
    assert outcome.error == PARTITION_NOT_FOUND
    assert outcome.placed_item is None


def test_place_drop_uses_item_default_size() -> None:
    box = make_box()
    side = box.partitions[1]
    item = make_item(id="ingredient-007", default_size=Size(width=20, height=20))
    drop = DropEvent(
        item_id=item.id, partition_id=side.id, position=Position(x=160, y=10)
    )

    outcome = place_drop(box, item, drop, [])

    assert outcome.success
    assert outcome.placed_item is not None
    assert outcome.placed_item.size == Size(width=20, height=20)
    assert outcome.placed_item.partition_id == side.id
    assert outcome.placed_item.item_id == "ingredient-007"


def test_place_drop_rejects_overlap_without_mutating_existing() -> None:
    box = make_box()
    rice = box.partitions[0]
    existing = [
        create_placed_item(
            "ingredient-001", rice.id, Position(x=50, y=50), Size(width=40, height=30)
        )
    ]
    snapshot = list(existing)
    item = make_item()
    drop = DropEvent(
        item_id=item.id, partition_id=rice.id, position=Position(x=60, y=60)
    )

    outcome = place_drop(box, item, drop, existing)

    assert not outcome.success
    assert outcome.error == OVERLAPS_WITH_EXISTING
    assert existing == snapshot
