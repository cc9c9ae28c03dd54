"""Tests for the persisted placement state."""

import asyncio

from bento_designer.adapters.blob_store import BENTO_STATE_KEY, placement_repository
from bento_designer.domain.geometry import Position
from bento_designer.services.layout import PARTITION_NOT_FOUND, DropEvent
from bento_designer.services.bento_state import PlacementStateService
from bento_designer.services.placement import OVERLAPS_WITH_EXISTING
from tests.conftest import YieldingBlobStore, make_item


def test_drop_persists_placement(placement_state_service, box, blob_store) -> None:
    item = make_item(id="ingredient-001")
    rice = box.partitions[0]
    drop = DropEvent(item_id=item.id, partition_id=rice.id, position=Position(x=0, y=0))

    outcome = asyncio.run(placement_state_service.drop(box, item, drop))

    assert outcome.success
    assert BENTO_STATE_KEY in blob_store.blobs
    saved = asyncio.run(placement_state_service.load())
    assert saved == [outcome.placed_item]


def test_rejected_drop_does_not_save(placement_state_service, box, blob_store) -> None:
    item = make_item()
    rice = box.partitions[0]
    first = DropEvent(
        item_id=item.id, partition_id=rice.id, position=Position(x=0, y=0)
    )
    second = DropEvent(
        item_id=item.id, partition_id=rice.id, position=Position(x=10, y=10)
    )

    asyncio.run(placement_state_service.drop(box, item, first))
    outcome = asyncio.run(placement_state_service.drop(box, item, second))

    assert not outcome.success
    assert outcome.error == OVERLAPS_WITH_EXISTING
    assert blob_store.saves == [BENTO_STATE_KEY]
    assert len(asyncio.run(placement_state_service.load())) == 1


def test_drop_into_unknown_partition(placement_state_service, box) -> None:
    item = make_item()
    drop = DropEvent(
        item_id=item.id, partition_id="partition-missing", position=Position(x=0, y=0)
    )

    outcome = asyncio.run(placement_state_service.drop(box, item, drop))

    assert outcome.error == PARTITION_NOT_FOUND


def test_remove_and_clear(placement_state_service, box) -> None:
    item = make_item()
    rice, side = box.partitions
    drops = [
        DropEvent(item_id=item.id, partition_id=rice.id, position=Position(x=0, y=0)),
        DropEvent(
            item_id=item.id, partition_id=side.id, position=Position(x=160, y=0)
        ),
    ]
    outcomes = [
        asyncio.run(placement_state_service.drop(box, item, drop)) for drop in drops
    ]
    first_id = outcomes[0].placed_item.id

    assert asyncio.run(placement_state_service.remove(first_id)) is True
    assert asyncio.run(placement_state_service.remove(first_id)) is False
    remaining = asyncio.run(placement_state_service.load())
    assert [placed.partition_id for placed in remaining] == [side.id]

    asyncio.run(placement_state_service.clear())
    assert asyncio.run(placement_state_service.load()) == []


def test_concurrent_drops_validate_against_each_other(box) -> None:
    service = PlacementStateService(placement_repository(YieldingBlobStore()))
    item = make_item()
    rice = box.partitions[0]
    drops = [
        DropEvent(item_id=item.id, partition_id=rice.id, position=Position(x=0, y=0)),
        DropEvent(
            item_id=item.id, partition_id=rice.id, position=Position(x=10, y=10)
        ),
    ]

    async def run() -> list:
        return await asyncio.gather(
            *(service.drop(box, item, drop) for drop in drops)
        )

    outcomes = asyncio.run(run())

    assert [outcome.success for outcome in outcomes] == [True, False]
    assert outcomes[1].error == OVERLAPS_WITH_EXISTING
    saved = asyncio.run(service.load())
    assert saved == [outcomes[0].placed_item]


def test_concurrent_drops_in_free_slots_are_all_saved(box) -> None:
    service = PlacementStateService(placement_repository(YieldingBlobStore()))
    item = make_item()
    rice, side = box.partitions
    drops = [
        DropEvent(item_id=item.id, partition_id=rice.id, position=Position(x=0, y=0)),
        DropEvent(
            item_id=item.id, partition_id=side.id, position=Position(x=160, y=0)
        ),
    ]

    async def run() -> list:
        return await asyncio.gather(
            *(service.drop(box, item, drop) for drop in drops)
        )

    outcomes = asyncio.run(run())

    assert all(outcome.success for outcome in outcomes)
    assert len(asyncio.run(service.load())) == 2
