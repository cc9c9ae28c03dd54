"""Factories that build domain records with generated identifiers."""

import secrets
import string
import time
from collections.abc import Sequence

from bento_designer.domain.geometry import Bounds, Position, Size
from bento_designer.domain.models import (
    Box,
    BoxType,
    Category,
    Color,
    Item,
    Nutrition,
    Partition,
    PartitionType,
    PlacedItem,
    Season,
)

BOX_ID_PREFIX = "bento"
PARTITION_ID_PREFIX = "partition"
PLACED_ITEM_ID_PREFIX = "placed"
ITEM_ID_PREFIX = "ingredient"
RANDOM_SUFFIX_LENGTH = 9

DEFAULT_NUTRITION = Nutrition(vitamin=0, protein=0, fiber=0)
DEFAULT_ITEM_SIZE = Size(width=40, height=30)
DEFAULT_SEASON: Season = "all"
DEFAULT_ICON = "circle"

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str) -> str:
    """Return an id formatted as ``<prefix>-<epoch millis>-<random9>``."""
    timestamp = time.time_ns() // 1_000_000
    suffix = "".join(
        secrets.choice(_SUFFIX_ALPHABET) for _ in range(RANDOM_SUFFIX_LENGTH)
    )
    return f"{prefix}-{timestamp}-{suffix}"


def create_partition(partition_type: PartitionType, bounds: Bounds) -> Partition:
    """Create a partition with a fresh id."""
    return Partition(
        id=generate_id(PARTITION_ID_PREFIX), type=partition_type, bounds=bounds
    )


def default_partitions(dimensions: Size) -> tuple[Partition, ...]:
    """Split a box vertically into a rice half and a side half."""
    half_width = dimensions.width / 2
    return (
        create_partition(
            "rice", Bounds(x=0, y=0, width=half_width, height=dimensions.height)
        ),
        create_partition(
            "side",
            Bounds(x=half_width, y=0, width=half_width, height=dimensions.height),
        ),
    )


def create_box(
    box_type: BoxType,
    dimensions: Size,
    partitions: Sequence[Partition] | None = None,
) -> Box:
    """Create a box, generating the default two partitions when none are given."""
    resolved = (
        tuple(partitions) if partitions is not None else default_partitions(dimensions)
    )
    return Box(
        id=generate_id(BOX_ID_PREFIX),
        type=box_type,
        dimensions=dimensions,
        partitions=resolved,
    )


def create_placed_item(
    item_id: str, partition_id: str, position: Position, size: Size
) -> PlacedItem:
    """Create a placement record with a fresh id."""
    return PlacedItem(
        id=generate_id(PLACED_ITEM_ID_PREFIX),
        item_id=item_id,
        partition_id=partition_id,
        position=position,
        size=size,
    )


def create_item(  # noqa: PLR0913
    *,
    name: str,
    category: Category,
    color: Color,
    id: str | None = None,  # noqa: A002
    nutrition: Nutrition | None = None,
    cooking_time: float | None = None,
    cost: float | None = None,
    season: Season | None = None,
    is_frozen: bool | None = None,
    is_ready_to_eat: bool | None = None,
    default_size: Size | None = None,
    icon: str | None = None,
) -> Item:
    """Create an item, filling omitted fields with defaults."""
    return Item(
        id=id or generate_id(ITEM_ID_PREFIX),
        name=name,
        category=category,
        color=color,
        nutrition=nutrition or DEFAULT_NUTRITION,
        cooking_time=cooking_time if cooking_time is not None else 0,
        cost=cost if cost is not None else 0,
        season=season or DEFAULT_SEASON,
        is_frozen=is_frozen if is_frozen is not None else False,
        is_ready_to_eat=is_ready_to_eat if is_ready_to_eat is not None else False,
        default_size=default_size or DEFAULT_ITEM_SIZE,
        icon=icon or DEFAULT_ICON,
    )
