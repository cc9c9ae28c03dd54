"""JSON record encoding for domain models.

Records are plain dictionaries with camelCase keys, one field per model
attribute. ``*_from_record`` helpers raise :class:`RecordError` when a record is
missing fields or carries values of the wrong type.
"""

from collections.abc import Mapping

from bento_designer.domain.geometry import Bounds, Position, Size
from bento_designer.domain.models import Box, Item, Nutrition, Partition, PlacedItem


class RecordError(ValueError):
    """Raised when a stored or submitted record cannot be decoded."""


def position_to_record(position: Position) -> dict[str, object]:
    return {"x": position.x, "y": position.y}


def size_to_record(size: Size) -> dict[str, object]:
    return {"width": size.width, "height": size.height}


def bounds_to_record(bounds: Bounds) -> dict[str, object]:
    return {
        "x": bounds.x,
        "y": bounds.y,
        "width": bounds.width,
        "height": bounds.height,
    }


def item_to_record(item: Item) -> dict[str, object]:
    """Encode an item as a JSON-ready dictionary."""
    record: dict[str, object] = {
        "id": item.id,
        "name": item.name,
        "category": item.category,
        "color": item.color,
        "nutrition": {
            "vitamin": item.nutrition.vitamin,
            "protein": item.nutrition.protein,
            "fiber": item.nutrition.fiber,
        },
        "cookingTime": item.cooking_time,
        "cost": item.cost,
        "isFrozen": item.is_frozen,
        "isReadyToEat": item.is_ready_to_eat,
        "defaultSize": size_to_record(item.default_size),
        "icon": item.icon,
    }
    if item.season is not None:
        record["season"] = item.season
    return record


def partition_to_record(partition: Partition) -> dict[str, object]:
    """Encode a partition as a JSON-ready dictionary."""
    return {
        "id": partition.id,
        "type": partition.type,
        "bounds": bounds_to_record(partition.bounds),
    }


def box_to_record(box: Box) -> dict[str, object]:
    """Encode a box and its partitions as a JSON-ready dictionary."""
    return {
        "id": box.id,
        "type": box.type,
        "dimensions": size_to_record(box.dimensions),
        "partitions": [partition_to_record(partition) for partition in box.partitions],
    }


def placed_item_to_record(placed_item: PlacedItem) -> dict[str, object]:
    """Encode a placement as a JSON-ready dictionary."""
    return {
        "id": placed_item.id,
        "itemId": placed_item.item_id,
        "partitionId": placed_item.partition_id,
        "position": position_to_record(placed_item.position),
        "size": size_to_record(placed_item.size),
    }


def item_from_record(record: Mapping[str, object]) -> Item:
    """Decode an item record."""
    record = _mapping(record, "item")
    nutrition = _mapping(record.get("nutrition"), "nutrition")
    season = record.get("season")
    if season is not None:
        season = _string(record, "season")
    return Item(
        id=_string(record, "id"),
        name=_string(record, "name"),
        category=_string(record, "category"),  # type: ignore[arg-type]
        color=_string(record, "color"),  # type: ignore[arg-type]
        nutrition=Nutrition(
            vitamin=_number(nutrition, "vitamin"),
            protein=_number(nutrition, "protein"),
            fiber=_number(nutrition, "fiber"),
        ),
        cooking_time=_number(record, "cookingTime"),
        cost=_number(record, "cost"),
        season=season,  # type: ignore[arg-type]
        is_frozen=_boolean(record, "isFrozen"),
        is_ready_to_eat=_boolean(record, "isReadyToEat"),
        default_size=_size(record.get("defaultSize"), "defaultSize"),
        icon=_string(record, "icon"),
    )


def partition_from_record(record: Mapping[str, object]) -> Partition:
    """Decode a partition record."""
    record = _mapping(record, "partition")
    bounds = _mapping(record.get("bounds"), "bounds")
    return Partition(
        id=_string(record, "id"),
        type=_string(record, "type"),  # type: ignore[arg-type]
        bounds=Bounds(
            x=_number(bounds, "x"),
            y=_number(bounds, "y"),
            width=_number(bounds, "width"),
            height=_number(bounds, "height"),
        ),
    )


def box_from_record(record: Mapping[str, object]) -> Box:
    """Decode a box record including its partitions."""
    record = _mapping(record, "box")
    partitions = record.get("partitions")
    if not isinstance(partitions, list):
        raise RecordError("partitions must be a list")
    return Box(
        id=_string(record, "id"),
        type=_string(record, "type"),  # type: ignore[arg-type]
        dimensions=_size(record.get("dimensions"), "dimensions"),
        partitions=tuple(partition_from_record(entry) for entry in partitions),
    )


def placed_item_from_record(record: Mapping[str, object]) -> PlacedItem:
    """Decode a placement record."""
    record = _mapping(record, "placed item")
    position = _mapping(record.get("position"), "position")
    return PlacedItem(
        id=_string(record, "id"),
        item_id=_string(record, "itemId"),
        partition_id=_string(record, "partitionId"),
        position=Position(x=_number(position, "x"), y=_number(position, "y")),
        size=_size(record.get("size"), "size"),
    )


def _mapping(value: object, name: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise RecordError(f"{name} must be an object")
    return value


def _size(value: object, name: str) -> Size:
    size = _mapping(value, name)
    return Size(width=_number(size, "width"), height=_number(size, "height"))


def _string(record: Mapping[str, object], key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise RecordError(f"{key} must be a string")
    return value


def _number(record: Mapping[str, object], key: str) -> float:
    value = record.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise RecordError(f"{key} must be a number")
    return value


def _boolean(record: Mapping[str, object], key: str) -> bool:
    value = record.get(key)
    if not isinstance(value, bool):
        raise RecordError(f"{key} must be a boolean")
    return value
