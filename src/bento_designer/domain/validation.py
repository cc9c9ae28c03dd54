"""Structural validation for domain records.

Validators accept either a domain model or its JSON record and report every
violated constraint. They never raise.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from bento_designer.domain.models import (
    BOX_TYPES,
    CATEGORIES,
    COLORS,
    NUTRITION_MAX,
    NUTRITION_MIN,
    PARTITION_TYPES,
    SEASONS,
    Box,
    Item,
    Partition,
    PlacedItem,
)
from bento_designer.domain.records import (
    box_to_record,
    item_to_record,
    partition_to_record,
    placed_item_to_record,
)

_ITEM_REQUIRED_FIELDS: dict[str, str] = {
    "id": "string",
    "name": "string",
    "category": "string",
    "color": "string",
    "nutrition": "object",
    "cookingTime": "number",
    "cost": "number",
    "isFrozen": "boolean",
    "isReadyToEat": "boolean",
    "defaultSize": "object",
    "icon": "string",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a record."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors)


def validate_box(box: Box | Mapping[str, object]) -> ValidationResult:
    """Validate a box and each of its partitions."""
    record = box_to_record(box) if isinstance(box, Box) else box
    if not isinstance(record, Mapping):
        return ValidationResult.from_errors(["box must be an object"])
    errors: list[str] = []
    if not record.get("id"):
        errors.append("id is required")
    box_type = record.get("type")
    if not box_type:
        errors.append("type is required")
    elif box_type not in BOX_TYPES:
        errors.append(f"type must be one of: {', '.join(BOX_TYPES)}")
    errors.extend(_validate_positive_size(record.get("dimensions"), "dimensions"))
    partitions = record.get("partitions")
    if not isinstance(partitions, list | tuple):
        errors.append("partitions must be a list")
    else:
        for index, partition in enumerate(partitions):
            result = validate_partition(partition)
            errors.extend(f"partitions[{index}].{error}" for error in result.errors)
    return ValidationResult.from_errors(errors)


def validate_partition(
    partition: Partition | Mapping[str, object],
) -> ValidationResult:
    """Validate a partition's type and bounds."""
    if isinstance(partition, Partition):
        record: object = partition_to_record(partition)
    else:
        record = partition
    if not isinstance(record, Mapping):
        return ValidationResult.from_errors(["partition must be an object"])
    errors: list[str] = []
    if not record.get("id"):
        errors.append("id is required")
    partition_type = record.get("type")
    if not partition_type:
        errors.append("type is required")
    elif partition_type not in PARTITION_TYPES:
        errors.append(f"type must be one of: {', '.join(PARTITION_TYPES)}")
    errors.extend(_validate_bounds(record.get("bounds")))
    return ValidationResult.from_errors(errors)


def validate_placed_item(
    placed_item: PlacedItem | Mapping[str, object],
) -> ValidationResult:
    """Validate a placement record."""
    record = (
        placed_item_to_record(placed_item)
        if isinstance(placed_item, PlacedItem)
        else placed_item
    )
    if not isinstance(record, Mapping):
        return ValidationResult.from_errors(["placed item must be an object"])
    errors: list[str] = []
    for key in ("id", "itemId", "partitionId"):
        if not record.get(key):
            errors.append(f"{key} is required")
    position = record.get("position")
    if not isinstance(position, Mapping):
        errors.append("position is required")
    else:
        for key in ("x", "y"):
            if not _is_number(position.get(key)):
                errors.append(f"position.{key} must be a number")
    errors.extend(_validate_positive_size(record.get("size"), "size"))
    return ValidationResult.from_errors(errors)


def validate_item(item: Item | Mapping[str, object]) -> ValidationResult:
    """Validate an item's required fields, ranges and enumerations."""
    record = item_to_record(item) if isinstance(item, Item) else item
    if not isinstance(record, Mapping):
        return ValidationResult.from_errors(["item must be an object"])
    errors = [
        *_validate_item_required_fields(record),
        *_validate_nutrition(record.get("nutrition")),
        *_validate_item_ranges(record),
        *_validate_item_enums(record),
    ]
    return ValidationResult.from_errors(errors)


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _validate_item_required_fields(record: Mapping[str, object]) -> list[str]:
    errors = []
    for key, expected in _ITEM_REQUIRED_FIELDS.items():
        value = record.get(key)
        if expected == "string":
            present = isinstance(value, str) and value != ""
        elif expected == "number":
            present = _is_number(value)
        elif expected == "boolean":
            present = isinstance(value, bool)
        else:
            present = isinstance(value, Mapping)
        if not present:
            errors.append(f"{key} is required")
    return errors


def _validate_nutrition(nutrition: object) -> list[str]:
    if not isinstance(nutrition, Mapping):
        return []
    errors = []
    for key in ("vitamin", "protein", "fiber"):
        value = nutrition.get(key)
        if not _is_number(value) or not NUTRITION_MIN <= value <= NUTRITION_MAX:
            errors.append(
                f"nutrition.{key} must be between {NUTRITION_MIN} and {NUTRITION_MAX}"
            )
    return errors


def _validate_item_ranges(record: Mapping[str, object]) -> list[str]:
    errors = []
    for key in ("cookingTime", "cost"):
        value = record.get(key)
        if _is_number(value) and value < 0:
            errors.append(f"{key} must be non-negative")
    default_size = record.get("defaultSize")
    if isinstance(default_size, Mapping):
        errors.extend(_validate_positive_size(default_size, "defaultSize"))
    return errors


def _validate_item_enums(record: Mapping[str, object]) -> list[str]:
    errors = []
    category = record.get("category")
    if category and category not in CATEGORIES:
        errors.append(f"category must be one of: {', '.join(CATEGORIES)}")
    color = record.get("color")
    if color and color not in COLORS:
        errors.append(f"color must be one of: {', '.join(COLORS)}")
    season = record.get("season")
    if season is not None and season not in SEASONS:
        errors.append(f"season must be one of: {', '.join(SEASONS)}")
    return errors


def _validate_positive_size(size: object, name: str) -> list[str]:
    if not isinstance(size, Mapping):
        return [f"{name} is required"]
    errors = []
    for key in ("width", "height"):
        value = size.get(key)
        if not _is_number(value) or value <= 0:
            errors.append(f"{name}.{key} must be positive")
    return errors


def _validate_bounds(bounds: object) -> list[str]:
    if not isinstance(bounds, Mapping):
        return ["bounds is required"]
    errors = []
    for key in ("x", "y"):
        value = bounds.get(key)
        if not _is_number(value) or value < 0:
            errors.append(f"bounds.{key} must be a non-negative number")
    for key in ("width", "height"):
        value = bounds.get(key)
        if not _is_number(value) or value <= 0:
            errors.append(f"bounds.{key} must be a positive number")
    return errors
