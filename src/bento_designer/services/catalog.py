"""Item catalog combining built-in items with user-added ones."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from bento_designer.data.initial_items import EXPECTED_ITEM_COUNT, initial_items
from bento_designer.domain.factories import create_item
from bento_designer.domain.models import Category, Color, Item, Season
from bento_designer.domain.validation import ValidationResult, validate_item

_logger = logging.getLogger(__name__)


class ItemRepository(Protocol):
    """Persistence interface for user-added items."""

    async def load(self) -> list[Item]:
        """Return the saved items, or an empty list when nothing is stored."""

    async def save(self, items: list[Item]) -> None:
        """Replace the saved items."""


class ItemValidationError(ValueError):
    """Raised when a user item fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


def validate_catalog(
    items: Sequence[Item], expected_count: int | None = None
) -> ValidationResult:
    """Check a catalog for duplicate ids or names and invalid items."""
    errors: list[str] = []
    ids = [item.id for item in items]
    if len(set(ids)) != len(ids):
        errors.append("Duplicate item ids found")
    names = [item.name for item in items]
    if len(set(names)) != len(names):
        errors.append("Duplicate item names found")
    for index, item in enumerate(items, start=1):
        result = validate_item(item)
        if not result.is_valid:
            errors.append(
                f"Item {index} ({item.name}) validation failed: "
                f"{', '.join(result.errors)}"
            )
    if expected_count is not None and len(items) != expected_count:
        errors.append(f"Expected {expected_count} items, found {len(items)}")
    return ValidationResult.from_errors(errors)


@dataclass
class CatalogService:
    """Lookups over built-in and user items."""

    repository: ItemRepository
    builtin_items: list[Item] = field(default_factory=initial_items)

    def __post_init__(self) -> None:
        expected = EXPECTED_ITEM_COUNT if self.builtin_items else None
        result = validate_catalog(self.builtin_items, expected_count=expected)
        if not result.is_valid:
            _logger.warning("Built-in catalog is inconsistent: %s", result.errors)

    async def list_items(self) -> list[Item]:
        """Return built-in items followed by user items."""
        return [*self.builtin_items, *await self.repository.load()]

    async def find_by_id(self, item_id: str) -> Item | None:
        """Return the item with the given id, if present."""
        for item in await self.list_items():
            if item.id == item_id:
                return item
        return None

    async def find_by_category(self, category: Category) -> list[Item]:
        return [item for item in await self.list_items() if item.category == category]

    async def find_by_color(self, color: Color) -> list[Item]:
        return [item for item in await self.list_items() if item.color == color]

    async def find_by_season(self, season: Season) -> list[Item]:
        """Return items that match the season or are available all year."""
        return [
            item
            for item in await self.list_items()
            if item.season in (season, "all")
        ]

    async def add_user_item(self, **fields: object) -> Item:
        """Create, validate and persist a user item."""
        item = create_item(**fields)  # type: ignore[arg-type]
        result = validate_item(item)
        if not result.is_valid:
            raise ItemValidationError(result.errors)
        user_items = await self.repository.load()
        await self.repository.save([*user_items, item])
        _logger.info("Added user item: id=%s name=%s", item.id, item.name)
        return item

    async def remove_user_item(self, item_id: str) -> bool:
        """Remove a user item; returns False when no such item exists."""
        user_items = await self.repository.load()
        remaining = [item for item in user_items if item.id != item_id]
        if len(remaining) == len(user_items):
            return False
        await self.repository.save(remaining)
        _logger.info("Removed user item: id=%s", item_id)
        return True
