"""Pydantic request and response models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bento_designer.domain.geometry import Bounds, Position, Size
from bento_designer.domain.models import (
    Box,
    Item,
    Nutrition,
    Partition,
    PlacedItem,
    Season,
)
from bento_designer.services.layout import PlacementOutcome
from bento_designer.services.suggestions import SelectionScore, Suggestion


class ApiModel(BaseModel):
    """Base model using camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PositionModel(ApiModel):
    x: float
    y: float

    def to_domain(self) -> Position:
        return Position(x=self.x, y=self.y)


class SizeModel(ApiModel):
    width: float
    height: float

    def to_domain(self) -> Size:
        return Size(width=self.width, height=self.height)

    @classmethod
    def from_domain(cls, size: Size) -> "SizeModel":
        return cls(width=size.width, height=size.height)


class BoundsModel(ApiModel):
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_domain(cls, bounds: Bounds) -> "BoundsModel":
        return cls(x=bounds.x, y=bounds.y, width=bounds.width, height=bounds.height)


class NutritionModel(ApiModel):
    vitamin: float = 0
    protein: float = 0
    fiber: float = 0

    def to_domain(self) -> Nutrition:
        return Nutrition(vitamin=self.vitamin, protein=self.protein, fiber=self.fiber)


class ItemModel(ApiModel):
    """Item as returned by the API."""

    id: str
    name: str
    category: str
    color: str
    nutrition: NutritionModel
    cooking_time: float
    cost: float
    season: str | None
    is_frozen: bool
    is_ready_to_eat: bool
    default_size: SizeModel
    icon: str

    @classmethod
    def from_domain(cls, item: Item) -> "ItemModel":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            color=item.color,
            nutrition=NutritionModel(
                vitamin=item.nutrition.vitamin,
                protein=item.nutrition.protein,
                fiber=item.nutrition.fiber,
            ),
            cooking_time=item.cooking_time,
            cost=item.cost,
            season=item.season,
            is_frozen=item.is_frozen,
            is_ready_to_eat=item.is_ready_to_eat,
            default_size=SizeModel.from_domain(item.default_size),
            icon=item.icon,
        )


class ItemCreateRequest(ApiModel):
    """User item submission; range and enum checks happen in the domain."""

    name: str
    category: str
    color: str
    nutrition: NutritionModel | None = None
    cooking_time: float | None = None
    cost: float | None = None
    season: str | None = None
    is_frozen: bool | None = None
    is_ready_to_eat: bool | None = None
    default_size: SizeModel | None = None
    icon: str | None = None

    def to_fields(self) -> dict[str, object]:
        return {
            "name": self.name,
            "category": self.category,
            "color": self.color,
            "nutrition": self.nutrition.to_domain() if self.nutrition else None,
            "cooking_time": self.cooking_time,
            "cost": self.cost,
            "season": self.season,
            "is_frozen": self.is_frozen,
            "is_ready_to_eat": self.is_ready_to_eat,
            "default_size": (
                self.default_size.to_domain() if self.default_size else None
            ),
            "icon": self.icon,
        }


class PartitionModel(ApiModel):
    id: str
    type: str
    bounds: BoundsModel

    @classmethod
    def from_domain(cls, partition: Partition) -> "PartitionModel":
        return cls(
            id=partition.id,
            type=partition.type,
            bounds=BoundsModel.from_domain(partition.bounds),
        )


class BoxModel(ApiModel):
    id: str
    type: str
    dimensions: SizeModel
    partitions: list[PartitionModel]

    @classmethod
    def from_domain(cls, box: Box) -> "BoxModel":
        return cls(
            id=box.id,
            type=box.type,
            dimensions=SizeModel.from_domain(box.dimensions),
            partitions=[PartitionModel.from_domain(entry) for entry in box.partitions],
        )


class PlacedItemModel(ApiModel):
    id: str
    item_id: str
    partition_id: str
    position: PositionModel
    size: SizeModel

    @classmethod
    def from_domain(cls, placed_item: PlacedItem) -> "PlacedItemModel":
        return cls(
            id=placed_item.id,
            item_id=placed_item.item_id,
            partition_id=placed_item.partition_id,
            position=PositionModel(x=placed_item.position.x, y=placed_item.position.y),
            size=SizeModel.from_domain(placed_item.size),
        )


class DropRequest(ApiModel):
    """Drop event sent by the UI after a drag ends."""

    item_id: str
    partition_id: str
    position: PositionModel


class PlacementOutcomeModel(ApiModel):
    success: bool
    placed_item: PlacedItemModel | None = None
    error: str | None = None

    @classmethod
    def from_domain(cls, outcome: PlacementOutcome) -> "PlacementOutcomeModel":
        placed_item = (
            PlacedItemModel.from_domain(outcome.placed_item)
            if outcome.placed_item is not None
            else None
        )
        return cls(
            success=outcome.success, placed_item=placed_item, error=outcome.error
        )


class SuggestionRequest(ApiModel):
    criterion: str
    season: Season | None = None
    limit: int | None = Field(default=None, ge=1)
    item_ids: list[str] | None = None


class SuggestionModel(ApiModel):
    item: ItemModel
    score: float
    reason: str

    @classmethod
    def from_domain(cls, suggestion: Suggestion) -> "SuggestionModel":
        return cls(
            item=ItemModel.from_domain(suggestion.item),
            score=suggestion.score,
            reason=suggestion.reason,
        )


class SelectionScoreModel(ApiModel):
    nutrition: float
    color: float

    @classmethod
    def from_domain(cls, selection: SelectionScore) -> "SelectionScoreModel":
        return cls(nutrition=selection.nutrition, color=selection.color)
