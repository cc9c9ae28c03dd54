"""Domain models for bento boxes and the items placed in them."""

from dataclasses import dataclass
from typing import Literal

from bento_designer.domain.geometry import Bounds, Position, Size

Category = Literal["main", "side", "vegetable", "fruit", "other"]
Color = Literal["red", "yellow", "green", "white", "brown", "black"]
Season = Literal["spring", "summer", "autumn", "winter", "all"]
BoxType = Literal["rectangle", "oval", "double"]
PartitionType = Literal["rice", "side"]

CATEGORIES: tuple[str, ...] = ("main", "side", "vegetable", "fruit", "other")
COLORS: tuple[str, ...] = ("red", "yellow", "green", "white", "brown", "black")
SEASONS: tuple[str, ...] = ("spring", "summer", "autumn", "winter", "all")
BOX_TYPES: tuple[str, ...] = ("rectangle", "oval", "double")
PARTITION_TYPES: tuple[str, ...] = ("rice", "side")

NUTRITION_MIN = 0
NUTRITION_MAX = 100


@dataclass(frozen=True)
class Nutrition:
    """Nutrient scores of an item, each between 0 and 100."""

    vitamin: float = 0
    protein: float = 0
    fiber: float = 0

    @property
    def total(self) -> float:
        return self.vitamin + self.protein + self.fiber


@dataclass(frozen=True)
class Item:
    """An ingredient that can be placed into a box."""

    id: str
    name: str
    category: Category
    color: Color
    nutrition: Nutrition
    cooking_time: float
    cost: float
    season: Season | None
    is_frozen: bool
    is_ready_to_eat: bool
    default_size: Size
    icon: str


@dataclass(frozen=True)
class Partition:
    """Fixed sub-region of a box that items are placed into."""

    id: str
    type: PartitionType
    bounds: Bounds


@dataclass(frozen=True)
class Box:
    """Container with outer dimensions and an ordered list of partitions."""

    id: str
    type: BoxType
    dimensions: Size
    partitions: tuple[Partition, ...]

    def get_partition(self, partition_id: str) -> Partition | None:
        """Return the partition with the given id, if present."""
        for partition in self.partitions:
            if partition.id == partition_id:
                return partition
        return None


@dataclass(frozen=True)
class PlacedItem:
    """Concrete placement of an item inside a partition."""

    id: str
    item_id: str
    partition_id: str
    position: Position
    size: Size
