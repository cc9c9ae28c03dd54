"""Built-in catalog of items available in every session."""

from bento_designer.domain.factories import create_item
from bento_designer.domain.geometry import Size
from bento_designer.domain.models import Category, Color, Item, Nutrition

EXPECTED_ITEM_COUNT = 20


def _item(  # noqa: PLR0913
    id: str,  # noqa: A002
    name: str,
    category: Category,
    color: Color,
    nutrition: tuple[float, float, float],
    cooking_time: float,
    cost: float,
    size: tuple[float, float],
    **overrides: object,
) -> Item:
    vitamin, protein, fiber = nutrition
    width, height = size
    return create_item(
        id=id,
        name=name,
        category=category,
        color=color,
        nutrition=Nutrition(vitamin=vitamin, protein=protein, fiber=fiber),
        cooking_time=cooking_time,
        cost=cost,
        default_size=Size(width=width, height=height),
        **overrides,  # type: ignore[arg-type]
    )


_MAIN_DISHES: tuple[Item, ...] = (
    _item(
        "ingredient-001",
        "Fried chicken",
        "main",
        "brown",
        (20, 80, 10),
        15,
        200,
        (50, 30),
    ),
    _item(
        "ingredient-002",
        "Rolled omelette",
        "main",
        "yellow",
        (40, 60, 5),
        10,
        100,
        (45, 25),
    ),
    _item(
        "ingredient-003",
        "Hamburg steak",
        "main",
        "brown",
        (15, 85, 5),
        20,
        250,
        (55, 35),
    ),
    _item(
        "ingredient-004",
        "Grilled salmon",
        "main",
        "red",
        (30, 75, 0),
        15,
        300,
        (60, 25),
    ),
    _item(
        "ingredient-005",
        "Fried shrimp",
        "main",
        "red",
        (10, 70, 5),
        8,
        180,
        (40, 50),
        is_frozen=True,
    ),
)

_SIDE_DISHES: tuple[Item, ...] = (
    _item(
        "ingredient-006",
        "Broccoli",
        "side",
        "green",
        (90, 25, 60),
        5,
        80,
        (35, 35),
    ),
    _item(
        "ingredient-007",
        "Cherry tomato",
        "side",
        "red",
        (80, 15, 30),
        0,
        120,
        (25, 25),
        is_ready_to_eat=True,
    ),
    _item(
        "ingredient-008",
        "Kinpira burdock",
        "side",
        "brown",
        (40, 20, 80),
        12,
        90,
        (40, 20),
    ),
    _item(
        "ingredient-009",
        "Spinach ohitashi",
        "side",
        "green",
        (95, 30, 50),
        8,
        70,
        (40, 25),
    ),
    _item(
        "ingredient-010",
        "Glazed carrots",
        "side",
        "red",
        (85, 10, 40),
        10,
        60,
        (30, 40),
    ),
    _item(
        "ingredient-011",
        "Potato salad",
        "side",
        "white",
        (50, 40, 30),
        15,
        100,
        (45, 30),
    ),
    _item(
        "ingredient-012",
        "Simmered hijiki",
        "side",
        "black",
        (60, 25, 90),
        20,
        80,
        (40, 25),
    ),
    _item(
        "ingredient-013",
        "Edamame",
        "side",
        "green",
        (70, 50, 60),
        3,
        90,
        (35, 20),
        season="summer",
        is_frozen=True,
    ),
)

_OTHER_ITEMS: tuple[Item, ...] = (
    _item(
        "ingredient-014",
        "White rice",
        "other",
        "white",
        (10, 20, 20),
        0,
        50,
        (80, 40),
        is_ready_to_eat=True,
    ),
    _item(
        "ingredient-015",
        "Rice ball",
        "other",
        "white",
        (15, 25, 25),
        2,
        80,
        (50, 50),
    ),
    _item(
        "ingredient-016",
        "Cheese",
        "other",
        "yellow",
        (25, 65, 0),
        0,
        120,
        (30, 30),
        is_ready_to_eat=True,
    ),
    _item(
        "ingredient-017",
        "Sausage",
        "other",
        "red",
        (20, 55, 5),
        5,
        150,
        (35, 15),
    ),
    _item(
        "ingredient-018",
        "Pickled plum",
        "other",
        "red",
        (30, 5, 20),
        0,
        40,
        (20, 20),
        is_ready_to_eat=True,
    ),
    _item(
        "ingredient-019",
        "Pickled radish",
        "other",
        "yellow",
        (35, 10, 40),
        0,
        30,
        (25, 30),
        is_ready_to_eat=True,
    ),
    _item(
        "ingredient-020",
        "Strawberry",
        "fruit",
        "red",
        (100, 5, 30),
        0,
        200,
        (25, 30),
        season="spring",
        is_ready_to_eat=True,
    ),
)

INITIAL_ITEMS: tuple[Item, ...] = (*_MAIN_DISHES, *_SIDE_DISHES, *_OTHER_ITEMS)


def initial_items() -> list[Item]:
    """Return a fresh list of the built-in items."""
    return list(INITIAL_ITEMS)
