"""Suggestion scoring for ranking items by a chosen criterion."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from bento_designer.domain.models import Item, Season

FROZEN_BONUS = 50
READY_BONUS = 50

IDEAL_NUTRIENT_TOTAL = 100
HIGH_NUTRITION = 150
BALANCED_NUTRITION = 100
MODERATE_NUTRITION = 50

COLOR_VARIETY_BONUS = 20
COLOR_DUPLICATE_PENALTY = 10

IN_SEASON_SCORE = 50
ALL_SEASON_SCORE = 25

COST_BASELINE = 1000
_COST_REASONS: tuple[tuple[float, str], ...] = (
    (50, "very cheap"),
    (100, "cheap"),
    (200, "standard"),
    (400, "somewhat expensive"),
)

_SEASON_BY_MONTH: dict[int, Season] = {
    3: "spring",
    4: "spring",
    5: "spring",
    6: "summer",
    7: "summer",
    8: "summer",
    9: "autumn",
    10: "autumn",
    11: "autumn",
    12: "winter",
    1: "winter",
    2: "winter",
}


class Criterion(StrEnum):
    """Available ranking strategies."""

    SPEED = "speed"
    NUTRITION = "nutrition"
    COLOR = "color"
    SEASON = "season"
    COST = "cost"


class UnsupportedCriterionError(ValueError):
    """Raised when asked to rank by an unknown criterion."""

    def __init__(self, criterion: object) -> None:
        super().__init__(f"Unsupported suggestion criterion: {criterion}")
        self.criterion = criterion


@dataclass(frozen=True)
class SuggestionContext:
    """Inputs shared by all items when scoring."""

    season: Season | None = None
    today: date | None = None

    def resolve_season(self) -> Season:
        if self.season is not None:
            return self.season
        return current_season(self.today)


@dataclass(frozen=True)
class Suggestion:
    """Scored item with a short explanation."""

    item: Item
    score: float
    reason: str


@dataclass(frozen=True)
class SelectionScore:
    """Set-level scores for a group of items, such as a packed box."""

    nutrition: float
    color: float


def current_season(today: date | None = None) -> Season:
    """Map a date to its season, defaulting to today."""
    resolved = today or date.today()
    return _SEASON_BY_MONTH[resolved.month]


def speed_score(item: Item) -> float:
    """Score how quickly an item can be packed."""
    frozen_bonus = FROZEN_BONUS if item.is_frozen else 0
    ready_bonus = READY_BONUS if item.is_ready_to_eat else 0
    return frozen_bonus + ready_bonus - item.cooking_time


def speed_reason(item: Item) -> str:
    if item.is_frozen and item.is_ready_to_eat:
        return "frozen + ready-to-eat"
    if item.is_ready_to_eat:
        return "ready-to-eat"
    if item.is_frozen:
        return "frozen"
    return "needs cooking"


def nutrition_score(items: Sequence[Item]) -> float:
    """Score how close the summed nutrients of a set are to the ideal total.

    Each nutrient scores ``100 - |total - 100|`` and the three scores are
    averaged. An empty set scores 0.
    """
    if not items:
        return 0
    vitamin = sum(item.nutrition.vitamin for item in items)
    protein = sum(item.nutrition.protein for item in items)
    fiber = sum(item.nutrition.fiber for item in items)
    scores = [
        100 - abs(total - IDEAL_NUTRIENT_TOTAL) for total in (vitamin, protein, fiber)
    ]
    return sum(scores) / len(scores)


def nutrition_reason(item: Item) -> str:
    total = item.nutrition.total
    if total >= HIGH_NUTRITION:
        return "high nutrition"
    if total >= BALANCED_NUTRITION:
        return "balanced nutrition"
    if total >= MODERATE_NUTRITION:
        return "moderate nutrition"
    return "low nutrition"


def color_score(items: Sequence[Item]) -> float:
    """Reward distinct colors in a set and penalize repeated ones."""
    if not items:
        return 0
    unique_colors = len({item.color for item in items})
    duplicate_colors = len(items) - unique_colors
    return (
        unique_colors * COLOR_VARIETY_BONUS
        - duplicate_colors * COLOR_DUPLICATE_PENALTY
    )


def color_reason(item: Item) -> str:
    return f"{item.color} adds color"


def season_score(item: Item, season: Season) -> float:
    """Score an item against the given season."""
    if item.season == season:
        return IN_SEASON_SCORE
    if item.season == "all":
        return ALL_SEASON_SCORE
    return 0


def season_reason(item: Item, season: Season) -> str:
    if item.season == season:
        return f"in season ({season})"
    if item.season == "all":
        return "available all year"
    return "out of season"


def cost_score(item: Item) -> float:
    """Score cheaper items higher; costs above the baseline go negative."""
    return COST_BASELINE - item.cost


def cost_reason(item: Item) -> str:
    for limit, reason in _COST_REASONS:
        if item.cost <= limit:
            return reason
    return "expensive"


def evaluate_selection(items: Sequence[Item]) -> SelectionScore:
    """Score a whole set of items with the set-based formulas."""
    return SelectionScore(nutrition=nutrition_score(items), color=color_score(items))


def score(
    criterion: Criterion | str,
    items: Sequence[Item],
    context: SuggestionContext | None = None,
    limit: int | None = None,
) -> list[Suggestion]:
    """Score, rank and explain items for a criterion.

    Results are sorted by descending score and ties keep their input order.
    Raises :class:`UnsupportedCriterionError` for unknown criteria and
    ``ValueError`` when ``limit`` is below 1.
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    scorer = _scorer_for(criterion, context or SuggestionContext())
    suggestions = []
    for item in items:
        item_score, reason = scorer(item)
        suggestions.append(Suggestion(item=item, score=item_score, reason=reason))
    ranked = sorted(suggestions, key=lambda suggestion: suggestion.score, reverse=True)
    if limit is not None:
        return ranked[:limit]
    return ranked


def _scorer_for(
    criterion: Criterion | str, context: SuggestionContext
) -> Callable[[Item], tuple[float, str]]:
    try:
        resolved = Criterion(criterion)
    except ValueError:
        raise UnsupportedCriterionError(criterion) from None

    if resolved is Criterion.SPEED:
        return lambda item: (speed_score(item), speed_reason(item))
    if resolved is Criterion.NUTRITION:
        return lambda item: (nutrition_score([item]), nutrition_reason(item))
    if resolved is Criterion.COLOR:
        return lambda item: (color_score([item]), color_reason(item))
    if resolved is Criterion.SEASON:
        season = context.resolve_season()
        return lambda item: (season_score(item, season), season_reason(item, season))
    return lambda item: (cost_score(item), cost_reason(item))
