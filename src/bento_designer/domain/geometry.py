"""Axis-aligned rectangle primitives used for placement checks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Top-left corner of a rectangle in box space."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """Width and height of a rectangle."""

    width: float
    height: float


@dataclass(frozen=True)
class Bounds:
    """Rectangle described by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def overlaps(pos_a: Position, size_a: Size, pos_b: Position, size_b: Size) -> bool:
    """Return True when two rectangles share a non-zero area.

    Rectangles that only touch along an edge are separated.
    """
    return not (
        pos_a.x + size_a.width <= pos_b.x
        or pos_b.x + size_b.width <= pos_a.x
        or pos_a.y + size_a.height <= pos_b.y
        or pos_b.y + size_b.height <= pos_a.y
    )


def fits_within(position: Position, size: Size, bounds: Bounds) -> bool:
    """Return True when the rectangle lies entirely inside the bounds."""
    return (
        position.x >= bounds.x
        and position.y >= bounds.y
        and position.x + size.width <= bounds.right
        and position.y + size.height <= bounds.bottom
    )


def contains_point(bounds: Bounds, point: Position) -> bool:
    """Return True when the point is inside the bounds, edges included."""
    return bounds.x <= point.x <= bounds.right and bounds.y <= point.y <= bounds.bottom
