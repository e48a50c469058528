"""Axis-aligned bounding box helpers shared by the engine, repair and renderer."""

import math

from ..models import Component, Position


def intersects(a: Component, b: Component) -> bool:
    """True when the boxes overlap with positive area (touching edges do not count)."""
    return not (
        a.right <= b.position.x
        or b.right <= a.position.x
        or a.bottom <= b.position.y
        or b.bottom <= a.position.y
    )


def overlap_area(a: Component, b: Component) -> float:
    ox = max(0.0, min(a.right, b.right) - max(a.position.x, b.position.x))
    oy = max(0.0, min(a.bottom, b.bottom) - max(a.position.y, b.position.y))
    return ox * oy


def snap(value: float, grid: int) -> float:
    """Round to the nearest grid multiple, halves rounding up."""
    return math.floor(value / grid + 0.5) * grid


def floor_to_grid(value: float, grid: int) -> float:
    return math.floor(value / grid) * grid


def ceil_to_grid(value: float, grid: int) -> float:
    return math.ceil(value / grid) * grid


def child_offset(child: Component, parent: Component) -> Position:
    """
    Position of ``child`` inside ``parent``'s frame, detecting the convention.

    If subtracting the parent's origin lands inside ``[0, parent.size)`` on both
    axes the child was given in canvas coordinates and is translated; otherwise
    it is taken as already parent-relative.
    """
    rel_x = child.position.x - parent.position.x
    rel_y = child.position.y - parent.position.y

    if 0 <= rel_x < parent.size.width and 0 <= rel_y < parent.size.height:
        return Position(x=rel_x, y=rel_y)

    return child.position
