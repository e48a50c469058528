"""
Layout Engine

Deterministic geometry pass over a validated Layout, in fixed order:

1. Clamp every top-level component inside the canvas
2. Snap positions (not sizes) to the grid
3. Nudge same-layer components whose overlap exceeds the threshold
4. Stable sort by z-index, keeping the z-index values as given

Only top-level components move; children stay in their parent's frame.
"""

from ..models import Component, Layout
from .geometry import ceil_to_grid, floor_to_grid, intersects, overlap_area, snap

GRID = 4
COLLISION_THRESHOLD = 0.25


def _max_x(component: Component, layout: Layout) -> float:
    return max(0.0, layout.canvas_width - component.size.width)


def _max_y(component: Component, layout: Layout) -> float:
    return max(0.0, layout.canvas_height - component.size.height)


def _snap_within(value: float, upper: float, grid: int) -> float:
    """Snap to the grid without crossing ``upper`` (the far canvas edge)."""
    snapped = snap(value, grid)
    if snapped > upper:
        snapped = floor_to_grid(upper, grid)
    return max(0, snapped)


def clamp_to_canvas(components: list[Component], layout: Layout) -> list[Component]:
    return [
        component.moved_to(
            min(max(component.position.x, 0), _max_x(component, layout)),
            min(max(component.position.y, 0), _max_y(component, layout)),
        )
        for component in components
    ]


def snap_to_grid(components: list[Component], layout: Layout, grid: int = GRID) -> list[Component]:
    return [
        component.moved_to(
            _snap_within(component.position.x, _max_x(component, layout), grid),
            _snap_within(component.position.y, _max_y(component, layout), grid),
        )
        for component in components
    ]


def resolve_collisions(
    components: list[Component], layout: Layout, grid: int = GRID
) -> list[Component]:
    """
    Single pass over pairs (i, j > i) in input order.

    Two components on the same z-index whose overlap exceeds the threshold of the
    smaller one's area get the second pushed below the first, plus one grid unit.
    Smaller overlaps are treated as intentional layering and left alone.
    """
    result = list(components)
    for i in range(len(result)):
        for j in range(i + 1, len(result)):
            a = result[i]
            b = result[j]
            if a.z_index != b.z_index or not intersects(a, b):
                continue

            smaller_area = min(a.area, b.area)
            if overlap_area(a, b) / smaller_area <= COLLISION_THRESHOLD:
                continue

            overlap_y = a.bottom - b.position.y
            if overlap_y <= 0:
                continue

            target = ceil_to_grid(b.position.y + overlap_y + grid, grid)
            upper = _max_y(b, layout)
            if target > upper:
                target = floor_to_grid(upper, grid)
            result[j] = b.moved_to(b.position.x, max(target, b.position.y))
    return result


def sort_by_z(components: list[Component]) -> list[Component]:
    return sorted(components, key=lambda component: component.z_index)


def process_layout(layout: Layout, grid: int = GRID) -> Layout:
    """
    Run the full geometry pass.

    Args:
        layout: Validated layout (not modified)
        grid: Grid unit in pixels

    Returns:
        New Layout with clamped, snapped, de-collided, z-sorted components
    """
    components = clamp_to_canvas(layout.components, layout)
    components = snap_to_grid(components, layout, grid)
    components = resolve_collisions(components, layout, grid)
    components = sort_by_z(components)
    return layout.model_copy(update={"components": components})
