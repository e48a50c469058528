"""Layout engine: clamping, grid snapping, collision resolution, z-ordering."""

from .geometry import child_offset, intersects, overlap_area
from .layout_engine import (
    COLLISION_THRESHOLD,
    GRID,
    clamp_to_canvas,
    process_layout,
    resolve_collisions,
    snap_to_grid,
    sort_by_z,
)

__all__ = [
    "COLLISION_THRESHOLD",
    "GRID",
    "child_offset",
    "clamp_to_canvas",
    "intersects",
    "overlap_area",
    "process_layout",
    "resolve_collisions",
    "snap_to_grid",
    "sort_by_z",
]
