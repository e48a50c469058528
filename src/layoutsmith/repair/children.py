"""Normalize nested children to parent-relative coordinates.

Generators emit children either in canvas coordinates or relative to their
parent. This runs once, where a Layout is first constructed, so everything
downstream (engine, editor, renderer) can treat child positions as relative.
"""

from ..engine.geometry import child_offset
from ..models import Component, Layout


def normalize_component(component: Component) -> Component:
    """Return ``component`` with its nested children in parent-relative positions."""
    if not component.children:
        return component

    # Detection compares each child against this component's original frame,
    # so grandchildren are normalized before the child itself is moved.
    children = [
        normalize_component(child).model_copy(update={"position": child_offset(child, component)})
        for child in component.children
    ]
    return component.model_copy(update={"children": children})


def normalize_children(layout: Layout) -> Layout:
    """Return a new Layout whose nested children all use parent-relative positions."""
    return layout.model_copy(
        update={"components": [normalize_component(component) for component in layout.components]}
    )
