"""Layout schema and data models."""

from .layout import (
    COMPONENT_TYPES,
    CONTAINER_TYPES,
    MAX_COMPONENTS,
    TEXT_TRANSFORMS,
    Background,
    Component,
    ComponentType,
    Gradient,
    GradientStop,
    Layer,
    Layout,
    Palette,
    Position,
    Shadow,
    Size,
    Style,
)
from .edits import (
    AddOperation,
    ComponentChanges,
    EditOperation,
    EditResponse,
    ModifyOperation,
    RemoveOperation,
    ReorderOperation,
)
from .brief import CANVAS_PRESETS, CanvasSize, DesignBrief, DesignStyle
from .validation import (
    try_validate_layout,
    validate_edit_response,
    validate_layout,
    validate_operations,
)

__all__ = [
    # Layout
    "COMPONENT_TYPES",
    "CONTAINER_TYPES",
    "MAX_COMPONENTS",
    "TEXT_TRANSFORMS",
    "Background",
    "Component",
    "ComponentType",
    "Gradient",
    "GradientStop",
    "Layer",
    "Layout",
    "Palette",
    "Position",
    "Shadow",
    "Size",
    "Style",
    # Edits
    "AddOperation",
    "ComponentChanges",
    "EditOperation",
    "EditResponse",
    "ModifyOperation",
    "RemoveOperation",
    "ReorderOperation",
    # Brief
    "CANVAS_PRESETS",
    "CanvasSize",
    "DesignBrief",
    "DesignStyle",
    # Validation
    "try_validate_layout",
    "validate_edit_response",
    "validate_layout",
    "validate_operations",
]
