"""
layoutsmith - turns generated UI layout JSON into valid, renderable, editable layouts.

    from layoutsmith import parse_layout, render_svg

    layout = parse_layout(generator_text)
    document = render_svg(layout)
"""

from .core import JSONParseError, LayoutError, PayloadError, SchemaViolation
from .edits import apply_edits
from .engine import process_layout
from .models import (
    CANVAS_PRESETS,
    Component,
    EditResponse,
    Layout,
    try_validate_layout,
    validate_layout,
)
from .pipeline import LayoutParser, apply_edit_response, dumps_layout, parse_layout
from .render import RenderContext, render, render_layout, render_svg, to_svg
from .render.html import render_html
from .repair import normalize_children, repair, repair_layout

__version__ = "0.1.0"

__all__ = [
    # Errors
    "LayoutError",
    "JSONParseError",
    "PayloadError",
    "SchemaViolation",
    # Models
    "CANVAS_PRESETS",
    "Component",
    "EditResponse",
    "Layout",
    "try_validate_layout",
    "validate_layout",
    # Stages
    "repair",
    "repair_layout",
    "normalize_children",
    "process_layout",
    "apply_edits",
    # Rendering
    "RenderContext",
    "render",
    "render_layout",
    "render_svg",
    "render_html",
    "to_svg",
    # Pipeline
    "LayoutParser",
    "parse_layout",
    "apply_edit_response",
    "dumps_layout",
]
