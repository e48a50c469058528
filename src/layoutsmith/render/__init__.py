"""
Rendering

Maps layouts to visual node trees. ``svg`` is the primary backend, ``html`` a
div-based preview backend; both share resolution rules from ``resolve``.
"""

from . import html, svg
from .nodes import VisualNode, el, to_markup
from .resolve import (
    DEFAULT_CARD_SHADOWS,
    RenderContext,
    apply_text_transform,
    child_position,
    display_text,
    effective_transform,
    icon_glyph,
    initials,
    is_vertical,
    paint_order,
    resolve_fill,
    resolve_shadows,
)
from .svg import render, render_layout, render_svg, to_svg

__all__ = [
    "html",
    "svg",
    "VisualNode",
    "el",
    "to_markup",
    "DEFAULT_CARD_SHADOWS",
    "RenderContext",
    "apply_text_transform",
    "child_position",
    "display_text",
    "effective_transform",
    "icon_glyph",
    "initials",
    "is_vertical",
    "paint_order",
    "resolve_fill",
    "resolve_shadows",
    "render",
    "render_layout",
    "render_svg",
    "to_svg",
]
