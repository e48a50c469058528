"""Resolution rules shared by every render backend.

Fill, shadow and text-transform resolution, child positioning, sibling paint
order and the small per-kind derivations (initials, icon glyph, divider
orientation).
"""

import math
import re
from dataclasses import dataclass, field
from typing import Literal

from ..core.id import new_render_namespace
from ..engine.geometry import child_offset
from ..models import Component, Gradient, Position, Shadow, Size, Style
from .nodes import fmt

DEFAULT_FONT = "Inter, system-ui, sans-serif"

# Ambient + key shadow given to cards that specify none
DEFAULT_CARD_SHADOWS = (
    Shadow(x=0, y=1, blur=3, color="rgba(0,0,0,0.08)"),
    Shadow(x=0, y=4, blur=16, color="rgba(0,0,0,0.06)"),
)

Glyph = Literal["check", "star", "chevron", "dot"]

# Ordered keyword hints; first match wins
GLYPH_HINTS: tuple[tuple[tuple[str, ...], Glyph], ...] = (
    (("check", "success"), "check"),
    (("star", "rating"), "star"),
    (("arrow", "next", "chevron"), "chevron"),
)

_WORD_START = re.compile(r"\b\w")


@dataclass
class RenderContext:
    """
    Per-render-call state.

    Generates ids for gradient, filter and clip-path definitions. The namespace
    is unique per call so documents rendered concurrently, or inlined into the
    same page, never share ids.
    """

    namespace: str = field(default_factory=new_render_namespace)
    child_positions: Literal["relative", "auto"] = "relative"
    font_family: str = DEFAULT_FONT
    _counter: int = 0

    def next_id(self, kind: str) -> str:
        self._counter += 1
        return f"{kind}-{self.namespace}-{self._counter}"


def resolve_fill(style: Style, fallback: str) -> str | Gradient:
    """Gradient when it has at least two stops, else ``fill``, else ``fallback``."""
    if style.gradient is not None and style.gradient.renderable:
        return style.gradient
    return style.fill or fallback


def resolve_shadows(style: Style) -> list[Shadow]:
    """``shadows`` wins over ``shadow``; order is paint order."""
    if style.shadows:
        return list(style.shadows)
    if style.shadow is not None:
        return [style.shadow]
    return []


def apply_text_transform(text: str, transform: str | None) -> str:
    if transform == "uppercase":
        return text.upper()
    if transform == "lowercase":
        return text.lower()
    if transform == "capitalize":
        return _WORD_START.sub(lambda match: match.group().upper(), text)
    return text


def effective_transform(component: Component) -> str | None:
    """Badges default to uppercase; every other kind defaults to no transform."""
    if component.style.text_transform is None and component.type == "badge":
        return "uppercase"
    return component.style.text_transform


def display_text(component: Component, default: str = "") -> str:
    return apply_text_transform(component.content or default, effective_transform(component))


def gradient_vector(angle: float) -> tuple[float, float, float, float]:
    """
    Gradient axis in bounding-box fractions ``(x1, y1, x2, y2)``.

    0 degrees runs left-to-right and 90 top-to-bottom (y grows downwards).
    """
    radians = math.radians(angle)
    dx = math.cos(radians) / 2
    dy = math.sin(radians) / 2
    return (
        round(0.5 - dx, 4),
        round(0.5 - dy, 4),
        round(0.5 + dx, 4),
        round(0.5 + dy, 4),
    )


def css_gradient(gradient: Gradient) -> str:
    """CSS equivalent. CSS measures from 'to top', so add 90 degrees."""
    stops = ", ".join(f"{stop.color} {fmt(stop.position)}%" for stop in gradient.stops)
    return f"linear-gradient({fmt((gradient.angle + 90) % 360)}deg, {stops})"


def css_shadows(shadows: list[Shadow] | tuple[Shadow, ...]) -> str | None:
    """Comma-joined CSS shadow list (first entry paints on top in CSS)."""
    if not shadows:
        return None
    # CSS paints the first shadow topmost; reverse so later entries paint last
    return ", ".join(
        f"{fmt(s.x)}px {fmt(s.y)}px {fmt(s.blur)}px {s.color}" for s in reversed(shadows)
    )


def initials(content: str | None) -> str:
    """First letter of up to the first two words, uppercased."""
    words = (content or "?").split()
    return "".join(word[0].upper() for word in words[:2]) or "?"


def icon_glyph(content: str | None) -> Glyph:
    hint = (content or "").lower()
    for keywords, glyph in GLYPH_HINTS:
        if any(keyword in hint for keyword in keywords):
            return glyph
    return "dot"


def is_vertical(size: Size) -> bool:
    return size.height > size.width * 2


def child_position(
    child: Component, parent: Component, mode: Literal["relative", "auto"] = "relative"
) -> Position:
    """
    Child origin inside the parent's frame.

    ``relative`` trusts the canonical convention; ``auto`` detects canvas
    coordinates for input that was never normalized.
    """
    if mode == "auto":
        return child_offset(child, parent)
    return child.position


def paint_order(components: list[Component] | None) -> list[Component]:
    """Siblings in ascending ``zIndex``; equal values keep list order."""
    return sorted(components or [], key=lambda component: component.z_index)
