"""
HTML Renderer

Absolutely positioned ``div`` rendering of a layout, for previews and export.
Uses the same defaults and resolution rules as the SVG backend; fills and
shadows become CSS ``background`` and ``box-shadow`` declarations.
"""

from collections.abc import Callable
from typing import Any

from ..models import Component, Gradient, Layout
from .nodes import VisualNode, el, fmt, px, to_markup
from .resolve import (
    DEFAULT_CARD_SHADOWS,
    RenderContext,
    child_position,
    css_gradient,
    css_shadows,
    display_text,
    icon_glyph,
    initials,
    is_vertical,
    paint_order,
    resolve_fill,
    resolve_shadows,
)
from .svg import LANDSCAPE_PATH, glyph

HIGHLIGHT = "linear-gradient(to bottom, rgba(255,255,255,0.15) 0%, rgba(0,0,0,0) 100%)"

_JUSTIFY = {"left": "flex-start", "right": "flex-end", "center": "center"}


def css(**props: Any) -> str | None:
    """Inline style declaration; ``None`` values are dropped, numbers become px."""
    parts = []
    for name, value in props.items():
        if value is None:
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = px(value)
        parts.append(f"{name.replace('_', '-')}: {value}")
    return "; ".join(parts) or None


def background(value: str | Gradient) -> str:
    return value if isinstance(value, str) else css_gradient(value)


def border(color: str | None, width: float | None, default_width: float = 1) -> str:
    if not color:
        return "none"
    return f"{px(width if width is not None else default_width)} solid {color}"


def _box(component: Component, *children: VisualNode | None, text: str | None = None, **style: Any) -> VisualNode:
    size = component.size
    return el("div", *children, text=text, style=css(width=size.width, height=size.height, **style))


def _font(component: Component, ctx: RenderContext, size: float, weight: float, color: str) -> dict[str, Any]:
    s = component.style
    return {
        "font_family": s.font_family or ctx.font_family,
        "font_size": s.font_size or size,
        "font_weight": fmt(s.font_weight or weight),
        "color": s.color or color,
    }


def _centered(justify: str = "center") -> dict[str, str]:
    return {"display": "flex", "align_items": "center", "justify_content": justify}


def _children(component: Component, ctx: RenderContext) -> list[VisualNode]:
    placed = []
    for child in paint_order(component.children):
        position = child_position(child, component, ctx.child_positions)
        placed.append(_place(child, ctx, position.x, position.y, z_index=str(child.z_index)))
    return placed


def _place(component: Component, ctx: RenderContext, left: float, top: float, **extra: Any) -> VisualNode:
    return el(
        "div",
        _render(component, ctx),
        style=css(
            position="absolute",
            left=left,
            top=top,
            transform=f"rotate({fmt(component.rotation)}deg)" if component.rotation else None,
            **extra,
        ),
    )


def _svg_glyph(*shapes: VisualNode, width: str, height: str) -> VisualNode:
    return el("svg", *shapes, width=width, height=height, viewBox="0 0 24 24", fill="none")


# ─── Component renderers ────────────────────────────────────────


def _text(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    return _box(
        component,
        text=display_text(component),
        **_centered(_JUSTIFY[s.text_align or "center"]),
        **_font(component, ctx, 16, 400, "#000"),
        letter_spacing=s.letter_spacing,
        line_height=fmt(s.line_height) if s.line_height is not None else None,
        text_shadow=css_shadows(resolve_shadows(s)),
        overflow="hidden",
        white_space="pre-line",
    )


def _button(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    return _box(
        component,
        text=display_text(component),
        background=f"{HIGHLIGHT}, {background(resolve_fill(s, '#3B82F6'))}",
        border_radius=s.border_radius if s.border_radius is not None else 6,
        border=border(s.stroke, s.stroke_width),
        box_shadow=css_shadows(resolve_shadows(s)),
        **_centered(),
        **_font(component, ctx, 14, 600, "#fff"),
        letter_spacing=s.letter_spacing,
        overflow="hidden",
    )


def _shape(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    return _box(
        component,
        background=background(resolve_fill(s, "#ccc")),
        border_radius=s.border_radius or 0,
        border=border(s.stroke, s.stroke_width),
        box_shadow=css_shadows(resolve_shadows(s)),
    )


def _card(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    return _box(
        component,
        *_children(component, ctx),
        background=background(resolve_fill(s, "#fff")),
        border_radius=s.border_radius if s.border_radius is not None else 8,
        border=border(s.stroke or "rgba(0,0,0,0.06)", s.stroke_width),
        box_shadow=css_shadows(resolve_shadows(s) or DEFAULT_CARD_SHADOWS),
        overflow="hidden",
        position="relative",
    )


def _container(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    has_background = bool(s.fill) or s.gradient is not None
    return _box(
        component,
        *_children(component, ctx),
        background=background(resolve_fill(s, "transparent")) if has_background else "transparent",
        border_radius=s.border_radius or 0,
        overflow="hidden",
        position="relative",
    )


def _image_placeholder(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    icon_color = s.stroke or "#9CA3AF"
    icon_size = px(min(component.size.width, component.size.height) * 0.3)
    caption = display_text(component)
    return _box(
        component,
        _svg_glyph(
            el("path", d=LANDSCAPE_PATH, fill=icon_color, opacity=0.6),
            el("circle", cx=16, cy=7, r=2.5, fill=icon_color, opacity=0.5),
            width=icon_size,
            height=icon_size,
        ),
        el(
            "span",
            text=caption,
            style=css(
                font_family=s.font_family or ctx.font_family,
                font_size=11,
                color=icon_color,
                opacity="0.8",
            ),
        )
        if caption
        else None,
        background=background(resolve_fill(s, "#E5E7EB")),
        border_radius=s.border_radius if s.border_radius is not None else 8,
        **_centered(),
        flex_direction="column",
        gap=8,
        overflow="hidden",
    )


def _disc(component: Component, fill: str, *children: VisualNode, **style: Any) -> VisualNode:
    """Circle of diameter ``min(w, h) - 2`` centered in the component box."""
    diameter = max(min(component.size.width, component.size.height) - 2, 1)
    s = component.style
    return _box(
        component,
        el(
            "div",
            *children,
            style=css(
                width=diameter,
                height=diameter,
                border_radius="50%",
                background=fill,
                border=border(s.stroke, s.stroke_width) if s.stroke else None,
                box_shadow=css_shadows(resolve_shadows(s)),
                **_centered(),
                **style,
            ),
        ),
        **_centered(),
    )


def _icon(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    mark = glyph(icon_glyph(component.content), s.color or "#fff")
    return _disc(
        component,
        background(resolve_fill(s, "#6B7280")),
        _svg_glyph(mark, width="60%", height="60%"),
    )


def _avatar(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    label = display_text(component.model_copy(update={"content": initials(component.content)}))
    radius = min(component.size.width, component.size.height) / 2
    font = _font(component, ctx, round(radius * 0.8), 600, "#fff")
    return _disc(
        component,
        background(resolve_fill(s, "#6366F1")),
        el("span", text=label),
        **font,
    )


def _badge(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    return _box(
        component,
        text=display_text(component),
        background=background(resolve_fill(s, "#10B981")),
        border_radius=s.border_radius if s.border_radius is not None else min(component.size.height / 2, 12),
        border=border(s.stroke, s.stroke_width) if s.stroke else None,
        box_shadow=css_shadows(resolve_shadows(s)),
        **_centered(),
        **_font(component, ctx, 11, 600, "#fff"),
        letter_spacing=s.letter_spacing if s.letter_spacing is not None else 0.5,
        overflow="hidden",
    )


def _divider(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    color = s.stroke or s.fill or "#E5E7EB"
    thickness = s.stroke_width if s.stroke_width is not None else 1
    if is_vertical(component.size):
        rule = css(width=thickness, height="100%", background=color)
    else:
        rule = css(width="100%", height=thickness, background=color)
    return _box(component, el("div", style=rule), **_centered())


def _input_field(component: Component, ctx: RenderContext) -> VisualNode:
    s = component.style
    return _box(
        component,
        text=display_text(component, default="Enter text..."),
        background=background(resolve_fill(s, "#F9FAFB")),
        border=border(s.stroke or "#D1D5DB", s.stroke_width),
        border_radius=s.border_radius if s.border_radius is not None else 6,
        **_centered("flex-start"),
        padding_left=12,
        box_sizing="border-box",
        **_font(component, ctx, 14, 400, "#9CA3AF"),
        opacity="0.7",
        overflow="hidden",
    )


RENDERERS: dict[str, Callable[[Component, RenderContext], VisualNode]] = {
    "text": _text,
    "button": _button,
    "shape": _shape,
    "card": _card,
    "container": _container,
    "image-placeholder": _image_placeholder,
    "icon": _icon,
    "avatar": _avatar,
    "badge": _badge,
    "divider": _divider,
    "input-field": _input_field,
}


def _render(component: Component, ctx: RenderContext) -> VisualNode:
    node = RENDERERS.get(component.type, _shape)(component, ctx)
    node.attrs["data-component-id"] = component.id
    node.attrs["data-type"] = component.type
    if component.style.opacity is not None and component.type != "input-field":
        node.attrs["style"] = f"{node.attrs['style']}; opacity: {fmt(component.style.opacity)}"
    return node


def render(component: Component, ctx: RenderContext | None = None) -> VisualNode:
    """Render one component (and its children) as a sized ``div``."""
    return _render(component, ctx or RenderContext())


def _canvas_background(layout: Layout) -> dict[str, str]:
    bg = layout.background
    if bg.type == "gradient" and bg.gradient is not None and bg.gradient.renderable:
        return {"background": css_gradient(bg.gradient)}
    if bg.type == "image" and bg.value:
        return {
            "background_color": "#ffffff",
            "background_image": f"url('{bg.value}')",
            "background_size": "cover",
            "background_position": "center",
        }
    return {"background_color": bg.value if bg.type == "solid" and bg.value else "#ffffff"}


def render_layout(layout: Layout, ctx: RenderContext | None = None) -> VisualNode:
    """
    Render a whole layout to a positioned ``div`` canvas.

    Paint order matches the SVG backend: ascending z-index, stable, hidden
    layers skipped.
    """
    ctx = ctx or RenderContext()
    hidden = layout.hidden_component_ids()
    ordered = paint_order(layout.components)
    return el(
        "div",
        *(
            _place(component, ctx, component.position.x, component.position.y, z_index=str(component.z_index))
            for component in ordered
            if component.id not in hidden
        ),
        style=css(
            position="relative",
            width=layout.canvas_width,
            height=layout.canvas_height,
            overflow="hidden",
            **_canvas_background(layout),
        ),
        data_layout_id=layout.id,
    )


def to_html(node: VisualNode) -> str:
    """Serialize an HTML node tree; empty elements keep explicit closing tags."""
    return to_markup(node, self_closing=False)


def render_html(layout: Layout, ctx: RenderContext | None = None) -> str:
    """Render a layout straight to an HTML fragment string."""
    return to_html(render_layout(layout, ctx))
