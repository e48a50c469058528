"""
SVG Renderer

Maps validated, processed components to SVG ``VisualNode`` trees.

Every component renders to a ``<g>`` in its own local frame (origin at its
top-left corner). The caller positions it: ``render_layout`` for top-level
components, card and container renderers for children. Definitions a component
needs (gradients, shadow filters, clip paths) live in a ``<defs>`` inside that
component's group, with ids from the per-call ``RenderContext``.
"""

from collections.abc import Callable

from ..models import Component, Gradient, Layout, Shadow
from .nodes import VisualNode, el, fmt, to_markup
from .resolve import (
    DEFAULT_CARD_SHADOWS,
    RenderContext,
    child_position,
    display_text,
    gradient_vector,
    icon_glyph,
    initials,
    is_vertical,
    paint_order,
    resolve_fill,
    resolve_shadows,
)

SVG_NS = "http://www.w3.org/2000/svg"

# 24x24 glyph artwork
LANDSCAPE_PATH = "M4 20L9 12L13 16L17 10L20 20H4Z"
STAR_POINTS = "12,2 15.09,8.26 22,9.27 17,14.14 18.18,21.02 12,17.77 5.82,21.02 7,14.14 2,9.27 8.91,8.26"
CHECK_POINTS = "6,12 10,16 18,8"
CHEVRON_POINTS = "9,6 15,12 9,18"


class _Frame:
    """Collects the definitions and elements of one component group."""

    def __init__(self, component: Component, ctx: RenderContext) -> None:
        self.component = component
        self.ctx = ctx
        self.defs: list[VisualNode] = []
        self.items: list[VisualNode] = []

    @property
    def width(self) -> float:
        return self.component.size.width

    @property
    def height(self) -> float:
        return self.component.size.height

    def add(self, *nodes: VisualNode | None) -> None:
        self.items.extend(node for node in nodes if node is not None)

    def paint(self, value: str | Gradient) -> str:
        """Fill attribute value, defining a linear gradient when needed."""
        if isinstance(value, str):
            return value
        gradient_id = self.ctx.next_id("grad")
        x1, y1, x2, y2 = gradient_vector(value.angle)
        self.defs.append(
            el(
                "linearGradient",
                *(
                    el("stop", offset=f"{stop.position / 100:g}", stop_color=stop.color)
                    for stop in value.stops
                ),
                id=gradient_id,
                x1=x1,
                y1=y1,
                x2=x2,
                y2=y2,
            )
        )
        return f"url(#{gradient_id})"

    def shadow_filter(self, shadows: list[Shadow] | tuple[Shadow, ...]) -> str | None:
        """
        Filter stacking every shadow under the graphic.

        Each shadow is blurred, offset and flooded independently, then merged in
        order so later shadows paint over earlier ones.
        """
        if not shadows:
            return None
        filter_id = self.ctx.next_id("shadow")
        primitives: list[VisualNode] = []
        merge_nodes: list[VisualNode] = []
        for index, shadow in enumerate(shadows):
            result = f"s{index}"
            primitives.extend(
                [
                    el("feGaussianBlur", in_="SourceAlpha", stdDeviation=shadow.blur / 2, result=f"{result}b"),
                    el("feOffset", in_=f"{result}b", dx=shadow.x, dy=shadow.y, result=f"{result}o"),
                    el("feFlood", flood_color=shadow.color, result=f"{result}c"),
                    el("feComposite", in_=f"{result}c", in2=f"{result}o", operator="in", result=result),
                ]
            )
            merge_nodes.append(el("feMergeNode", in_=result))
        merge_nodes.append(el("feMergeNode", in_="SourceGraphic"))
        self.defs.append(
            el(
                "filter",
                *primitives,
                el("feMerge", *merge_nodes),
                id=filter_id,
                x="-50%",
                y="-50%",
                width="200%",
                height="200%",
            )
        )
        return f"url(#{filter_id})"

    def clip(self, radius: float) -> str:
        clip_id = self.ctx.next_id("clip")
        self.defs.append(
            el("clipPath", el("rect", width=self.width, height=self.height, rx=radius), id=clip_id)
        )
        return f"url(#{clip_id})"

    def text(
        self,
        content: str,
        *,
        align: str = "center",
        font_size: float,
        font_weight: float,
        color: str,
        inset: float = 0,
        letter_spacing: float | None = None,
        line_height: float | None = None,
        opacity: float | None = None,
        filter_: str | None = None,
    ) -> VisualNode | None:
        """Text block vertically centered in the frame; one tspan per line."""
        if not content:
            return None
        style = self.component.style
        if align == "left":
            x, anchor = inset, "start"
        elif align == "right":
            x, anchor = self.width - inset, "end"
        else:
            x, anchor = self.width / 2, "middle"

        lines = content.split("\n")
        step = font_size * (line_height or 1.2)
        first_y = self.height / 2 - step * (len(lines) - 1) / 2
        attrs = dict(
            x=x,
            y=first_y,
            font_family=style.font_family or self.ctx.font_family,
            font_size=font_size,
            font_weight=font_weight,
            fill=color,
            text_anchor=anchor,
            dominant_baseline="middle",
            letter_spacing=letter_spacing,
            opacity=opacity,
            filter=filter_,
        )
        if len(lines) == 1:
            return el("text", text=content, **attrs)
        spans = [
            el("tspan", text=line, x=x, dy=None if index == 0 else step)
            for index, line in enumerate(lines)
        ]
        return el("text", *spans, **attrs)

    def group(self) -> VisualNode:
        component = self.component
        defs = el("defs", *self.defs) if self.defs else None
        return el(
            "g",
            defs,
            *self.items,
            data_component_id=component.id,
            data_type=component.type,
            opacity=component.style.opacity,
        )


def _stroke(frame: _Frame, default_color: str | None = None, default_width: float = 1) -> dict:
    style = frame.component.style
    color = style.stroke or default_color
    if not color:
        return {}
    width = style.stroke_width if style.stroke_width is not None else default_width
    return {"stroke": color, "stroke_width": width}


def _children(frame: _Frame) -> list[VisualNode]:
    parent = frame.component
    placed = []
    for child in paint_order(parent.children):
        position = child_position(child, parent, frame.ctx.child_positions)
        placed.append(el("g", _render(child, frame.ctx), transform=_transform(child, position.x, position.y)))
    return placed


def _transform(component: Component, x: float, y: float) -> str:
    transform = f"translate({fmt(x)},{fmt(y)})"
    if component.rotation:
        cx = fmt(component.size.width / 2)
        cy = fmt(component.size.height / 2)
        transform += f" rotate({fmt(component.rotation)},{cx},{cy})"
    return transform


# ─── Component renderers ────────────────────────────────────────


def _text(frame: _Frame) -> None:
    s = frame.component.style
    shadow = frame.shadow_filter(resolve_shadows(s))
    frame.add(
        frame.text(
            display_text(frame.component),
            align=s.text_align or "center",
            font_size=s.font_size or 16,
            font_weight=s.font_weight or 400,
            color=s.color or "#000",
            letter_spacing=s.letter_spacing,
            line_height=s.line_height,
            filter_=shadow,
        )
    )


def _button(frame: _Frame) -> None:
    s = frame.component.style
    radius = s.border_radius if s.border_radius is not None else 6
    frame.add(
        el(
            "rect",
            width=frame.width,
            height=frame.height,
            rx=radius,
            fill=frame.paint(resolve_fill(s, "#3B82F6")),
            filter=frame.shadow_filter(resolve_shadows(s)),
            **_stroke(frame),
        )
    )
    highlight = Gradient(
        angle=90,
        stops=[
            {"color": "rgba(255,255,255,0.15)", "position": 0},
            {"color": "rgba(0,0,0,0)", "position": 100},
        ],
    )
    frame.add(
        el("rect", width=frame.width, height=frame.height, rx=radius, fill=frame.paint(highlight)),
        frame.text(
            display_text(frame.component),
            font_size=s.font_size or 14,
            font_weight=s.font_weight or 600,
            color=s.color or "#fff",
            letter_spacing=s.letter_spacing,
        ),
    )


def _shape(frame: _Frame) -> None:
    s = frame.component.style
    frame.add(
        el(
            "rect",
            width=frame.width,
            height=frame.height,
            rx=s.border_radius or 0,
            fill=frame.paint(resolve_fill(s, "#ccc")),
            filter=frame.shadow_filter(resolve_shadows(s)),
            **_stroke(frame),
        )
    )


def _card(frame: _Frame) -> None:
    s = frame.component.style
    radius = s.border_radius if s.border_radius is not None else 8
    shadows = resolve_shadows(s) or DEFAULT_CARD_SHADOWS
    frame.add(
        el(
            "rect",
            width=frame.width,
            height=frame.height,
            rx=radius,
            fill=frame.paint(resolve_fill(s, "#fff")),
            filter=frame.shadow_filter(shadows),
            **_stroke(frame, default_color="rgba(0,0,0,0.06)"),
        )
    )
    if frame.component.renders_children:
        frame.add(el("g", *_children(frame), clip_path=frame.clip(radius)))


def _container(frame: _Frame) -> None:
    s = frame.component.style
    radius = s.border_radius or 0
    if s.fill or s.gradient is not None:
        frame.add(
            el(
                "rect",
                width=frame.width,
                height=frame.height,
                rx=radius,
                fill=frame.paint(resolve_fill(s, "transparent")),
            )
        )
    if frame.component.renders_children:
        frame.add(el("g", *_children(frame), clip_path=frame.clip(radius)))


def _image_placeholder(frame: _Frame) -> None:
    s = frame.component.style
    icon_color = s.stroke or "#9CA3AF"
    caption = display_text(frame.component)
    icon_size = min(frame.width, frame.height) * 0.3
    caption_size = 11
    gap = 8
    block = icon_size + (gap + caption_size if caption else 0)
    top = (frame.height - block) / 2
    left = (frame.width - icon_size) / 2
    scale = icon_size / 24

    frame.add(
        el(
            "rect",
            width=frame.width,
            height=frame.height,
            rx=s.border_radius if s.border_radius is not None else 8,
            fill=frame.paint(resolve_fill(s, "#E5E7EB")),
        ),
        el(
            "g",
            el("path", d=LANDSCAPE_PATH, fill=icon_color, opacity=0.6),
            el("circle", cx=16, cy=7, r=2.5, fill=icon_color, opacity=0.5),
            transform=f"translate({left:g},{top:g}) scale({scale:g})",
        ),
    )
    if caption:
        frame.add(
            el(
                "text",
                text=caption,
                x=frame.width / 2,
                y=top + icon_size + gap + caption_size / 2,
                font_family=s.font_family or frame.ctx.font_family,
                font_size=caption_size,
                fill=icon_color,
                opacity=0.8,
                text_anchor="middle",
                dominant_baseline="middle",
            )
        )


def glyph(kind: str, color: str) -> VisualNode:
    """24x24 icon glyph shared with the HTML backend."""
    stroke = dict(fill="none", stroke=color, stroke_width=2, stroke_linecap="round", stroke_linejoin="round")
    if kind == "check":
        return el("polyline", points=CHECK_POINTS, **stroke)
    if kind == "chevron":
        return el("polyline", points=CHEVRON_POINTS, **stroke)
    if kind == "star":
        return el("polygon", points=STAR_POINTS, fill=color)
    return el("circle", cx=12, cy=12, r=4, fill=color)


def _circle(frame: _Frame, fallback: str) -> float:
    s = frame.component.style
    radius = max(min(frame.width, frame.height) / 2 - 1, 0.5)
    frame.add(
        el(
            "circle",
            cx=frame.width / 2,
            cy=frame.height / 2,
            r=radius,
            fill=frame.paint(resolve_fill(s, fallback)),
            filter=frame.shadow_filter(resolve_shadows(s)),
            **_stroke(frame),
        )
    )
    return radius


def _icon(frame: _Frame) -> None:
    radius = _circle(frame, "#6B7280")
    size = radius * 2 * 0.6
    scale = size / 24
    left = frame.width / 2 - size / 2
    top = frame.height / 2 - size / 2
    frame.add(
        el(
            "g",
            glyph(icon_glyph(frame.component.content), frame.component.style.color or "#fff"),
            transform=f"translate({left:g},{top:g}) scale({scale:g})",
        )
    )


def _avatar(frame: _Frame) -> None:
    s = frame.component.style
    _circle(frame, "#6366F1")
    text = initials(frame.component.content)
    frame.add(
        frame.text(
            display_text(frame.component.model_copy(update={"content": text})),
            font_size=s.font_size or round(min(frame.width, frame.height) / 2 * 0.8),
            font_weight=s.font_weight or 600,
            color=s.color or "#fff",
        )
    )


def _badge(frame: _Frame) -> None:
    s = frame.component.style
    radius = s.border_radius if s.border_radius is not None else min(frame.height / 2, 12)
    frame.add(
        el(
            "rect",
            width=frame.width,
            height=frame.height,
            rx=radius,
            fill=frame.paint(resolve_fill(s, "#10B981")),
            filter=frame.shadow_filter(resolve_shadows(s)),
            **_stroke(frame),
        ),
        frame.text(
            display_text(frame.component),
            font_size=s.font_size or 11,
            font_weight=s.font_weight or 600,
            color=s.color or "#fff",
            letter_spacing=s.letter_spacing if s.letter_spacing is not None else 0.5,
        ),
    )


def _divider(frame: _Frame) -> None:
    s = frame.component.style
    color = s.stroke or s.fill or "#E5E7EB"
    thickness = s.stroke_width if s.stroke_width is not None else 1
    if is_vertical(frame.component.size):
        x = frame.width / 2
        line = el("line", x1=x, y1=0, x2=x, y2=frame.height, stroke=color, stroke_width=thickness)
    else:
        y = frame.height / 2
        line = el("line", x1=0, y1=y, x2=frame.width, y2=y, stroke=color, stroke_width=thickness)
    frame.add(line)


def _input_field(frame: _Frame) -> None:
    s = frame.component.style
    frame.add(
        el(
            "rect",
            width=frame.width,
            height=frame.height,
            rx=s.border_radius if s.border_radius is not None else 6,
            fill=frame.paint(resolve_fill(s, "#F9FAFB")),
            **_stroke(frame, default_color="#D1D5DB"),
        ),
        frame.text(
            display_text(frame.component, default="Enter text..."),
            align="left",
            inset=12,
            font_size=s.font_size or 14,
            font_weight=s.font_weight or 400,
            color=s.color or "#9CA3AF",
            opacity=0.7,
        ),
    )


RENDERERS: dict[str, Callable[[_Frame], None]] = {
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
    frame = _Frame(component, ctx)
    RENDERERS.get(component.type, _shape)(frame)
    return frame.group()


def render(component: Component, ctx: RenderContext | None = None) -> VisualNode:
    """
    Render one component (and its children) in its local frame.

    Args:
        component: Validated component
        ctx: Render context; a fresh one is created when omitted

    Returns:
        ``<g>`` node; definitions it needs are included inside it
    """
    return _render(component, ctx or RenderContext())


def _background(layout: Layout, frame: _Frame) -> list[VisualNode]:
    background = layout.background
    size = dict(width=layout.canvas_width, height=layout.canvas_height)
    if background.type == "gradient" and background.gradient is not None and background.gradient.renderable:
        return [el("rect", fill=frame.paint(background.gradient), **size)]
    if background.type == "image" and background.value:
        return [
            el("rect", fill="#ffffff", **size),
            el("image", href=background.value, preserveAspectRatio="xMidYMid slice", **size),
        ]
    color = background.value if background.type == "solid" and background.value else "#ffffff"
    return [el("rect", fill=color, **size)]


def render_layout(layout: Layout, ctx: RenderContext | None = None) -> VisualNode:
    """
    Render a whole layout to an ``<svg>`` document node.

    Top-level components paint in ascending z-index (stable), each translated to
    its canvas position and rotated about its center. Components referenced by a
    hidden layer are skipped.
    """
    ctx = ctx or RenderContext()
    canvas = Component(
        id=layout.id,
        type="container",
        position={"x": 0, "y": 0},
        size={"width": layout.canvas_width, "height": layout.canvas_height},
        style={},
    )
    frame = _Frame(canvas, ctx)
    backdrop = _background(layout, frame)

    hidden = layout.hidden_component_ids()
    ordered = paint_order(layout.components)
    placed = [
        el(
            "g",
            _render(component, ctx),
            transform=_transform(component, component.position.x, component.position.y),
        )
        for component in ordered
        if component.id not in hidden
    ]

    return el(
        "svg",
        el("defs", *frame.defs) if frame.defs else None,
        *backdrop,
        *placed,
        xmlns=SVG_NS,
        width=layout.canvas_width,
        height=layout.canvas_height,
        viewBox=f"0 0 {fmt(layout.canvas_width)} {fmt(layout.canvas_height)}",
        data_layout_id=layout.id,
    )


def to_svg(node: VisualNode) -> str:
    """Serialize an SVG node tree."""
    return to_markup(node, self_closing=True)


def render_svg(layout: Layout, ctx: RenderContext | None = None) -> str:
    """Render a layout straight to an SVG document string."""
    return to_svg(render_layout(layout, ctx))
