"""Visual node tree and markup serialization.

Both render backends build ``VisualNode`` trees: the SVG backend with SVG
elements, the HTML backend with positioned ``div``s. Serialization is shared.
"""

import html
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class VisualNode:
    """One element: tag, attributes, child elements and optional text."""

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list["VisualNode"] = field(default_factory=list)
    text: str | None = None

    def iter(self, tag: str | None = None) -> Iterator["VisualNode"]:
        """Depth-first walk, optionally filtered by tag."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)

    def find(self, tag: str) -> "VisualNode | None":
        return next(self.iter(tag), None)

    def find_all(self, tag: str) -> list["VisualNode"]:
        return list(self.iter(tag))

    def all_text(self) -> str:
        """Concatenated text of this node and its descendants."""
        return "".join(node.text or "" for node in self.iter())


def _attr_name(name: str) -> str:
    # class_ -> class, font_size -> font-size
    return name.rstrip("_").replace("_", "-")


def el(tag: str, *children: VisualNode | None, text: str | None = None, **attrs: Any) -> VisualNode:
    """Build a node. ``None`` attribute values and ``None`` children are dropped."""
    return VisualNode(
        tag=tag,
        attrs={_attr_name(k): v for k, v in attrs.items() if v is not None},
        children=[child for child in children if child is not None],
        text=text,
    )


def fmt(value: Any) -> str:
    """Format an attribute value: integral floats lose their ``.0``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def px(value: float) -> str:
    return f"{fmt(value)}px"


def to_markup(node: VisualNode, self_closing: bool = True) -> str:
    """
    Serialize a node tree.

    Args:
        node: Root node
        self_closing: Emit ``<rect/>`` for empty elements (SVG); when false every
            element gets an explicit closing tag (HTML)
    """
    attrs = "".join(
        f' {name}="{html.escape(fmt(value), quote=True)}"' for name, value in node.attrs.items()
    )
    inner = html.escape(node.text, quote=False) if node.text else ""
    inner += "".join(to_markup(child, self_closing) for child in node.children)

    if not inner and self_closing:
        return f"<{node.tag}{attrs}/>"
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"
