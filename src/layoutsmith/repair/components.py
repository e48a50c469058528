"""
Component repair pass.

Fixes the recurring ways generator output deviates from the schema before strict
validation: invented component types, negative z-indexes, string font weights,
malformed shadows and garbage children. Mutates the parsed tree in place and
never raises; anything it cannot fix is left for the validator to report.
"""

import re
from typing import Any, Callable

from ..models import COMPONENT_TYPES, TEXT_TRANSFORMS

VALID_TYPES = frozenset(COMPONENT_TYPES)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _contains(*keywords: str) -> Callable[[str], bool]:
    return lambda name: any(keyword in name for keyword in keywords)


# Ordered (predicate, kind) rules over the lower-cased type name; first match wins
TYPE_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (_contains("heading", "headline", "paragraph", "label", "title", "text"), "text"),
    (_contains("image", "img", "photo"), "image-placeholder"),
    (_contains("line", "separator", "hr"), "divider"),
    (_contains("list", "section", "group", "nav", "header", "footer"), "container"),
)
FALLBACK_TYPE = "shape"


def coerce_type(name: Any) -> str:
    """Map any type name onto one of the known component kinds."""
    if isinstance(name, str) and name in VALID_TYPES:
        return name
    lowered = str(name).lower()
    for predicate, kind in TYPE_RULES:
        if predicate(lowered):
            return kind
    return FALLBACK_TYPE


def parse_int(value: str) -> int | None:
    """Leading-integer parse: ``"700"`` and ``"600px"`` parse, ``"bold"`` does not."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_valid_shadow(entry: Any) -> bool:
    return (
        isinstance(entry, dict)
        and _is_number(entry.get("x"))
        and _is_number(entry.get("y"))
        and _is_number(entry.get("blur"))
        and isinstance(entry.get("color"), str)
    )


def repair_style(style: dict[str, Any]) -> None:
    """Fix fontWeight, shadow, shadows and textTransform in a style dict."""
    font_weight = style.get("fontWeight")
    if isinstance(font_weight, str):
        parsed = parse_int(font_weight)
        if parsed is None:
            del style["fontWeight"]
        else:
            style["fontWeight"] = parsed

    if isinstance(style.get("shadow"), str):
        del style["shadow"]

    if "shadows" in style:
        shadows = style["shadows"]
        if isinstance(shadows, list):
            kept = [entry for entry in shadows if _is_valid_shadow(entry)]
            if kept:
                style["shadows"] = kept
            else:
                del style["shadows"]
        else:
            del style["shadows"]

    if "textTransform" in style and style["textTransform"] not in TEXT_TRANSFORMS:
        del style["textTransform"]


def repair_component(comp: dict[str, Any]) -> None:
    """Repair one component and, recursively, its children."""
    type_name = comp.get("type")
    if type_name and not (isinstance(type_name, str) and type_name in VALID_TYPES):
        comp["type"] = coerce_type(type_name)

    z_index = comp.get("zIndex")
    if _is_number(z_index) and z_index < 0:
        comp["zIndex"] = 0

    style = comp.get("style")
    if not style and not isinstance(style, dict):
        comp["style"] = {}
    if isinstance(comp["style"], dict):
        repair_style(comp["style"])

    children = comp.get("children")
    if isinstance(children, list):
        kept = [child for child in children if isinstance(child, dict) and child.get("type")]
        for child in kept:
            repair_component(child)
        if kept:
            comp["children"] = kept
        else:
            del comp["children"]


def repair_operation(op: Any) -> None:
    """
    Repair one edit operation in place.

    Added components get the full component pass; modify changes and reorder
    targets get the same style and zIndex fixes, so a quirk in one operation
    never fails the batch.
    """
    if not isinstance(op, dict):
        return
    action = op.get("action")
    if action == "add" and isinstance(op.get("component"), dict):
        repair_component(op["component"])
    elif action == "modify" and isinstance(op.get("changes"), dict):
        changes = op["changes"]
        z_index = changes.get("zIndex")
        if _is_number(z_index) and z_index < 0:
            changes["zIndex"] = 0
        if isinstance(changes.get("style"), dict):
            repair_style(changes["style"])
    elif action == "reorder":
        z_index = op.get("newZIndex")
        if _is_number(z_index) and z_index < 0:
            op["newZIndex"] = 0


def repair_components(parsed: Any) -> None:
    """
    Repair every top-level component of a parsed layout tree in place.

    Args:
        parsed: JSON-parsed layout; anything that is not a dict is left alone
    """
    if not isinstance(parsed, dict):
        return
    components = parsed.get("components")
    if not isinstance(components, list):
        return
    for comp in components:
        if isinstance(comp, dict):
            repair_component(comp)


# Public alias matching the pipeline stage name
repair = repair_components
