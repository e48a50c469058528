"""Envelope repair: fill layout-level fields the generator left out."""

from dataclasses import dataclass
from typing import Any, Callable

from ..core.id import new_layout_id
from .components import repair_components


@dataclass(frozen=True)
class EnvelopeDefaults:
    """Values used when a generated layout omits its envelope."""

    canvas_width: int = 1440
    canvas_height: int = 900
    background: str = "#ffffff"
    layout_id: Callable[[], str] = new_layout_id


def _default_layer(components: list[Any]) -> dict[str, Any]:
    component_ids = [
        comp["id"]
        for comp in components
        if isinstance(comp, dict) and isinstance(comp.get("id"), str) and comp["id"]
    ]
    return {
        "id": "main",
        "name": "Main",
        "visible": True,
        "locked": False,
        "componentIds": component_ids,
    }


def repair_layout(parsed: Any, defaults: EnvelopeDefaults | None = None) -> None:
    """
    Fill missing envelope fields, then repair every component, in place.

    Missing or empty ``id``, ``canvasWidth``, ``canvasHeight`` and ``background``
    get defaults; a missing ``layers`` list becomes a single visible ``main``
    layer referencing every component.
    """
    if not isinstance(parsed, dict):
        return
    defaults = defaults or EnvelopeDefaults()

    if not parsed.get("id"):
        parsed["id"] = defaults.layout_id()
    if not parsed.get("canvasWidth"):
        parsed["canvasWidth"] = defaults.canvas_width
    if not parsed.get("canvasHeight"):
        parsed["canvasHeight"] = defaults.canvas_height
    if not parsed.get("background"):
        parsed["background"] = {"type": "solid", "value": defaults.background}

    components = parsed.get("components")
    if "layers" not in parsed and isinstance(components, list):
        parsed["layers"] = [_default_layer(components)]

    repair_components(parsed)
