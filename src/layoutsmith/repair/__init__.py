"""Best-effort repair of generator output before strict validation."""

from .components import (
    coerce_type,
    parse_int,
    repair,
    repair_component,
    repair_components,
    repair_operation,
    repair_style,
)
from .envelope import EnvelopeDefaults, repair_layout
from .children import normalize_children, normalize_component

__all__ = [
    "coerce_type",
    "parse_int",
    "repair",
    "repair_component",
    "repair_components",
    "repair_operation",
    "repair_style",
    "EnvelopeDefaults",
    "repair_layout",
    "normalize_children",
    "normalize_component",
]
