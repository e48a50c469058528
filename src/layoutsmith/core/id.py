"""ID Generation.

ULID-based identifiers for layouts and render namespaces.

- Layout ids are prefixed (``layout_*``) so they read well in logs.
- Render namespaces are short lowercase ULID fragments used to keep SVG
  ``<defs>`` ids (gradients, filters, clip paths) unique per render call.
"""

from typing import NewType
from ulid import ULID

LayoutID = NewType("LayoutID", str)
"""Generated layout identifier"""


class Prefix:
    """ID prefix constants."""

    LAYOUT = "layout"


# Random part of a ULID is the trailing 16 characters
NAMESPACE_LENGTH = 8


def generate_raw() -> str:
    """Generate ULID without prefix."""
    return str(ULID())


def generate_prefixed(prefix: str) -> str:
    """Generate custom prefixed ID."""
    return f"{prefix}_{generate_raw()}"


def new_layout_id() -> LayoutID:
    """Generate new layout ID."""
    return LayoutID(generate_prefixed(Prefix.LAYOUT))


def new_render_namespace() -> str:
    """Generate a short namespace for one render call.

    Uses the random tail of a ULID, lowercased so it is a valid XML name part.
    """
    return generate_raw()[-NAMESPACE_LENGTH:].lower()
