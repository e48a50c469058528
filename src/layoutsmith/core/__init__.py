"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import LayoutError, PayloadError, SchemaViolation
from .validate import validate_json_size, validate_json_depth
from .logging_config import configure_logging, get_logger, LogContext
from .json import extract_json, safe_json_dumps, strip_code_fences, JSONParseError
from .id import new_layout_id, new_render_namespace


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "LayoutError",
    "PayloadError",
    "SchemaViolation",
    "JSONParseError",
    # Validation
    "validate_json_size",
    "validate_json_depth",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "strip_code_fences",
    # IDs
    "new_layout_id",
    "new_render_namespace",
]
