"""Recover a JSON object from model output.

Generators wrap layouts in markdown fences, add a sentence of prose before or
after, leave trailing commas, or stop mid-object. The outermost ``{...}`` is
located first; msgspec decodes it strictly and json_repair handles whatever
strict decoding rejects.
"""

from typing import Any
import json
import re

import msgspec
import orjson
from json_repair import repair_json

from .errors import LayoutError

_FENCE = re.compile(r"```(?:json)?[ \t]*(.*?)(?:```|\Z)", re.DOTALL | re.IGNORECASE)
_strict = msgspec.json.Decoder()


class JSONParseError(LayoutError):
    """No JSON object could be recovered from the text."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def strip_code_fences(text: str) -> str:
    """Return the body of the first markdown code fence, or the trimmed text.

    An unterminated fence yields everything after its opener.
    """
    match = _FENCE.search(text)
    body = match.group(1) if match else text
    return body.strip()


def extract_json_boundaries(text: str) -> tuple[str, int, int] | None:
    """
    Locate the outermost object in defenced text.

    Returns:
        ``(defenced_text, start, end)`` where ``defenced_text[start:end]`` is
        the candidate object, or None when there is no opening brace. Output
        cut off before its closing brace runs to the end of the text.
    """
    body = strip_code_fences(text)
    opening = body.find("{")
    if opening == -1:
        return None

    closing = body.rfind("}")
    stop = closing + 1 if closing > opening else len(body)
    return (body, opening, stop)


def _as_object(value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise JSONParseError(f"Expected JSON object, got {type(value).__name__}")
    return value


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Parse the JSON object embedded in generator text.

    Args:
        text: Raw model output
        repair: Fall back to json_repair when strict decoding fails

    Raises:
        JSONParseError: Nothing object-shaped was found, or it stayed
            unparseable after repair
    """
    located = extract_json_boundaries(text)
    if located is None:
        raise JSONParseError(f"No JSON object found in text: {text[:200]!r}")

    body, start, end = located
    candidate = body[start:end]

    try:
        return _as_object(_strict.decode(candidate.encode("utf-8")))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

    try:
        repaired = json.loads(repair_json(candidate))
    except (ValueError, RecursionError) as e:
        raise JSONParseError(f"JSON repair failed: {e}", e) from e
    return _as_object(repaired)


def safe_json_dumps(obj: Any, indent: int = 0) -> str:
    """Serialize with orjson; any non-zero ``indent`` means two-space pretty output."""
    try:
        encoded = orjson.dumps(obj, option=orjson.OPT_INDENT_2 if indent else None)
    except TypeError:
        # orjson rejects integers outside the 64-bit range
        return json.dumps(obj, indent=indent or None)
    return encoded.decode("utf-8")
