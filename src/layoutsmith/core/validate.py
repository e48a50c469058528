"""Payload guards applied before a generator response is parsed."""

from typing import Any

from .errors import PayloadError


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Reject raw text larger than ``max_size`` UTF-8 bytes.

    Raises:
        PayloadError: With ``name`` in the message
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise PayloadError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 40) -> None:
    """
    Reject parsed JSON nested deeper than ``max_depth`` containers.

    Repair and layout passes recurse into children, so the check runs on the
    decoded tree before any of them. It walks with an explicit stack and
    cannot itself hit the recursion limit.

    Raises:
        PayloadError: At the first node found past the limit
    """
    pending: list[tuple[Any, int]] = [(obj, 0)]
    while pending:
        node, depth = pending.pop()
        if depth > max_depth:
            raise PayloadError(f"JSON nesting depth {depth} exceeds maximum {max_depth}")
        if isinstance(node, dict):
            pending.extend((value, depth + 1) for value in node.values())
        elif isinstance(node, list):
            pending.extend((item, depth + 1) for item in node)
