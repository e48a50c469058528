"""Strict schema validation of repaired trees."""

from typing import Any

from pydantic import TypeAdapter, ValidationError
from returns.result import Result, Success, Failure

from ..core.errors import SchemaViolation
from .edits import EditOperation, EditResponse
from .layout import Layout


_operations_adapter: TypeAdapter[list[EditOperation]] = TypeAdapter(list[EditOperation])


def validate_layout(raw: Any) -> Layout:
    """
    Validate a repaired tree into a Layout.

    Args:
        raw: Parsed (and repaired) JSON tree, or an existing Layout

    Returns:
        Fully typed Layout

    Raises:
        SchemaViolation: With the path of the first offending field
    """
    try:
        return Layout.model_validate(raw)
    except ValidationError as e:
        raise SchemaViolation.from_pydantic(e) from e


def try_validate_layout(raw: Any) -> Result[Layout, SchemaViolation]:
    """Validate a layout (Result pattern version)."""
    try:
        return Success(validate_layout(raw))
    except SchemaViolation as e:
        return Failure(e)


def validate_operations(raw: Any) -> list[EditOperation]:
    """Validate a list of edit operations."""
    try:
        return _operations_adapter.validate_python(raw)
    except ValidationError as e:
        raise SchemaViolation.from_pydantic(e) from e


def validate_edit_response(raw: Any) -> EditResponse:
    """Validate an edit generator response (diff or regenerate)."""
    try:
        return EditResponse.model_validate(raw)
    except ValidationError as e:
        raise SchemaViolation.from_pydantic(e) from e
