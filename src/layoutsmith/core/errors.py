"""Error taxonomy for the layout pipeline."""

from typing import Any


class LayoutError(Exception):
    """Base class for hard failures surfaced to callers."""


class PayloadError(LayoutError):
    """Raw input exceeds size or nesting limits."""


class SchemaViolation(LayoutError):
    """Repaired tree still violates the layout schema.

    Attributes:
        path: Dotted path to the first offending field (``components.3.size.width``)
        expected: Human-readable description of what was expected there
        errors: Every underlying error as ``(path, message)`` pairs
    """

    def __init__(
        self,
        path: str,
        expected: str,
        errors: list[tuple[str, str]] | None = None,
    ) -> None:
        self.path = path
        self.expected = expected
        self.errors = errors or [(path, expected)]
        location = path or "<root>"
        extra = len(self.errors) - 1
        suffix = f" (+{extra} more)" if extra > 0 else ""
        super().__init__(f"{location}: {expected}{suffix}")

    @classmethod
    def from_pydantic(cls, error: Any) -> "SchemaViolation":
        """Build from a ``pydantic.ValidationError``."""
        details = [
            (_format_loc(item.get("loc", ())), item.get("msg", "invalid value"))
            for item in error.errors()
        ]
        if not details:
            return cls("", str(error))
        path, expected = details[0]
        return cls(path, expected, details)


def _format_loc(loc: tuple[Any, ...]) -> str:
    # Tagged-union branches show up as loc entries (e.g. "modify"); keep them,
    # they tell the reader which variant failed.
    return ".".join(str(part) for part in loc)
