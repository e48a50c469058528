"""Layout Pipeline - generator text to processed Layout."""

from typing import Any

from .core import (
    JSONParseError,
    Settings,
    extract_json,
    get_logger,
    get_settings,
    safe_json_dumps,
    validate_json_depth,
    validate_json_size,
)
from .edits import apply_edits
from .engine import process_layout
from .models import AddOperation, EditResponse, Layout, validate_edit_response, validate_layout
from .render import RenderContext
from .repair import EnvelopeDefaults, normalize_children, normalize_component, repair_layout, repair_operation

logger = get_logger(__name__)


class LayoutParser:
    """
    Turns raw generator output into processed layouts.

    Each stage is pure; the parser only wires them together with the configured
    limits and defaults, and logs the outcome.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def defaults(self) -> EnvelopeDefaults:
        return EnvelopeDefaults(
            canvas_width=self.settings.default_canvas_width,
            canvas_height=self.settings.default_canvas_height,
            background=self.settings.default_background,
        )

    def render_context(self) -> RenderContext:
        """Fresh render context carrying the configured render options."""
        return RenderContext(
            child_positions=self.settings.child_positions,
            font_family=self.settings.font_family,
        )

    def load(self, text: str, name: str = "layout") -> dict[str, Any]:
        """
        Extract the JSON object from generator text, enforcing payload limits.

        Raises:
            PayloadError: If the text or the parsed tree exceeds the limits
            JSONParseError: If no JSON object can be recovered
        """
        validate_json_size(text, self.settings.max_payload_size, name)
        try:
            parsed = extract_json(text, repair=True)
        except JSONParseError as e:
            logger.error("json_parse_failed", source=name, error=str(e))
            raise
        validate_json_depth(parsed, self.settings.max_json_depth)
        return parsed

    def parse(self, text: str) -> Layout:
        """
        Parse generator text into a processed Layout.

        extract -> repair -> validate -> normalize children -> process

        Raises:
            PayloadError: Size or depth limit exceeded
            JSONParseError: Unparseable input
            SchemaViolation: Still invalid after repair
        """
        parsed = self.load(text)
        return self.build(parsed)

    def build(self, parsed: dict[str, Any], defaults: EnvelopeDefaults | None = None) -> Layout:
        """Repair, validate, normalize and process an already parsed tree."""
        repair_layout(parsed, defaults or self.defaults())
        layout = validate_layout(parsed)
        layout = process_layout(normalize_children(layout))
        logger.info(
            "layout_parsed",
            layout_id=layout.id,
            components=len(layout.components),
            canvas=f"{layout.canvas_width:g}x{layout.canvas_height:g}",
        )
        return layout

    def parse_edit_response(self, text: str, current: Layout) -> EditResponse:
        """
        Parse an edit generator response.

        A regenerated layout has its envelope filled from ``current``; diff
        operations get the same repair pass as generated components.
        """
        parsed = self.load(text, name="edit response")
        return self.build_edit_response(parsed, current)

    def build_edit_response(self, parsed: Any, current: Layout) -> EditResponse:
        if isinstance(parsed, list):
            parsed = {"mode": "diff", "operations": parsed}
        if isinstance(parsed, dict):
            # A bare {"operations": [...]} is a diff
            if "mode" not in parsed and "operations" in parsed:
                parsed["mode"] = "diff"
            layout = parsed.get("layout")
            if parsed.get("mode") == "regenerate" and isinstance(layout, dict):
                repair_layout(layout, self._defaults_from(current))
            operations = parsed.get("operations")
            if isinstance(operations, list):
                for op in operations:
                    repair_operation(op)
        response = validate_edit_response(parsed)
        logger.info(
            "edit_response_parsed",
            mode=response.mode,
            operations=len(response.operations or []),
        )
        return response

    def apply_edit_response(self, current: Layout, response: EditResponse) -> Layout:
        """Apply a diff or take the regenerated layout; the result is processed."""
        if response.mode == "regenerate" and response.layout is not None:
            result = process_layout(normalize_children(response.layout))
        else:
            operations = [
                op.model_copy(update={"component": normalize_component(op.component)})
                if isinstance(op, AddOperation)
                else op
                for op in response.operations or []
            ]
            result = process_layout(apply_edits(current, operations))
        logger.info(
            "edit_applied",
            mode=response.mode,
            layout_id=result.id,
            components=len(result.components),
        )
        return result

    def _defaults_from(self, current: Layout) -> EnvelopeDefaults:
        background = current.background.value if current.background.type == "solid" else None
        return EnvelopeDefaults(
            canvas_width=current.canvas_width,
            canvas_height=current.canvas_height,
            background=background or self.settings.default_background,
        )


def parse_layout(text: str, settings: Settings | None = None) -> Layout:
    """Parse generator text into a processed Layout."""
    return LayoutParser(settings).parse(text)


def apply_edit_response(current: Layout, response: EditResponse) -> Layout:
    """Apply a validated edit response to ``current``."""
    return LayoutParser().apply_edit_response(current, response)


def dumps_layout(layout: Layout, indent: int = 2) -> str:
    """Wire JSON for a layout: camelCase keys, unset optionals omitted."""
    return safe_json_dumps(layout.to_dict(), indent=indent)
