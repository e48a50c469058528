"""JSON extraction and payload guard tests."""

import pytest
from hypothesis import given, strategies as st

from layoutsmith.core import (
    JSONParseError,
    LayoutError,
    PayloadError,
    extract_json,
    safe_json_dumps,
    strip_code_fences,
    validate_json_depth,
    validate_json_size,
)


@pytest.mark.unit
class TestStripCodeFences:
    """Markdown fence removal."""

    def test_json_fence(self):
        """Test ```json fence is removed."""
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        """Test bare ``` fence is removed."""
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_unterminated_fence(self):
        """Test unterminated fence keeps the rest."""
        assert strip_code_fences('```json\n{"a": 1}') == '{"a": 1}'

    def test_no_fence(self):
        """Test text without fences is only trimmed."""
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


@pytest.mark.unit
class TestExtractJson:
    """Lenient extraction of the outermost object."""

    def test_clean_object(self):
        """Test strict JSON decodes directly."""
        assert extract_json('{"a": 1, "b": [1, 2]}') == {"a": 1, "b": [1, 2]}

    def test_surrounding_prose(self):
        """Test prose before and after the object is ignored."""
        text = 'Sure! Here it is: {"a": {"b": 2}} Let me know if you need more.'
        assert extract_json(text) == {"a": {"b": 2}}

    def test_trailing_commas_repaired(self):
        """Test trailing commas are repaired."""
        assert extract_json('{"a": [1, 2,], "b": 3,}') == {"a": [1, 2], "b": 3}

    def test_fenced_and_lenient(self):
        """Test fenced block with trailing comma."""
        assert extract_json('```json\n{"id": "x",}\n```') == {"id": "x"}

    def test_no_object(self):
        """Test text without braces raises."""
        with pytest.raises(JSONParseError):
            extract_json("no json here")

    def test_repair_disabled(self):
        """Test malformed JSON raises when repair is off."""
        with pytest.raises(JSONParseError) as exc_info:
            extract_json('{"a": 1,}', repair=False)
        assert exc_info.value.original is not None

    def test_parse_error_is_layout_error(self):
        """Test JSONParseError shares the common base."""
        assert issubclass(JSONParseError, LayoutError)

    @given(
        st.dictionaries(
            st.text(alphabet="abcxyz_ {}[]\"", max_size=10),
            st.integers(min_value=-1000, max_value=1000),
            max_size=5,
        )
    )
    def test_round_trips_dumped_objects(self, obj):
        """Property: any dumped object extracts back unchanged."""
        assert extract_json(safe_json_dumps(obj)) == obj


@pytest.mark.unit
class TestPayloadGuards:
    """Size and depth limits."""

    def test_size_within_limit(self):
        """Test small payload passes."""
        validate_json_size('{"test": "data"}', 1000)

    def test_size_exceeded(self):
        """Test large payload raises PayloadError."""
        with pytest.raises(PayloadError):
            validate_json_size("x" * 2000, 1000)

    def test_size_counts_utf8_bytes(self):
        """Test multibyte characters count by encoded size."""
        with pytest.raises(PayloadError):
            validate_json_size("é" * 600, 1000)

    def test_depth_within_limit(self):
        """Test shallow tree passes."""
        validate_json_depth({"a": {"b": {"c": 1}}}, max_depth=5)

    def test_depth_exceeded(self):
        """Test deeply nested tree raises PayloadError."""
        deep = {"level": 1}
        current = deep
        for i in range(25):
            current["nested"] = {"level": i + 2}
            current = current["nested"]

        with pytest.raises(PayloadError):
            validate_json_depth(deep, max_depth=20)


@pytest.mark.unit
def test_safe_json_dumps_indent():
    """Test indented output."""
    assert safe_json_dumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'
