"""Repair pass tests."""

import copy

import pytest
from hypothesis import given, strategies as st

from layoutsmith.models import COMPONENT_TYPES, validate_layout
from layoutsmith.repair import (
    EnvelopeDefaults,
    coerce_type,
    normalize_children,
    parse_int,
    repair,
    repair_component,
    repair_layout,
    repair_operation,
)

from conftest import make_component, make_layout


@pytest.mark.unit
class TestCoerceType:
    """Type name coercion."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("photo", "image-placeholder"),
            ("hero-image", "image-placeholder"),
            ("navbar", "container"),
            ("footer", "container"),
            ("headline-text", "text"),
            ("Heading", "text"),
            ("separator", "divider"),
            ("carousel", "shape"),
        ],
    )
    def test_mapping(self, name, expected):
        """Test keyword rules, first match wins."""
        assert coerce_type(name) == expected

    def test_valid_kind_unchanged(self):
        """Test known kinds map to themselves."""
        for kind in COMPONENT_TYPES:
            assert coerce_type(kind) == kind

    def test_non_string(self):
        """Test non-string names fall back to shape."""
        assert coerce_type(42) == "shape"

    @given(st.text(max_size=30))
    def test_always_valid(self, name):
        """Property: any name coerces to a known kind."""
        assert coerce_type(name) in COMPONENT_TYPES


@pytest.mark.unit
def test_parse_int():
    """Test leading-integer parsing."""
    assert parse_int("700") == 700
    assert parse_int("600px") == 600
    assert parse_int("bold") is None


@pytest.mark.unit
class TestRepairComponent:
    """Per-component fixes."""

    def test_negative_z_index_clamped(self):
        """Test negative zIndex becomes zero."""
        comp = make_component("a", z=-3)
        repair_component(comp)
        assert comp["zIndex"] == 0

    def test_missing_style_backfilled(self):
        """Test a missing style becomes an empty mapping."""
        comp = make_component("a")
        del comp["style"]
        repair_component(comp)
        assert comp["style"] == {}

    def test_font_weight_string(self):
        """Test string font weights are parsed or dropped."""
        comp = make_component("a", style={"fontWeight": "700"})
        repair_component(comp)
        assert comp["style"]["fontWeight"] == 700

        comp = make_component("b", style={"fontWeight": "bold"})
        repair_component(comp)
        assert "fontWeight" not in comp["style"]

    def test_shadow_string_dropped(self):
        """Test a CSS shadow string is removed."""
        comp = make_component("a", style={"shadow": "0 2px 4px black"})
        repair_component(comp)
        assert "shadow" not in comp["style"]

    def test_shadows_filtered(self):
        """Test only well-formed shadow entries survive."""
        comp = make_component(
            "a",
            style={
                "shadows": [
                    {"x": 0, "y": 2, "blur": 4, "color": "#000"},
                    "bad",
                    {"x": 0, "y": 2, "color": "#000"},
                ]
            },
        )
        repair_component(comp)
        assert comp["style"]["shadows"] == [{"x": 0, "y": 2, "blur": 4, "color": "#000"}]

    def test_shadows_all_invalid_removed(self):
        """Test an empty filtered shadow list is removed entirely."""
        comp = make_component("a", style={"shadows": ["bad", {"x": "1"}]})
        repair_component(comp)
        assert "shadows" not in comp["style"]

    def test_shadows_non_list_removed(self):
        """Test a non-list shadows value is removed."""
        comp = make_component("a", style={"shadows": "0 1px 2px red"})
        repair_component(comp)
        assert "shadows" not in comp["style"]

    def test_invalid_text_transform_dropped(self):
        """Test an unknown textTransform is removed."""
        comp = make_component("a", style={"textTransform": "shout"})
        repair_component(comp)
        assert "textTransform" not in comp["style"]

    def test_children_filtered_and_repaired(self):
        """Test children without a type are dropped and the rest repaired."""
        comp = make_component(
            "card",
            "card",
            children=[
                {"id": "x"},
                "junk",
                make_component("img", "photo", z=-1),
            ],
        )
        repair_component(comp)
        assert [child["id"] for child in comp["children"]] == ["img"]
        assert comp["children"][0]["type"] == "image-placeholder"
        assert comp["children"][0]["zIndex"] == 0

    def test_empty_children_removed(self):
        """Test a children list with nothing valid is removed."""
        comp = make_component("card", "card", children=[{"id": "x"}])
        repair_component(comp)
        assert "children" not in comp


@pytest.mark.unit
class TestRepairOperation:
    """Edit operation repair."""

    def test_modify_style_fixed(self):
        """Test modify changes get the style fixes."""
        op = {
            "action": "modify",
            "componentId": "a",
            "changes": {"zIndex": -2, "style": {"fontWeight": "bold", "shadows": "big", "fill": "#fff"}},
        }
        repair_operation(op)
        assert op["changes"] == {"zIndex": 0, "style": {"fill": "#fff"}}

    def test_add_component_repaired(self):
        """Test added components get the full component pass."""
        op = {"action": "add", "component": {"id": "n", "type": "navbar", "zIndex": -1}}
        repair_operation(op)
        assert op["component"] == {"id": "n", "type": "container", "zIndex": 0, "style": {}}

    def test_reorder_clamped(self):
        """Test negative reorder targets clamp to zero."""
        op = {"action": "reorder", "componentId": "a", "newZIndex": -5}
        repair_operation(op)
        assert op["newZIndex"] == 0

    @pytest.mark.parametrize("op", [None, "remove a", {"action": "modify", "changes": "x"}])
    def test_malformed_left_alone(self, op):
        """Test malformed operations are left for validation."""
        repair_operation(op)


@pytest.mark.unit
class TestRepairComponents:
    """Whole-tree repair."""

    def test_non_dict_input_ignored(self):
        """Test non-object input is left alone."""
        data = ["not", "a", "layout"]
        repair(data)
        assert data == ["not", "a", "layout"]

    def test_repaired_tree_validates(self):
        """Test a typical malformed tree validates after repair."""
        layout = make_layout(
            [
                make_component("nav", "navbar", z=-1, style={"fontWeight": "600"}),
                make_component("hero", "photo", x=10, y=200),
            ]
        )
        del layout["components"][1]["style"]
        repair(layout)
        result = validate_layout(layout)
        assert [c.type for c in result.components] == ["container", "image-placeholder"]

    @given(
        st.lists(
            st.fixed_dictionaries(
                {
                    "type": st.one_of(st.text(max_size=12), st.integers(), st.none()),
                    "zIndex": st.one_of(st.integers(-10, 10), st.text(max_size=3)),
                    "style": st.one_of(
                        st.none(),
                        st.fixed_dictionaries(
                            {"fontWeight": st.one_of(st.text(max_size=5), st.integers(100, 900))}
                        ),
                    ),
                }
            ),
            max_size=5,
        )
    )
    def test_never_raises(self, components):
        """Property: repair is total over arbitrary component-ish input."""
        repair({"components": components})


@pytest.mark.unit
class TestRepairLayout:
    """Envelope repair."""

    def test_fills_missing_envelope(self):
        """Test id, canvas, background and layers are filled."""
        parsed = {"components": [make_component("a"), make_component("b")]}
        repair_layout(parsed, EnvelopeDefaults(canvas_width=375, canvas_height=812, background="#000000"))

        assert parsed["id"].startswith("layout_")
        assert parsed["canvasWidth"] == 375
        assert parsed["canvasHeight"] == 812
        assert parsed["background"] == {"type": "solid", "value": "#000000"}
        assert parsed["layers"][0]["componentIds"] == ["a", "b"]
        validate_layout(parsed)

    def test_keeps_existing_fields(self, sample_layout_dict):
        """Test present envelope fields are not overwritten."""
        original = copy.deepcopy(sample_layout_dict)
        repair_layout(sample_layout_dict)
        assert sample_layout_dict["id"] == original["id"]
        assert sample_layout_dict["layers"] == original["layers"]

    def test_existing_empty_layers_kept(self):
        """Test an explicit empty layers list is respected."""
        parsed = {"components": [make_component("a")], "layers": []}
        repair_layout(parsed)
        assert parsed["layers"] == []


@pytest.mark.unit
class TestNormalizeChildren:
    """Child coordinate normalization."""

    def test_absolute_children_translated(self):
        """Test canvas-absolute children become parent-relative."""
        layout = validate_layout(
            make_layout(
                [
                    make_component(
                        "card",
                        "card",
                        x=200,
                        y=100,
                        width=300,
                        height=200,
                        children=[make_component("t", "text", x=220, y=140, width=100, height=20)],
                    )
                ]
            )
        )
        child = normalize_children(layout).components[0].children[0]
        assert (child.position.x, child.position.y) == (20, 40)

    def test_relative_children_kept(self):
        """Test already-relative children are unchanged."""
        layout = validate_layout(
            make_layout(
                [
                    make_component(
                        "card",
                        "card",
                        x=200,
                        y=100,
                        width=300,
                        height=200,
                        children=[make_component("t", "text", x=20, y=40, width=100, height=20)],
                    )
                ]
            )
        )
        child = normalize_children(layout).components[0].children[0]
        assert (child.position.x, child.position.y) == (20, 40)

    def test_grandchildren_use_original_parent_frame(self):
        """Test nested levels are detected against the unmoved parent."""
        layout = validate_layout(
            make_layout(
                [
                    make_component(
                        "outer",
                        "container",
                        x=100,
                        y=100,
                        width=400,
                        height=400,
                        children=[
                            make_component(
                                "inner",
                                "card",
                                x=150,
                                y=150,
                                width=200,
                                height=200,
                                children=[make_component("leaf", "text", x=160, y=170, width=50, height=20)],
                            )
                        ],
                    )
                ]
            )
        )
        inner = normalize_children(layout).components[0].children[0]
        leaf = inner.children[0]
        assert (inner.position.x, inner.position.y) == (50, 50)
        assert (leaf.position.x, leaf.position.y) == (10, 20)
