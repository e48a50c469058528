"""Diff editor tests."""

import pytest

from layoutsmith.core import SchemaViolation
from layoutsmith.edits import apply_edits
from layoutsmith.models import (
    AddOperation,
    ComponentChanges,
    ModifyOperation,
    RemoveOperation,
    ReorderOperation,
    Style,
    validate_layout,
)

from conftest import make_component, make_layout


@pytest.mark.unit
class TestModify:
    """Modify operations."""

    def test_changes_content_and_position(self, sample_layout):
        """Test listed fields are replaced."""
        result = apply_edits(
            sample_layout,
            [
                {
                    "action": "modify",
                    "componentId": "cta",
                    "changes": {"content": "Buy now", "position": {"x": 40, "y": 60}},
                }
            ],
        )
        cta = result.find("cta")
        assert cta.content == "Buy now"
        assert (cta.position.x, cta.position.y) == (40, 60)
        assert cta.size == sample_layout.find("cta").size

    def test_style_merged_shallowly(self):
        """Test a style patch keeps keys it does not mention."""
        layout = validate_layout(
            make_layout(
                [
                    make_component(
                        "hero",
                        style={
                            "fill": "#111111",
                            "gradient": {
                                "angle": 0,
                                "stops": [
                                    {"color": "#000", "position": 0},
                                    {"color": "#fff", "position": 100},
                                ],
                            },
                        },
                    )
                ]
            )
        )
        op = ModifyOperation(component_id="hero", changes=ComponentChanges(style=Style(fill="#ff0000")))
        hero = apply_edits(layout, [op]).find("hero")
        assert hero.style.fill == "#ff0000"
        assert hero.style.gradient == layout.find("hero").style.gradient

    def test_stale_id_is_noop(self, sample_layout):
        """Test an unknown id leaves the layout unchanged."""
        result = apply_edits(
            sample_layout,
            [{"action": "modify", "componentId": "ghost", "changes": {"content": "x"}}],
        )
        assert result == sample_layout

    def test_nested_children_not_addressable(self, sample_layout):
        """Test ids of nested children do not match."""
        result = apply_edits(
            sample_layout,
            [{"action": "modify", "componentId": "card-title", "changes": {"content": "x"}}],
        )
        assert result.find("card").children[0].content == "Pro plan"

    def test_input_not_mutated(self, sample_layout):
        """Test the original layout is left untouched."""
        before = sample_layout.model_dump()
        apply_edits(
            sample_layout,
            [{"action": "modify", "componentId": "cta", "changes": {"content": "Changed"}}],
        )
        assert sample_layout.model_dump() == before


@pytest.mark.unit
class TestAddRemove:
    """Add and remove operations."""

    def test_add_appends_and_registers(self, sample_layout):
        """Test added components land last and join the first layer."""
        component = make_component("promo", "badge", x=10, y=10, width=80, height=24, content="sale")
        result = apply_edits(sample_layout, [{"action": "add", "component": component}])
        assert result.components[-1].id == "promo"
        assert result.layers[0].component_ids[-1] == "promo"

    def test_add_without_layers(self):
        """Test adding to a layout with no layers creates none."""
        layout = validate_layout(make_layout([make_component("a")], layers=[]))
        op = AddOperation.model_validate({"component": make_component("b", x=200)})
        result = apply_edits(layout, [op])
        assert [c.id for c in result.components] == ["a", "b"]
        assert result.layers == []

    def test_remove_purges_layers(self, sample_layout):
        """Test removal drops the component and its layer references."""
        result = apply_edits(sample_layout, [RemoveOperation(component_id="cta")])
        assert result.find("cta") is None
        assert all("cta" not in layer.component_ids for layer in result.layers)

    def test_remove_unknown_is_noop(self, sample_layout):
        """Test removing an unknown id changes nothing."""
        result = apply_edits(sample_layout, [RemoveOperation(component_id="ghost")])
        assert [c.id for c in result.components] == [c.id for c in sample_layout.components]


@pytest.mark.unit
class TestReorder:
    """Reorder operations."""

    def test_sets_z_index(self, sample_layout):
        """Test only the target's z-index changes."""
        result = apply_edits(sample_layout, [ReorderOperation(component_id="bg", new_z_index=9)])
        assert result.find("bg").z_index == 9
        assert result.find("cta").z_index == sample_layout.find("cta").z_index

    def test_negative_rejected(self):
        """Test a negative target z-index is a violation."""
        with pytest.raises(SchemaViolation):
            apply_edits(
                validate_layout(make_layout([make_component("a")])),
                [{"action": "reorder", "componentId": "a", "newZIndex": -1}],
            )


@pytest.mark.unit
def test_operations_apply_in_order(sample_layout):
    """Test later operations see the effect of earlier ones."""
    result = apply_edits(
        sample_layout,
        [
            {"action": "add", "component": make_component("tmp", x=500, y=500)},
            {"action": "modify", "componentId": "tmp", "changes": {"content": "later"}},
            {"action": "remove", "componentId": "headline"},
        ],
    )
    assert result.find("tmp").content == "later"
    assert result.find("headline") is None


@pytest.mark.unit
def test_duplicate_ids_first_match_wins():
    """Test modify touches only the first component with the id."""
    layout = validate_layout(
        make_layout([make_component("dup", content="one"), make_component("dup", x=200, content="two")])
    )
    result = apply_edits(
        layout,
        [{"action": "modify", "componentId": "dup", "changes": {"content": "changed"}}],
    )
    assert [c.content for c in result.components] == ["changed", "two"]
