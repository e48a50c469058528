"""Diff editor: apply edit operations to a Layout without mutating it."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from ..models import (
    AddOperation,
    Component,
    EditOperation,
    Layer,
    Layout,
    ModifyOperation,
    RemoveOperation,
    ReorderOperation,
    validate_operations,
)


def _replace(
    components: list[Component],
    component_id: str,
    updated_by: Callable[[Component], Component],
) -> list[Component]:
    """Apply ``updated_by`` to the first component with ``component_id``."""
    result = list(components)
    for index, component in enumerate(result):
        if component.id == component_id:
            result[index] = updated_by(component)
            break
    return result


def _modify(layout: Layout, op: ModifyOperation) -> Layout:
    changes = op.changes
    updates: dict[str, Any] = {}
    for name in changes.model_fields_set:
        value = getattr(changes, name)
        if value is None or name == "style":
            continue
        updates[name] = value

    def apply(component: Component) -> Component:
        component_updates = dict(updates)
        if changes.style is not None:
            component_updates["style"] = component.style.merged(changes.style)
        return component.model_copy(update=component_updates)

    return layout.model_copy(update={"components": _replace(layout.components, op.component_id, apply)})


def _add(layout: Layout, op: AddOperation) -> Layout:
    layers = list(layout.layers)
    if layers:
        first = layers[0]
        layers[0] = first.model_copy(
            update={"component_ids": [*first.component_ids, op.component.id]}
        )
    return layout.model_copy(
        update={"components": [*layout.components, op.component], "layers": layers}
    )


def _remove(layout: Layout, op: RemoveOperation) -> Layout:
    components = [c for c in layout.components if c.id != op.component_id]
    layers: list[Layer] = [
        layer.model_copy(
            update={"component_ids": [i for i in layer.component_ids if i != op.component_id]}
        )
        for layer in layout.layers
    ]
    return layout.model_copy(update={"components": components, "layers": layers})


def _reorder(layout: Layout, op: ReorderOperation) -> Layout:
    return layout.model_copy(
        update={
            "components": _replace(
                layout.components,
                op.component_id,
                lambda component: component.model_copy(update={"z_index": op.new_z_index}),
            )
        }
    )


_HANDLERS = {
    "modify": _modify,
    "add": _add,
    "remove": _remove,
    "reorder": _reorder,
}


def apply_edits(
    layout: Layout,
    operations: Sequence[EditOperation] | Iterable[dict[str, Any]],
) -> Layout:
    """
    Apply operations in order and return the resulting Layout.

    Operations naming an id that is not a top-level component are no-ops; the
    rest of the batch still applies. The result is not clamped, snapped or
    de-collided: run ``process_layout`` on it.

    Args:
        layout: Current layout (never modified)
        operations: Operation models, or raw dicts which are validated first

    Raises:
        SchemaViolation: If raw operations do not match any operation shape
    """
    ops = list(operations)
    if any(isinstance(op, dict) for op in ops):
        ops = validate_operations(ops)

    result = layout
    for op in ops:
        result = _HANDLERS[op.action](result, op)
    return result
