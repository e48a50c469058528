"""Edit operation models (diff-based editing)."""

from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from .layout import Component, LayoutModel, Layout, Position, Size, Style


class ComponentChanges(LayoutModel):
    """Partial component update. Only fields present are applied."""

    position: Position | None = None
    size: Size | None = None
    rotation: float | None = None
    z_index: int | None = Field(default=None, ge=0)
    style: Style | None = None
    content: str | None = None


class ModifyOperation(LayoutModel):
    action: Literal["modify"] = "modify"
    component_id: str
    changes: ComponentChanges


class AddOperation(LayoutModel):
    action: Literal["add"] = "add"
    component: Component


class RemoveOperation(LayoutModel):
    action: Literal["remove"] = "remove"
    component_id: str


class ReorderOperation(LayoutModel):
    action: Literal["reorder"] = "reorder"
    component_id: str
    new_z_index: int = Field(ge=0)


EditOperation = Annotated[
    Union[ModifyOperation, AddOperation, RemoveOperation, ReorderOperation],
    Field(discriminator="action"),
]


class EditResponse(LayoutModel):
    """Edit generator output: either a diff or a complete replacement layout."""

    mode: Literal["diff", "regenerate"]
    reasoning: str | None = None
    operations: list[EditOperation] | None = None
    layout: Layout | None = None

    @model_validator(mode="after")
    def check_payload(self) -> "EditResponse":
        """Diff mode needs operations, regenerate mode needs a layout."""
        if self.mode == "diff" and self.operations is None:
            raise ValueError("diff mode requires 'operations'")
        if self.mode == "regenerate" and self.layout is None:
            raise ValueError("regenerate mode requires 'layout'")
        return self
