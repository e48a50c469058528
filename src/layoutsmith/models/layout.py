"""Layout data models.

Canonical shapes for generated layouts. Field names are snake_case in Python and
camelCase on the wire (``zIndex``, ``canvasWidth``, ``textTransform``). Models are
frozen: every transformation returns new instances.
"""

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


ComponentType = Literal[
    "text",
    "shape",
    "icon",
    "image-placeholder",
    "button",
    "card",
    "container",
    "avatar",
    "badge",
    "divider",
    "input-field",
]
TextAlign = Literal["left", "center", "right"]
TextTransform = Literal["uppercase", "lowercase", "capitalize", "none"]
BackgroundType = Literal["solid", "gradient", "image"]

COMPONENT_TYPES: tuple[str, ...] = get_args(ComponentType)
TEXT_TRANSFORMS: tuple[str, ...] = get_args(TextTransform)

# Kinds whose children are interpreted
CONTAINER_TYPES = frozenset({"card", "container"})

MAX_COMPONENTS = 50

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class LayoutModel(BaseModel):
    """Base model: camelCase aliases, immutable, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    def to_dict(self) -> dict[str, Any]:
        """Wire representation (camelCase, unset optionals omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Palette(LayoutModel):
    """Five named brand colors."""

    primary: str = Field(pattern=HEX_COLOR_PATTERN)
    secondary: str = Field(pattern=HEX_COLOR_PATTERN)
    accent: str = Field(pattern=HEX_COLOR_PATTERN)
    background: str = Field(pattern=HEX_COLOR_PATTERN)
    text: str = Field(pattern=HEX_COLOR_PATTERN)


class Position(LayoutModel):
    x: float
    y: float


class Size(LayoutModel):
    width: float = Field(ge=1)
    height: float = Field(ge=1)


class GradientStop(LayoutModel):
    color: str
    position: float = Field(ge=0, le=100)


class Gradient(LayoutModel):
    """Linear gradient. 0 degrees runs left-to-right, 90 top-to-bottom."""

    angle: float = 90
    stops: list[GradientStop] = Field(default_factory=list)

    @property
    def renderable(self) -> bool:
        return len(self.stops) >= 2


class Shadow(LayoutModel):
    x: float
    y: float
    blur: float = Field(ge=0)
    color: str


class Style(LayoutModel):
    """Optional visual properties. Meaning depends on the component type."""

    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    border_radius: float | None = Field(default=None, ge=0)
    opacity: float | None = Field(default=None, ge=0, le=1)
    font_family: str | None = None
    font_size: float | None = Field(default=None, ge=8, le=200)
    font_weight: float | None = Field(default=None, ge=100, le=900)
    text_align: TextAlign | None = None
    color: str | None = None
    letter_spacing: float | None = None
    line_height: float | None = None
    gradient: Gradient | None = None
    shadow: Shadow | None = None
    shadows: list[Shadow] | None = None
    text_transform: TextTransform | None = None

    def merged(self, patch: "Style") -> "Style":
        """Return a copy with every field explicitly set on ``patch`` applied."""
        updates = {name: getattr(patch, name) for name in patch.model_fields_set}
        return self.model_copy(update=updates)


class Component(LayoutModel):
    """One visual element. Children are only meaningful for cards and containers."""

    id: str
    type: ComponentType
    position: Position
    size: Size
    rotation: float = 0
    z_index: int = Field(default=0, ge=0)
    style: Style
    children: list["Component"] | None = None
    content: str | None = None

    @property
    def right(self) -> float:
        return self.position.x + self.size.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.size.height

    @property
    def area(self) -> float:
        return self.size.width * self.size.height

    @property
    def renders_children(self) -> bool:
        return self.type in CONTAINER_TYPES and bool(self.children)

    def moved_to(self, x: float, y: float) -> "Component":
        return self.model_copy(update={"position": Position(x=x, y=y)})


class Background(LayoutModel):
    """Canvas base layer."""

    type: BackgroundType
    value: str
    gradient: Gradient | None = None


class Layer(LayoutModel):
    """Non-owning visibility index over top-level component ids."""

    id: str
    name: str
    visible: bool = True
    locked: bool = False
    component_ids: list[str] = Field(default_factory=list)


class Layout(LayoutModel):
    """Aggregate root: canvas, background, top-level components and layers."""

    id: str
    canvas_width: float = Field(gt=0)
    canvas_height: float = Field(gt=0)
    background: Background
    components: list[Component] = Field(max_length=MAX_COMPONENTS)
    layers: list[Layer] = Field(default_factory=list)

    def find(self, component_id: str) -> Component | None:
        """First top-level component with the given id."""
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def hidden_component_ids(self) -> set[str]:
        """Ids referenced by any hidden layer."""
        hidden: set[str] = set()
        for layer in self.layers:
            if not layer.visible:
                hidden.update(layer.component_ids)
        return hidden


Component.model_rebuild()
