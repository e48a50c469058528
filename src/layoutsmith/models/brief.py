"""Design brief (user input) and canvas presets."""

from enum import Enum
from typing import Literal

from pydantic import Field

from .layout import LayoutModel, Palette


class DesignStyle(str, Enum):
    """Visual direction requested by the user."""

    MINIMAL = "minimal"
    CORPORATE = "corporate"
    PLAYFUL = "playful"
    LUXURY = "luxury"
    TECH = "tech"


class CanvasSize(LayoutModel):
    width: int = Field(ge=1)
    height: int = Field(ge=1)


# Conventional canvas sizes; ordinary canvasWidth/canvasHeight values
CANVAS_PRESETS: dict[str, CanvasSize] = {
    "web": CanvasSize(width=1440, height=900),
    "mobile": CanvasSize(width=375, height=812),
    "tablet": CanvasSize(width=768, height=1024),
    "presentation": CanvasSize(width=1920, height=1080),
    "video": CanvasSize(width=1920, height=1080),
}


class ReferenceImage(LayoutModel):
    url: str
    base64: str


class Dimensions(LayoutModel):
    width: int = Field(ge=320, le=3840)
    height: int = Field(ge=320, le=2160)


class DesignBrief(LayoutModel):
    """Validated generation request."""

    description: str = Field(min_length=10, max_length=2000)
    palette: Palette
    reference_images: list[ReferenceImage] = Field(default_factory=list, max_length=5)
    style: DesignStyle
    dimensions: Dimensions
    target_format: Literal["web", "mobile", "presentation", "video-frame"]
    industry: str | None = None
