"""Pytest configuration and fixtures."""

import copy
import os

import pytest

from layoutsmith.core import get_settings
from layoutsmith.models import Layout, validate_layout
from layoutsmith.render import RenderContext


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["LAYOUTSMITH_LOG_LEVEL"] = "DEBUG"
    os.environ.pop("LAYOUTSMITH_CHILD_POSITIONS", None)
    get_settings.cache_clear()


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def ctx():
    """Render context with a fixed namespace."""
    return RenderContext(namespace="test")


# ============================================================================
# Layout Fixtures
# ============================================================================

def make_component(id, type="shape", x=0, y=0, width=100, height=100, z=0, **extra):
    """Wire-format component dict."""
    comp = {
        "id": id,
        "type": type,
        "position": {"x": x, "y": y},
        "size": {"width": width, "height": height},
        "rotation": 0,
        "zIndex": z,
        "style": extra.pop("style", {}),
    }
    comp.update(extra)
    return comp


def make_layout(components, width=1440, height=900, **extra):
    """Wire-format layout dict."""
    layout = {
        "id": "layout_test",
        "canvasWidth": width,
        "canvasHeight": height,
        "background": {"type": "solid", "value": "#ffffff"},
        "components": components,
        "layers": [
            {
                "id": "main",
                "name": "Main",
                "visible": True,
                "locked": False,
                "componentIds": [c["id"] for c in components],
            }
        ],
    }
    layout.update(extra)
    return layout


@pytest.fixture
def sample_layout_dict():
    """Small landing page hero in wire format."""
    return make_layout(
        [
            make_component("bg", "shape", 0, 0, 1440, 900, z=0, style={"fill": "#0F172A"}),
            make_component(
                "headline",
                "text",
                120,
                200,
                800,
                80,
                z=2,
                content="Ship faster",
                style={"fontSize": 64, "fontWeight": 700, "color": "#ffffff", "textAlign": "left"},
            ),
            make_component(
                "cta",
                "button",
                120,
                320,
                200,
                52,
                z=2,
                content="Get started",
                style={"fill": "#3B82F6", "borderRadius": 8},
            ),
            make_component(
                "card",
                "card",
                900,
                160,
                400,
                300,
                z=1,
                children=[
                    make_component("card-title", "text", 24, 24, 200, 32, content="Pro plan"),
                    make_component("card-badge", "badge", 280, 24, 80, 24, content="new"),
                ],
            ),
        ]
    )


@pytest.fixture
def sample_layout(sample_layout_dict) -> Layout:
    """Validated sample layout."""
    return validate_layout(copy.deepcopy(sample_layout_dict))


@pytest.fixture
def raw_generator_output():
    """Typical generator text: prose, a fenced block, trailing commas, loose types."""
    return """Here is your layout:

```json
{
  "canvasWidth": 1440,
  "canvasHeight": 900,
  "components": [
    {
      "id": "title",
      "type": "headline-text",
      "position": {"x": 101, "y": 99},
      "size": {"width": 600, "height": 60},
      "zIndex": -2,
      "style": {"fontWeight": "700", "shadow": "0 2px 4px black", "textTransform": "shout"},
      "content": "Hello world",
    },
    {
      "id": "hero",
      "type": "photo",
      "position": {"x": 800, "y": 120},
      "size": {"width": 500, "height": 400},
      "zIndex": 1,
    },
  ],
}
```
"""
