"""Runtime settings for layoutsmith (``LAYOUTSMITH_*`` variables or a ``.env`` file)."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Pick up a local .env before Settings reads os.environ
load_dotenv()


class Settings(BaseSettings):
    """Envelope fallbacks, input limits and logging switches."""

    model_config = SettingsConfigDict(
        env_prefix="LAYOUTSMITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Envelope defaults (used when the generator omits them)
    default_canvas_width: int = Field(default=1440, ge=1, description="Fallback canvas width")
    default_canvas_height: int = Field(default=900, ge=1, description="Fallback canvas height")
    default_background: str = Field(default="#ffffff", description="Fallback canvas color")

    # Input limits
    max_payload_size: int = Field(default=512 * 1024, gt=0, description="Max raw text size (bytes)")
    max_json_depth: int = Field(default=40, gt=0, description="Max nesting depth of parsed JSON")

    # Rendering
    child_positions: Literal["relative", "auto"] = Field(
        default="relative", description="Child coordinate convention expected by the renderer"
    )
    font_family: str = Field(
        default="Inter, system-ui, sans-serif", description="Fallback font stack"
    )


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; tests clear the cache."""
    return Settings()
