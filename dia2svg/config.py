"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from dia2svg.engine.config import RenderConfig
from dia2svg.svg.serializer import Alignment


class Settings(BaseSettings):
    dia2svg_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    default_alignment: Alignment = ""
    debug_show_grid: bool = False
    debug_show_source: bool = False
    debug_hide_passthrough: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            debug_show_grid=self.debug_show_grid,
            debug_show_source=self.debug_show_source,
            debug_hide_passthrough=self.debug_hide_passthrough,
        )


settings = Settings()
