"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgscene_env: str = "development"
    svgscene_log_level: str = "info"

    # Colors used when a shape omits its paint attribute
    default_fill: str = "black"
    default_stroke: str = "black"
    # Canvas background for converted images
    background: str = "white"

    # Shrink rect width/height by one so inclusive polygon edges cover exactly width×height pixels
    rect_inclusive_edges: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("svgscene_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level.lower()


settings = Settings()
