"""
Gridloop — engine/config.py
Runner configuration loaded from TOML and validated by Pydantic.
================================================================
Version:     0.1
Stack:       Python 3.12 | Pydantic v2 | tomllib
Status:      Core configuration layer.

Example gridloop.toml:

    [runner]
    width = 100
    height = 40
    title = "Drifter"
    log_level = "DEBUG"
"""

from __future__ import annotations
import os
import tomllib
from pathlib import Path
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

CONFIG_ENV_VAR = "GRIDLOOP_CONFIG"
DEFAULT_CONFIG_PATH = Path("gridloop.toml")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or does not validate."""


class RunnerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = 80
    height: int = 50
    status_height: int = 5
    status_anchor: Tuple[int, int] = (2, 3)
    title: str = "Gridloop"
    vsync: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("width")
    @classmethod
    def _width_has_interior(cls, v: int) -> int:
        if v < 3:
            raise ValueError("width must leave room for a border on both sides")
        return v

    @field_validator("status_height")
    @classmethod
    def _status_has_interior(cls, v: int) -> int:
        if v < 3:
            raise ValueError("status_height must be at least 3")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def _regions_fit(self) -> "RunnerConfig":
        if self.height - self.status_height < 3:
            raise ValueError(
                f"height {self.height} leaves no play interior above a {self.status_height}-row status box"
            )
        row, col = self.status_anchor
        if not (1 <= row <= self.status_height - 2 and 1 <= col <= self.width - 2):
            raise ValueError(f"status_anchor {self.status_anchor} is not inside the status interior")
        return self

    @property
    def play_interior(self) -> Tuple[int, int]:
        """(width, height) handed to the game at construction."""
        return self.width - 2, self.height - self.status_height - 2

    def with_overrides(self, **overrides: Any) -> "RunnerConfig":
        """Returns a validated copy with the non-None overrides applied."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return RunnerConfig(**data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e


def _resolve_path(path: Optional[Path]) -> Tuple[Path, bool]:
    if path is not None:
        return Path(path), True
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser(), True
    return DEFAULT_CONFIG_PATH, False


def load_config(path: Optional[Path] = None) -> RunnerConfig:
    """
    Loads the runner configuration.
    An explicit path (argument or GRIDLOOP_CONFIG) must exist; the default
    gridloop.toml is optional and falls back to built-in defaults.
    """
    cfg_path, explicit = _resolve_path(path)
    if not cfg_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return RunnerConfig()

    try:
        with open(cfg_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {e}") from e

    section = data.get("runner", data)
    try:
        return RunnerConfig(**section)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {cfg_path}: {e}") from e
