"""Application configuration models and helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from sttyl.core.errors import ConfigurationError


def _platform_vdisable() -> int:
    # _POSIX_VDISABLE: '\0' on Linux, 0xff on the BSDs and macOS
    if sys.platform == "darwin" or "bsd" in sys.platform:
        return 0xFF
    return 0


class AppPaths(BaseModel):
    """Resolved directories for sttyl runtime assets."""

    base_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("STTYL_HOME", Path.home() / ".sttyl"))
    )

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"

    def ensure(self) -> None:
        for path in (self.base_dir, self.logs_dir):
            path.mkdir(parents=True, exist_ok=True)


class TerminalSettings(BaseModel):
    fd: int = Field(default=0, ge=0)
    geometry_fd: int = Field(default=1, ge=0)


class DisplaySettings(BaseModel):
    undef_marker: str = Field(default="<undef>", min_length=1)
    vdisable: int = Field(default_factory=_platform_vdisable, ge=0, le=0xFF)


class LoggingSettings(BaseModel):
    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    to_file: bool = False


class SttylSettings(BaseModel):
    app_name: str = "sttyl"
    paths: AppPaths = Field(default_factory=AppPaths)
    terminal: TerminalSettings = Field(default_factory=TerminalSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _maybe_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _maybe_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    lowered = value.lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return None


def load_settings(env_path: Path | None = None) -> SttylSettings:
    """Load user settings from environment variables and defaults."""

    env_file = env_path or Path('.env')
    if env_file.exists():
        load_dotenv(env_file)

    overrides: dict[str, Any] = {}

    if (fd := _maybe_int(os.getenv('STTYL_FD'))) is not None:
        overrides.setdefault('terminal', {})['fd'] = fd

    if (geometry_fd := _maybe_int(os.getenv('STTYL_GEOMETRY_FD'))) is not None:
        overrides.setdefault('terminal', {})['geometry_fd'] = geometry_fd

    if marker := os.getenv('STTYL_UNDEF_MARKER'):
        overrides.setdefault('display', {})['undef_marker'] = marker

    if level := os.getenv('STTYL_LOG_LEVEL'):
        overrides.setdefault('logging', {})['level'] = level.upper()

    if (to_file := _maybe_bool(os.getenv('STTYL_LOG_FILE'))) is not None:
        overrides.setdefault('logging', {})['to_file'] = to_file

    try:
        return SttylSettings(**overrides)
    except ValidationError as exc:
        first = exc.errors()[0]
        setting = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(setting, first["msg"]) from exc
