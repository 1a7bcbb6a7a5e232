from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from cliptext.models.platform_context import BackendKind

logger = logging.getLogger(__name__)

ENV_PREFIX = "CLIPTEXT_"

_settings: Optional["ClipboardSettings"] = None


def _to_bool(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class ClipboardSettings(BaseModel):
    # Forces a strategy instead of detecting one
    backend: Optional[BackendKind] = None
    # None keeps the line endings of the rendered text untouched
    newline: Optional[str] = None
    temp_dir: Optional[Path] = None
    low_level_reads: bool = True
    xclip_selection: str = "clipboard"
    log_level: str = Field(default="WARNING")

    @field_validator("newline")
    @classmethod
    def _check_newline(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().lower()
        if value not in {"lf", "crlf"}:
            raise ValueError(f"Unsupported newline style: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    @property
    def newline_sequence(self) -> Optional[str]:
        if self.newline is None:
            return None
        return "\r\n" if self.newline == "crlf" else "\n"

    @classmethod
    def from_env(cls, *, env_file: Optional[Path] = None) -> "ClipboardSettings":
        if env_file:
            load_dotenv(dotenv_path=env_file)
        else:
            load_dotenv()

        backend_raw = os.getenv(f"{ENV_PREFIX}BACKEND") or None
        temp_dir_raw = os.getenv(f"{ENV_PREFIX}TEMP_DIR") or None

        return cls(
            backend=BackendKind(backend_raw.strip().lower()) if backend_raw else None,
            newline=os.getenv(f"{ENV_PREFIX}NEWLINE") or None,
            temp_dir=Path(temp_dir_raw) if temp_dir_raw else None,
            low_level_reads=_to_bool(
                os.getenv(f"{ENV_PREFIX}LOW_LEVEL_READS"), default=True),
            xclip_selection=os.getenv(
                f"{ENV_PREFIX}XCLIP_SELECTION", "clipboard"),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING"),
        )


def get_settings() -> ClipboardSettings:
    """Return the process-wide settings, loading them on first access."""
    global _settings
    if _settings is None:
        _settings = ClipboardSettings.from_env()
        logger.debug(f"Loaded settings: {_settings!r}")
    return _settings


def set_settings(settings: Optional[ClipboardSettings]) -> None:
    """Replace the cached settings. Passing None reloads on next access."""
    global _settings
    _settings = settings
