"""Core configuration.

Why here:
- Centralizes the fixed paths (manifest, output directory) so the CLI and
  the resolver read them from one typed contract.
- The paths are class constants, not settings fields: the tool always reads
  `manifests/index.json` and writes to `dist/`, whatever the environment holds.
  Only the diagnostic log level can be tuned (`APPLY_PACKAGE_LOG_LEVEL`).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MANIFEST_PATH = Path("manifests") / "index.json"
DEFAULT_DIST_DIR = Path("dist")


class AppSettings(BaseSettings):
    """Application settings.

    Paths are relative on purpose: they resolve against the working
    directory of each invocation, not against the install location.
    """

    model_config = SettingsConfigDict(
        env_prefix="APPLY_PACKAGE_",
        extra="ignore",
        case_sensitive=False,
    )

    manifest_path: ClassVar[Path] = DEFAULT_MANIFEST_PATH
    dist_dir: ClassVar[Path] = DEFAULT_DIST_DIR

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Level for the stderr log handler (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
