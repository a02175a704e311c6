"""Core configuration.

Why here:
- Environment variables and `.env` files are read once, through
  pydantic-settings, and handed to the CLI and adapters as `AppSettings`.
- The per-user `.env` lets `pkgctl doctor set-namespace` persist defaults
  without touching the project directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Literal

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "pkgctl"


def get_user_config_dir() -> Path:
    """Where the user-level `.env` lives (APPDATA, Application Support or XDG)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Merge `values` into the user `.env`, keeping keys already stored there."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged: dict[str, str] = {}
    if env_path.exists():
        merged = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
    merged.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pkgctl user config (.env)"]
    lines.extend(f"{key}={merged[key]}" for key in sorted(merged))
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without touching the Core.
    - One configuration contract for the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PKGCTL_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_namespace: str = Field(
        default="default",
        min_length=1,
        description="Namespace used when -n/--namespace is not given.",
    )
    manifests_dir: Path = Field(
        default=Path("manifests"),
        description="Directory of JSON/YAML manifests served by the file store.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level for the CLI.",
    )
    color: bool = Field(
        default=True,
        description="Colored terminal output.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value
