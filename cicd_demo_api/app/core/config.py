"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.  ``.env`` files are
loaded by ``cicd_demo_api.__main__`` (which ``run.py`` delegates to)
before the application module is imported.

Values are read when a ``Settings`` instance is created rather than
when this module is imported, which lets tests construct settings
after adjusting the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_STATIC_DIR = str(Path(__file__).resolve().parent.parent / "static")


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    value = _env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _env_environment() -> str:
    # NODE_ENV is what the deployment pipeline sets; APP_ENV is accepted too.
    return _env("NODE_ENV") or _env("APP_ENV") or "development"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "CI/CD Demo API"))
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 3000))

    # Build metadata injected by the pipeline.  ``build_time`` stays
    # ``None`` when unset so that /version reports the current time.
    app_version: str = field(default_factory=lambda: _env("APP_VERSION", "1.0.0"))
    build_time: Optional[str] = field(default_factory=lambda: _env("BUILD_TIME"))
    git_commit: str = field(default_factory=lambda: _env("GIT_COMMIT", "unknown"))

    # Gates the verbosity of 500 error messages.
    environment: str = field(default_factory=_env_environment)

    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: _env("LOG_FILE"))

    seed_demo_data: bool = field(default_factory=lambda: _env_bool("SEED_DEMO_DATA", True))
    static_dir: str = field(default_factory=lambda: _env("STATIC_DIR", DEFAULT_STATIC_DIR))

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def get_settings() -> Settings:
    """Build a fresh ``Settings`` instance from the current environment."""
    return Settings()
