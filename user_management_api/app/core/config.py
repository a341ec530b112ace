"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, without the ``pydantic_settings`` package.
Defaults are provided for all fields so the service starts with no
configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Console logging is always enabled;
    # a file handler is added only when this is non-empty.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the v1 router is mounted, e.g. ``/api/v1``.
    # Empty by default so users live at ``/users``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
