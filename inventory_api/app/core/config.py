"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables; defaults are provided for all fields.  The
signing secret in particular should always be overridden through
``SECRET_KEY`` outside of local development: every token issued with
one secret is rejected by a server running with another.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Inventory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # HMAC key for login tokens.  Loaded once; services keep their own copy.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    # Seconds granted to in‑flight requests once a shutdown signal arrives.
    shutdown_timeout: int = int(os.getenv("SHUTDOWN_TIMEOUT", "30"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
