"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables when it is instantiated.  Defaults are provided
for all fields so the service starts without any configuration; the
only value most deployments override is ``PORT``.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "AI Tools API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Optional path of a log file.  When unset only the console handler
    # is installed.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Comma‑separated list of origins allowed by CORS.  ``*`` (the
    # default) allows any origin.
    cors_allow_origins: str = field(default_factory=lambda: _env("CORS_ALLOW_ORIGINS", "*"))

    @property
    def cors_origins(self) -> List[str]:
        """Return the configured CORS origins as a list."""
        origins = [origin.strip() for origin in self.cors_allow_origins.split(",")]
        return [origin for origin in origins if origin] or ["*"]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
