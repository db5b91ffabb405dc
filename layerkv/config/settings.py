"""
layerkv Configuration Settings

Defaults for the HTTP server, read from LAYERKV_* environment variables.
Command line flags override these values.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Server configuration settings."""

    # Network settings
    HOST: str = os.environ.get("LAYERKV_HOST", "127.0.0.1")
    PORT: int = int(os.environ.get("LAYERKV_PORT", "8080"))

    # Storage settings
    ROOT: str = os.environ.get("LAYERKV_ROOT", ".")
    BACKEND: str = os.environ.get("LAYERKV_BACKEND", "layered")
    CAPACITY: int = int(os.environ.get("LAYERKV_CAPACITY", "1024"))  # entries, not bytes

    # Logging settings
    DEBUG: bool = os.environ.get("LAYERKV_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("LAYERKV_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
