"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server can be started against a local MongoDB instance without any
setup.  In a production deployment you should override these via
environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Shop API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # MongoDB connection.  The server refuses to start if the ping
    # against ``mongodb_url`` does not succeed within
    # ``mongodb_timeout_ms`` milliseconds.
    mongodb_url: str = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
    database_name: str = os.getenv("DATABASE_NAME", "myDB")
    mongodb_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # Third-party Free-to-Play game catalog proxied by ``/f2p-games``.
    catalog_base_url: str = os.getenv("CATALOG_BASE_URL", "https://www.freetogame.com/api")
    catalog_timeout: float = float(os.getenv("CATALOG_TIMEOUT", "15"))

    # PBKDF2 work factor.  Stored digests embed their own iteration
    # count, so raising this only affects newly created users.
    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
