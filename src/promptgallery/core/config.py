"""Configuration management for the Prompt Gallery.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the PROMPTGALLERY_
prefix, allowing deployment-specific values without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PROMPTGALLERY_* prefix)
2. .env file in the project root
3. Default values defined in GalleryConfig

Example .env file:
    PROMPTGALLERY_SERVER_PORT=8080
    PROMPTGALLERY_ADMIN_USERNAME=curator
    PROMPTGALLERY_ADMIN_PASSWORD=change-me
    PROMPTGALLERY_JWT_SECRET=a-long-random-string

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
It is only read by the CLI entry point and the default application instance;
the application factory takes its configuration explicitly, so tests and
embedding code can pass their own ``GalleryConfig``.

Usage Example
-------------
    from promptgallery.core.config import config

    print(config.database_path)
    print(config.server_port)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GalleryConfig(BaseSettings):
    """Main configuration for the Prompt Gallery.

    Attributes
    ----------
    Server Settings:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Listening port (1-65535)

    Storage:
        data_dir : Path
            Directory holding the SQLite database file
        database_name : str
            Database file name inside ``data_dir``

    Admin Authentication:
        admin_username : str
            Username of the seed admin created at first startup
        admin_password : str
            Password of the seed admin (hashed before storage)
        jwt_secret : str
            Secret used to sign bearer tokens
        jwt_algorithm : str
            JWT signing algorithm
        token_expire_hours : int
            Bearer token lifetime in hours

    Misc:
        seed_sample_prompts : bool
            Insert sample prompts when the prompts table is empty
        log_level : str
            Root logging level used by the CLI entry point

    Notes
    -----
    - ``data_dir`` is created automatically if it doesn't exist
    - The defaults for the seed admin and JWT secret are for local use only;
      override them in any shared deployment
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROMPTGALLERY_",
        case_sensitive=False,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=3000,
        description="Server port",
        ge=1,
        le=65535,
    )

    # Storage
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the SQLite database",
    )
    database_name: str = Field(
        default="prompts.db",
        description="SQLite database file name",
    )

    # Admin authentication
    admin_username: str = Field(
        default="admin",
        min_length=1,
        description="Seed admin username",
    )
    admin_password: str = Field(
        default="admin123",
        min_length=1,
        description="Seed admin password",
    )
    jwt_secret: str = Field(
        default="fallback-secret",
        min_length=1,
        description="Secret used to sign admin bearer tokens",
    )
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    token_expire_hours: int = Field(
        default=24,
        description="Bearer token lifetime in hours",
        ge=1,
    )

    # Misc
    seed_sample_prompts: bool = Field(
        default=True,
        description="Insert sample prompts into an empty database at startup",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the data directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        """Absolute-or-relative path to the SQLite database file."""
        return self.data_dir / self.database_name


# Global configuration instance
# Loads values from environment variables (PROMPTGALLERY_* prefix) and .env file.
config = GalleryConfig()
