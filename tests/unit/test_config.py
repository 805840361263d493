"""Tests for promptgallery.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the PROMPTGALLERY_ prefix.
- Automatic data directory creation on initialisation.
- Pydantic validation constraints (port range, algorithm literals, etc.).
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from promptgallery.core.config import GalleryConfig


class TestConfigDefaults:
    """Verify that GalleryConfig provides sensible defaults."""

    def test_default_server_port(self, monkeypatch, temp_dir: Path):
        """Default server port should be 3000."""
        monkeypatch.delenv("PROMPTGALLERY_SERVER_PORT", raising=False)
        cfg = GalleryConfig(_env_file=None, data_dir=str(temp_dir))
        assert cfg.server_port == 3000
        assert cfg.server_host == "0.0.0.0"

    def test_default_seed_admin(self, monkeypatch, temp_dir: Path):
        """Seed admin defaults to admin/admin123."""
        monkeypatch.delenv("PROMPTGALLERY_ADMIN_USERNAME", raising=False)
        monkeypatch.delenv("PROMPTGALLERY_ADMIN_PASSWORD", raising=False)
        cfg = GalleryConfig(_env_file=None, data_dir=str(temp_dir))
        assert cfg.admin_username == "admin"
        assert cfg.admin_password == "admin123"

    def test_default_token_settings(self, test_config: GalleryConfig):
        """Tokens are HS256-signed and live for 24 hours."""
        assert test_config.jwt_algorithm == "HS256"
        assert test_config.token_expire_hours == 24

    def test_database_path(self, test_config: GalleryConfig):
        """database_path joins data_dir and database_name."""
        assert test_config.database_path == test_config.data_dir / "prompts.db"


class TestConfigEnvironment:
    """Verify PROMPTGALLERY_ environment overrides."""

    def test_env_overrides_port(self, monkeypatch, temp_dir: Path):
        monkeypatch.setenv("PROMPTGALLERY_SERVER_PORT", "8080")
        cfg = GalleryConfig(_env_file=None, data_dir=str(temp_dir))
        assert cfg.server_port == 8080

    def test_env_overrides_secret(self, monkeypatch, temp_dir: Path):
        monkeypatch.setenv("PROMPTGALLERY_JWT_SECRET", "from-the-environment")
        cfg = GalleryConfig(_env_file=None, data_dir=str(temp_dir))
        assert cfg.jwt_secret == "from-the-environment"

    def test_env_disables_sample_prompts(self, monkeypatch, temp_dir: Path):
        monkeypatch.setenv("PROMPTGALLERY_SEED_SAMPLE_PROMPTS", "false")
        cfg = GalleryConfig(_env_file=None, data_dir=str(temp_dir))
        assert cfg.seed_sample_prompts is False


class TestConfigDirectoryCreation:
    """Verify that GalleryConfig creates the data directory."""

    def test_data_dir_created(self, temp_dir: Path):
        data_dir = temp_dir / "nested" / "data"
        GalleryConfig(_env_file=None, data_dir=str(data_dir))
        assert data_dir.is_dir()


class TestConfigValidation:
    """Verify Pydantic constraints on configuration fields."""

    def test_port_out_of_range(self, temp_dir: Path):
        with pytest.raises(ValidationError):
            GalleryConfig(_env_file=None, data_dir=str(temp_dir), server_port=70000)

    def test_unknown_algorithm_rejected(self, temp_dir: Path):
        with pytest.raises(ValidationError):
            GalleryConfig(_env_file=None, data_dir=str(temp_dir), jwt_algorithm="none")

    def test_empty_secret_rejected(self, temp_dir: Path):
        with pytest.raises(ValidationError):
            GalleryConfig(_env_file=None, data_dir=str(temp_dir), jwt_secret="")
