"""Shared pytest fixtures for Prompt Gallery tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from promptgallery.api.main import create_app
from promptgallery.core.config import GalleryConfig
from promptgallery.core.prompts_db import PromptsDB
from promptgallery.services import AuthService, PromptService

TEST_ADMIN_USERNAME = "curator"
TEST_ADMIN_PASSWORD = "correct-horse-battery"
TEST_JWT_SECRET = "test-secret-that-is-long-enough-for-hs256-signing"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> GalleryConfig:
    """Create a test configuration backed by a temporary database.

    Sample prompts are disabled so every test starts from an empty gallery.
    """
    return GalleryConfig(
        _env_file=None,
        data_dir=str(temp_dir / "data"),
        admin_username=TEST_ADMIN_USERNAME,
        admin_password=TEST_ADMIN_PASSWORD,
        jwt_secret=TEST_JWT_SECRET,
        seed_sample_prompts=False,
    )


@pytest.fixture
def prompts_db(test_config: GalleryConfig) -> PromptsDB:
    return PromptsDB(test_config.database_path)


@pytest.fixture
def prompt_service(prompts_db: PromptsDB) -> PromptService:
    return PromptService(prompts_db)


@pytest.fixture
def auth_service(prompts_db: PromptsDB, test_config: GalleryConfig) -> AuthService:
    """AuthService with the seed admin already created."""
    service = AuthService(prompts_db, test_config)
    service.ensure_seed_admin()
    return service


@pytest.fixture
def test_client(test_config: GalleryConfig) -> Generator[TestClient, None, None]:
    """TestClient for an app bound to the temporary database.

    Entering the client runs the lifespan handler, which creates the schema
    and the seed admin.
    """
    app = create_app(test_config)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_token(test_client: TestClient) -> str:
    resp = test_client.post(
        "/api/admin/login",
        json={"username": TEST_ADMIN_USERNAME, "password": TEST_ADMIN_PASSWORD},
    )
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def auth_headers(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def valid_prompt_payload() -> dict:
    """A prompt body that passes every validation rule."""
    return {
        "category": "Men",
        "image_url": "https://x/y.jpg",
        "prompt_text": "a valid prompt text",
    }
