# ABOUTME: Pytest fixtures and configuration for mod_note_archiver tests.
# ABOUTME: Provides mock settings, sample notes, and HTTP response helpers.

from collections.abc import Iterator
from unittest.mock import MagicMock

import httpx
import pytest
import structlog

from mod_note_archiver.config import Settings
from mod_note_archiver.models import ModNote


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings() -> Settings:
    """Create mock settings for testing."""
    return Settings(
        app_domain="lobste.rs",
        wayback_save_url="https://web.archive.org/save/",
        archive_timeout=30.0,
        archive_retries=3,
        archive_verify_tls=True,
        archive_delay_seconds=5.0,
        archive_queue="default",
        log_level="DEBUG",
    )


@pytest.fixture
def mock_response() -> MagicMock:
    """Create a mock HTTP response with a 200 status."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = 200
    return response


@pytest.fixture
def make_mod_note():
    """Build a ModNote from note text."""

    def _make(note: str, note_id: int = 1) -> ModNote:
        return ModNote(id=note_id, note=note)

    return _make
