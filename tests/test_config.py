# ABOUTME: Tests for configuration loading and defaults.
# ABOUTME: Verifies Pydantic Settings behavior and environment overrides.

import pytest

from mod_note_archiver.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_settings_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should have the archive.org defaults."""
        monkeypatch.delenv("APP_DOMAIN", raising=False)
        settings = Settings(_env_file=None)

        assert settings.app_domain == "localhost"
        assert settings.wayback_save_url == "https://web.archive.org/save/"
        assert settings.archive_timeout == 30.0
        assert settings.archive_retries == 3
        assert settings.archive_verify_tls is True
        assert settings.archive_delay_seconds == 5.0
        assert settings.archive_queue == "default"
        assert settings.log_format == "console"

    def test_user_agent_uses_app_domain(self, mock_settings: Settings) -> None:
        """The user agent identifies the application domain."""
        assert mock_settings.archive_user_agent == "lobste.rs mod-note-archiver"

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("APP_DOMAIN", "example.org")
        monkeypatch.setenv("ARCHIVE_DELAY_SECONDS", "0")
        monkeypatch.setenv("ARCHIVE_VERIFY_TLS", "false")

        settings = Settings(_env_file=None)

        assert settings.archive_user_agent == "example.org mod-note-archiver"
        assert settings.archive_delay_seconds == 0
        assert settings.archive_verify_tls is False

    def test_get_settings_is_cached(self) -> None:
        """get_settings returns the same instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
