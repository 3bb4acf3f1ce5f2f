"""
QuickNotes Backend - Health & Configuration Tests
===================================================
"""

import pytest
from pydantic import ValidationError as SettingsValidationError

from quicknotes import __version__
from quicknotes.config import Settings


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_note_count(self, test_client, sample_notes):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert body["notes"] == 2
        assert body["uptime_seconds"] >= 0


class TestSettings:

    def test_log_level_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
