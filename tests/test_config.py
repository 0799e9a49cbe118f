"""Tests for src.config."""

from src.config import Settings
from src.constants import IMAGES_BUCKET


class TestSettings:
    """Tests for Settings defaults and parsing."""

    def test_default_bucket(self, monkeypatch):
        monkeypatch.delenv("STORAGE_BUCKET", raising=False)

        assert Settings().storage_bucket == IMAGES_BUCKET

    def test_cors_origins_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

        assert Settings().cors_origins == ["http://a.test", "http://b.test"]
