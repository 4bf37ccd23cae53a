"""Tests for environment-driven settings."""

from pathlib import Path

from certpath.config import DEFAULT_DATA_PATH, Settings


class TestSettings:
    """Test Settings defaults and overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CERTPATH_DATA_PATH", raising=False)
        settings = Settings(_env_file=None)

        assert settings.catalog_path == DEFAULT_DATA_PATH
        assert settings.api_prefix == "/api/v1"
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ["*"]

    def test_bundled_dataset_exists(self):
        assert DEFAULT_DATA_PATH.is_file()

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CERTPATH_DATA_PATH", str(tmp_path / "custom.json"))
        monkeypatch.setenv("CERTPATH_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.catalog_path == Path(tmp_path / "custom.json")
        assert settings.log_level == "DEBUG"
