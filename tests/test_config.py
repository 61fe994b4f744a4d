"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from taxbook.config import DEFAULT_DB_URL, load_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DB_URL", "HOST", "PORT", "STATIC_DIR", "CORS_ORIGINS", "LOG_LEVEL"):
            monkeypatch.delenv(f"TAX_TRACKER_{name}", raising=False)

        settings = load_settings()
        assert settings.db_url == DEFAULT_DB_URL
        assert settings.port == 3000
        assert settings.cors_origin_list == ["*"]
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TAX_TRACKER_DB_URL", "sqlite:///other.db")
        monkeypatch.setenv("TAX_TRACKER_PORT", "8080")
        monkeypatch.setenv("TAX_TRACKER_STATIC_DIR", str(tmp_path))
        monkeypatch.setenv("TAX_TRACKER_CORS_ORIGINS", "http://localhost:5173, http://example.com")
        monkeypatch.setenv("TAX_TRACKER_LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.db_url == "sqlite:///other.db"
        assert settings.port == 8080
        assert settings.static_dir == Path(tmp_path)
        assert settings.cors_origin_list == ["http://localhost:5173", "http://example.com"]
        assert settings.log_level == "DEBUG"

    def test_non_numeric_port_is_rejected(self, monkeypatch):
        monkeypatch.setenv("TAX_TRACKER_PORT", "not-a-port")
        with pytest.raises(ValidationError):
            load_settings()
