"""Tests for environment-driven settings helpers."""

from __future__ import annotations

import logging

import pytest

from annotator_tracker.core import ALLOWED_CORS_ORIGINS, DATABASE_URL, configure_logging
from annotator_tracker.core.config import _env_bool, _env_int, _split_csv, _unique


class TestEnvHelpers:
    def test_env_bool(self, monkeypatch):
        monkeypatch.setenv("TRACKER_FLAG", " Yes ")
        assert _env_bool("TRACKER_FLAG") is True
        monkeypatch.setenv("TRACKER_FLAG", "off")
        assert _env_bool("TRACKER_FLAG", True) is False
        monkeypatch.delenv("TRACKER_FLAG")
        assert _env_bool("TRACKER_FLAG", True) is True

    def test_env_int(self, monkeypatch):
        monkeypatch.setenv("TRACKER_INT", "5")
        assert _env_int("TRACKER_INT", 1) == 5
        monkeypatch.setenv("TRACKER_INT", "")
        assert _env_int("TRACKER_INT", 1) == 1

    def test_env_int_rejects_garbage(self, monkeypatch):
        monkeypatch.setenv("TRACKER_INT", "soon")
        with pytest.raises(RuntimeError, match="TRACKER_INT must be an integer"):
            _env_int("TRACKER_INT", 1)

    def test_split_csv_and_unique(self):
        assert _split_csv(" a, ,b ,") == ["a", "b"]
        assert _split_csv(None) == []
        assert _unique(["b", "a", "b"]) == ["b", "a"]


class TestDefaults:
    def test_local_dev_origins_allowed(self):
        assert "http://localhost:3000" in ALLOWED_CORS_ORIGINS
        assert len(ALLOWED_CORS_ORIGINS) == len(set(ALLOWED_CORS_ORIGINS))

    def test_database_url_is_set(self):
        assert DATABASE_URL


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("info")
    assert logger.name == "annotator_tracker"
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
