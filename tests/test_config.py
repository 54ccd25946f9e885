"""Tests for environment-driven settings."""

import config


class TestEnvChoice:
    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("STREAK_ANCHOR", raising=False)
        assert config._env_choice("STREAK_ANCHOR", ("latest", "today"), "latest") == "latest"

    def test_case_and_whitespace_are_ignored(self, monkeypatch):
        monkeypatch.setenv("STREAK_ANCHOR", " Today ")
        assert config._env_choice("STREAK_ANCHOR", ("latest", "today"), "latest") == "today"

    def test_unknown_value_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("STREAK_ANCHOR", "sideways")
        assert config._env_choice("STREAK_ANCHOR", ("latest", "today"), "latest") == "latest"
        assert "STREAK_ANCHOR" in caplog.text

    def test_configured_anchor_is_valid(self):
        assert config.STREAK_ANCHOR in ("latest", "today")
