"""Tests for runtime settings loading."""

import logging

import pytest

from crashpred.core import PredictorSettings, load_settings

ENV_KEYS = ("CRASHPRED_STRATEGIES", "CRASHPRED_SEED", "CRASHPRED_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset settings variables and run from an empty directory.

    Setting before deleting makes monkeypatch remove anything a .env file
    loads during the test.
    """
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self, clean_env) -> None:
        settings = load_settings()
        assert settings == PredictorSettings()
        assert settings.strategies == ()
        assert settings.seed is None
        assert settings.log_level_value == logging.WARNING

    def test_from_environment(self, clean_env) -> None:
        clean_env.setenv("CRASHPRED_STRATEGIES", "ema, markov_chain,,")
        clean_env.setenv("CRASHPRED_SEED", "42")
        clean_env.setenv("CRASHPRED_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.strategies == ("ema", "markov_chain")
        assert settings.seed == 42
        assert settings.log_level == "DEBUG"

    def test_from_env_file(self, clean_env, tmp_path) -> None:
        env_file = tmp_path / "settings.env"
        env_file.write_text("CRASHPRED_SEED=7\nCRASHPRED_STRATEGIES=lstm\n")
        settings = load_settings(env_file)
        assert settings.seed == 7
        assert settings.strategies == ("lstm",)

    def test_environment_overrides_env_file(self, clean_env, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CRASHPRED_SEED=7\n")
        clean_env.setenv("CRASHPRED_SEED", "9")
        assert load_settings().seed == 9

    def test_blank_seed_is_unset(self, clean_env) -> None:
        clean_env.setenv("CRASHPRED_SEED", "  ")
        assert load_settings().seed is None

    def test_invalid_seed(self, clean_env) -> None:
        clean_env.setenv("CRASHPRED_SEED", "abc")
        with pytest.raises(ValueError, match="CRASHPRED_SEED"):
            load_settings()

    def test_invalid_log_level(self, clean_env) -> None:
        clean_env.setenv("CRASHPRED_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="CRASHPRED_LOG_LEVEL"):
            load_settings()
