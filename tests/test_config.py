"""Tests for settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chinese_ner.config import NerSettings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestNerSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        settings = NerSettings()
        assert settings.model_path == Path("ner.model")
        assert settings.hmm is True
        assert settings.algorithm == "lbfgs"
        assert settings.max_iterations == 50
        assert settings.holdout_ratio == 0.0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CHINESE_NER_MODEL_PATH", "/tmp/custom.model")
        monkeypatch.setenv("CHINESE_NER_MAX_ITERATIONS", "200")
        monkeypatch.setenv("CHINESE_NER_HMM", "false")

        settings = NerSettings()
        assert settings.model_path == Path("/tmp/custom.model")
        assert settings.max_iterations == 200
        assert settings.hmm is False

    def test_invalid_holdout_ratio(self):
        with pytest.raises(ValidationError):
            NerSettings(holdout_ratio=1.0)

    def test_invalid_algorithm(self):
        with pytest.raises(ValidationError):
            NerSettings(algorithm="sgd")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestCrfParams:
    """Test crfsuite parameter building."""

    def test_lbfgs_params(self):
        assert NerSettings().crf_params() == {
            "c1": 1.0,
            "c2": 1e-3,
            "max_iterations": 50,
            "feature.possible_transitions": True,
        }

    def test_l2sgd_has_no_l1(self):
        params = NerSettings(algorithm="l2sgd").crf_params()
        assert "c1" not in params
        assert params["c2"] == 1e-3

    def test_averaged_perceptron_has_no_regularization(self):
        params = NerSettings(algorithm="ap").crf_params()
        assert "c1" not in params
        assert "c2" not in params
