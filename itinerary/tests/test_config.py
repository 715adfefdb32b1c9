"""
Tests for cascade configuration.
"""

import dataclasses

import pytest

from itinerary.generation.config import (
    CascadeConfig,
    DEFAULT_CONFIG,
    DEFAULT_MODELS,
    get_config,
    load_config_from_env,
)


class TestCascadeConfig:
    """Tests for CascadeConfig defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.models == DEFAULT_MODELS
        assert DEFAULT_CONFIG.models[0] == "gemini-2.5-flash"
        assert DEFAULT_CONFIG.max_retries == 3
        assert DEFAULT_CONFIG.base_delay_ms == 1000
        assert DEFAULT_CONFIG.timeout_ms == 45000
        assert DEFAULT_CONFIG.base_delay_seconds == 1.0
        assert DEFAULT_CONFIG.timeout_seconds == 45.0

    def test_models_become_tuple(self):
        config = CascadeConfig(models=["a", "b"])
        assert config.models == ("a", "b")

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.max_retries = 5

    def test_empty_models_rejected(self):
        with pytest.raises(ValueError, match="model"):
            CascadeConfig(models=())

    def test_bare_string_models_rejected(self):
        with pytest.raises(ValueError, match="not a string"):
            CascadeConfig(models="gemini-2.5-flash")

    def test_get_config_rejects_bare_string_models(self):
        with pytest.raises(ValueError, match="not a string"):
            get_config(models="gemini")

    @pytest.mark.parametrize("field", ["max_retries", "base_delay_ms", "timeout_ms"])
    @pytest.mark.parametrize("value", [0, -1, 1.5, True])
    def test_non_positive_integers_rejected(self, field, value):
        with pytest.raises(ValueError, match=field):
            CascadeConfig(**{field: value})

    def test_recursion_limit_grows_with_models(self):
        assert get_config(models=["a"]).recursion_limit < get_config(
            models=["a", "b", "c"]
        ).recursion_limit


class TestGetConfig:
    """Tests for get_config overrides."""

    def test_overrides(self):
        config = get_config(models=["x"], max_retries=5, timeout_ms=10)
        assert config.models == ("x",)
        assert config.max_retries == 5
        assert config.timeout_ms == 10
        assert config.base_delay_ms == DEFAULT_CONFIG.base_delay_ms

    def test_no_overrides_equals_default(self):
        assert get_config() == DEFAULT_CONFIG


class TestLoadConfigFromEnv:
    """Tests for environment-driven configuration."""

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("ITINERARY_MODELS", "m1, m2 ,,m3")
        monkeypatch.setenv("ITINERARY_MAX_RETRIES", "2")
        monkeypatch.setenv("ITINERARY_BASE_DELAY_MS", "250")
        monkeypatch.setenv("ITINERARY_TIMEOUT_MS", "5000")
        monkeypatch.setenv("ITINERARY_LANGUAGE", "en")

        config = load_config_from_env()

        assert config.models == ("m1", "m2", "m3")
        assert config.max_retries == 2
        assert config.base_delay_ms == 250
        assert config.timeout_ms == 5000
        assert config.default_language == "en"

    def test_unset_variables_keep_defaults(self, monkeypatch):
        for name in (
            "ITINERARY_MODELS",
            "ITINERARY_MAX_RETRIES",
            "ITINERARY_BASE_DELAY_MS",
            "ITINERARY_TIMEOUT_MS",
            "ITINERARY_LANGUAGE",
        ):
            monkeypatch.delenv(name, raising=False)
        assert load_config_from_env() == DEFAULT_CONFIG

    def test_non_integer_rejected(self, monkeypatch):
        monkeypatch.setenv("ITINERARY_MAX_RETRIES", "three")
        with pytest.raises(ValueError, match="ITINERARY_MAX_RETRIES"):
            load_config_from_env()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
