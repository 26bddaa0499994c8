"""
Unit Tests for AdvisoryConfig
"""

import pytest

from weld_toolkit.advisory.config import (
    DEFAULT_HOST,
    DEFAULT_MODEL,
    ENV_HOST,
    ENV_MODEL,
    ENV_TEMPERATURE,
    AdvisoryConfig,
)


class TestAdvisoryConfig:
    def test_init_when_defaults_then_local_server(self):
        config = AdvisoryConfig()
        assert config.host == DEFAULT_HOST
        assert config.model == DEFAULT_MODEL
        assert config.is_configured

    @pytest.mark.parametrize("temperature", [-0.1, 2.5])
    def test_init_when_temperature_out_of_range_then_raises(self, temperature):
        with pytest.raises(ValueError, match="temperature"):
            AdvisoryConfig(temperature=temperature)

    def test_init_when_timeout_not_positive_then_raises(self):
        with pytest.raises(ValueError, match="timeout"):
            AdvisoryConfig(timeout=0)

    def test_is_configured_when_model_empty_then_false(self):
        assert AdvisoryConfig(model="").is_configured is False

    def test_init_when_frozen_then_cannot_assign(self):
        config = AdvisoryConfig()
        with pytest.raises(AttributeError):
            config.model = "other"


class TestAdvisoryConfigFromEnv:
    def test_from_env_when_empty_then_defaults(self):
        assert AdvisoryConfig.from_env({}) == AdvisoryConfig()

    def test_from_env_when_set_then_overrides(self):
        config = AdvisoryConfig.from_env({
            ENV_HOST: "http://ollama.lan:11434",
            ENV_MODEL: "mistral",
            ENV_TEMPERATURE: "0.7",
        })
        assert config.host == "http://ollama.lan:11434"
        assert config.model == "mistral"
        assert config.temperature == 0.7

    def test_from_env_when_temperature_not_numeric_then_raises(self):
        with pytest.raises(ValueError, match=ENV_TEMPERATURE):
            AdvisoryConfig.from_env({ENV_TEMPERATURE: "warm"})

    def test_from_env_when_model_blank_then_not_configured(self):
        assert AdvisoryConfig.from_env({ENV_MODEL: ""}).is_configured is False

    def test_from_env_when_no_mapping_then_reads_process_env(self, monkeypatch):
        monkeypatch.setenv(ENV_MODEL, "qwen2.5")
        monkeypatch.delenv(ENV_TEMPERATURE, raising=False)
        assert AdvisoryConfig.from_env().model == "qwen2.5"
