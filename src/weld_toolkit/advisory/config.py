"""
Module: advisory.config

Purpose:
    Connection settings for the local LLM used by the advisory panel.
    Immutable, validated on construction, overridable from the environment.

Key Classes:
    - AdvisoryConfig

Environment:
    - WELD_TOOLKIT_OLLAMA_HOST: Ollama server URL
    - WELD_TOOLKIT_OLLAMA_MODEL: Model name
    - WELD_TOOLKIT_TEMPERATURE: Sampling temperature
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "http://localhost:11434"
DEFAULT_MODEL = "llama3.1"

ENV_HOST = "WELD_TOOLKIT_OLLAMA_HOST"
ENV_MODEL = "WELD_TOOLKIT_OLLAMA_MODEL"
ENV_TEMPERATURE = "WELD_TOOLKIT_TEMPERATURE"


@dataclass(frozen=True)
class AdvisoryConfig:
    """
    Advisory LLM configuration (immutable).

    Attributes:
        host: Ollama server URL
        model: Model to query; empty disables the advisory
        temperature: Sampling temperature, 0..2
        timeout: Request timeout in seconds
    """

    host: str = DEFAULT_HOST
    model: str = DEFAULT_MODEL
    temperature: float = 0.3
    timeout: float = 60.0

    def __post_init__(self) -> None:
        if not 0 <= self.temperature <= 2:
            raise ValueError(f"temperature must be between 0 and 2: {self.temperature}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive: {self.timeout}")

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.model)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AdvisoryConfig:
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        temperature = env.get(ENV_TEMPERATURE)
        try:
            temperature_value = float(temperature) if temperature else 0.3
        except ValueError:
            raise ValueError(f"{ENV_TEMPERATURE} must be a number: {temperature!r}") from None
        return cls(
            host=env.get(ENV_HOST, DEFAULT_HOST),
            model=env.get(ENV_MODEL, DEFAULT_MODEL),
            temperature=temperature_value,
        )
