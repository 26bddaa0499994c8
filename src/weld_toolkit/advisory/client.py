"""
Module: advisory.client

Purpose:
    Ask a local LLM for a short technical comment on the current weld
    parameters. The reply is opaque text: it is shown verbatim and never
    parsed. Every failure becomes an explanatory string; nothing raises
    past analyze().

Key Classes:
    - WeldAdvisor

Key Functions:
    - build_prompt(params, result)

Dependencies:
    - ollama
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ollama import Client

from weld_toolkit.core.models.params import WeldingParams
from weld_toolkit.core.models.results import (
    CalculationResult,
    format_fixed,
    format_heat_input,
    format_time,
)

from .config import AdvisoryConfig

logger = logging.getLogger(__name__)

MISSING_CONFIG_MESSAGE = (
    "Error: advisory model not configured. Set WELD_TOOLKIT_OLLAMA_MODEL "
    "and WELD_TOOLKIT_OLLAMA_HOST."
)
CONNECTION_ERROR_MESSAGE = (
    "Error while contacting the AI service. Check that the Ollama server is running."
)
UNAVAILABLE_MESSAGE = "Analysis unavailable."

SYSTEM_PROMPT = "Act as a certified welding engineer (IWE). Answer in Markdown."


def build_prompt(params: WeldingParams, result: CalculationResult) -> str:
    """User prompt carrying the parameters and derived values."""
    return f"""Analyse these welding parameters:

        Process: {params.process.label}
        Voltage: {params.voltage} V
        Current: {params.current} A
        Length: {params.length} mm
        Time: {format_time(params.time)} s

        RESULTS:
        Heat input: {format_heat_input(result.heat_input)} kJ/mm
        Travel speed: {format_fixed(result.travel_speed_cm_per_min, 1)} cm/min

        Give a concise technical analysis (max 200 words):
        1. Suitability for carbon steel (e.g. S355).
        2. Arc stability.
        3. One safety tip."""


class WeldAdvisor:
    """
    Advisory collaborator backed by an Ollama chat model.

    Example:
        >>> advisor = WeldAdvisor(AdvisoryConfig.from_env())
        >>> text = advisor.analyze(session.params, session.result)
    """

    def __init__(self, config: Optional[AdvisoryConfig] = None, client: Optional[Any] = None) -> None:
        self.config = config or AdvisoryConfig()
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = Client(host=self.config.host, timeout=self.config.timeout)
        return self._client

    def analyze(self, params: WeldingParams, result: CalculationResult) -> str:
        """
        Request an analysis for a parameter set and its result.

        Returns:
            The model's reply, or a user-facing failure message
        """
        if not self.config.is_configured:
            return MISSING_CONFIG_MESSAGE

        messages: List[Dict[str, str]] = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(params, result)},
        ]
        logger.info(f"Requesting weld analysis from model '{self.config.model}'")
        try:
            response = self._get_client().chat(
                model=self.config.model,
                messages=messages,
                options={"temperature": self.config.temperature},
            )
            content = response["message"]["content"]
        except Exception:
            logger.exception("Advisory request failed")
            return CONNECTION_ERROR_MESSAGE

        if not content or not content.strip():
            return UNAVAILABLE_MESSAGE
        return content
