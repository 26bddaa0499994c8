"""
Unit Tests for WeldAdvisor

The Ollama client is replaced by a MagicMock; no server is contacted.
"""

from unittest.mock import MagicMock

import pytest

from weld_toolkit.advisory import AdvisoryConfig, WeldAdvisor, build_prompt
from weld_toolkit.advisory.client import (
    CONNECTION_ERROR_MESSAGE,
    MISSING_CONFIG_MESSAGE,
    SYSTEM_PROMPT,
    UNAVAILABLE_MESSAGE,
)
from weld_toolkit.core.calculator import calculate


@pytest.fixture
def reference_result(reference_params):
    return calculate(reference_params)


@pytest.fixture
def fake_client():
    client = MagicMock()
    client.chat.return_value = {"message": {"role": "assistant", "content": "**Suitable** for S355."}}
    return client


class TestBuildPrompt:
    def test_build_prompt_when_reference_pass_then_values_formatted(self, reference_params, reference_result):
        prompt = build_prompt(reference_params, reference_result)

        assert "MIG/MAG (131/135)" in prompt
        assert "Voltage: 20 V" in prompt
        assert "Current: 120 A" in prompt
        assert "Length: 150 mm" in prompt
        assert "Time: 10.0 s" in prompt
        assert "Heat input: 0.128 kJ/mm" in prompt
        assert "Travel speed: 90.0 cm/min" in prompt


class TestWeldAdvisor:
    def test_analyze_when_reply_then_returned_verbatim(self, fake_client, reference_params, reference_result):
        advisor = WeldAdvisor(AdvisoryConfig(model="llama3.1", temperature=0.2), client=fake_client)

        assert advisor.analyze(reference_params, reference_result) == "**Suitable** for S355."

        kwargs = fake_client.chat.call_args.kwargs
        assert kwargs["model"] == "llama3.1"
        assert kwargs["options"] == {"temperature": 0.2}
        assert kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert kwargs["messages"][1]["content"] == build_prompt(reference_params, reference_result)

    def test_analyze_when_client_raises_then_connection_message(
        self, fake_client, reference_params, reference_result
    ):
        fake_client.chat.side_effect = ConnectionError("refused")
        advisor = WeldAdvisor(AdvisoryConfig(), client=fake_client)

        assert advisor.analyze(reference_params, reference_result) == CONNECTION_ERROR_MESSAGE

    def test_analyze_when_reply_malformed_then_connection_message(
        self, fake_client, reference_params, reference_result
    ):
        fake_client.chat.return_value = {}
        advisor = WeldAdvisor(AdvisoryConfig(), client=fake_client)

        assert advisor.analyze(reference_params, reference_result) == CONNECTION_ERROR_MESSAGE

    @pytest.mark.parametrize("content", ["", "   \n", None])
    def test_analyze_when_reply_empty_then_unavailable(
        self, fake_client, reference_params, reference_result, content
    ):
        fake_client.chat.return_value = {"message": {"content": content}}
        advisor = WeldAdvisor(AdvisoryConfig(), client=fake_client)

        assert advisor.analyze(reference_params, reference_result) == UNAVAILABLE_MESSAGE

    def test_analyze_when_not_configured_then_no_request(self, fake_client, reference_params, reference_result):
        advisor = WeldAdvisor(AdvisoryConfig(model=""), client=fake_client)

        assert advisor.analyze(reference_params, reference_result) == MISSING_CONFIG_MESSAGE
        fake_client.chat.assert_not_called()

    def test_analyze_when_failed_then_error_logged(
        self, fake_client, reference_params, reference_result, caplog
    ):
        fake_client.chat.side_effect = RuntimeError("boom")
        advisor = WeldAdvisor(AdvisoryConfig(), client=fake_client)

        with caplog.at_level("ERROR", logger="weld_toolkit.advisory.client"):
            advisor.analyze(reference_params, reference_result)

        assert "Advisory request failed" in caplog.text

    def test_get_client_when_no_client_injected_then_ollama_client_built(self, monkeypatch):
        created = {}

        class RecordingClient:
            def __init__(self, host=None, **kwargs):
                created["host"] = host
                created.update(kwargs)

        monkeypatch.setattr("weld_toolkit.advisory.client.Client", RecordingClient)
        advisor = WeldAdvisor(AdvisoryConfig(host="http://ollama.lan:11434", timeout=5))

        client = advisor._get_client()

        assert isinstance(client, RecordingClient)
        assert advisor._get_client() is client
        assert created == {"host": "http://ollama.lan:11434", "timeout": 5}
