"""Tests for LLMClient (Claude API wrapper)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest

from resume_generator.clients.llm_client import LLMClient, LLMResponse
from resume_generator.errors import GenerationBackendError


def _make_api_message(text: str, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = [MagicMock(text=text)]
    return message


def _client_returning(mock_cls, **create_kwargs) -> MagicMock:
    mock_client = MagicMock()
    mock_client.messages.create = AsyncMock(**create_kwargs)
    mock_cls.return_value = mock_client
    return mock_client


class TestLLMClientInit:
    def test_init_default_disables_sdk_retries(self):
        """Creates AsyncAnthropic with retries off and nothing else."""
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient()
            mock_cls.assert_called_once_with(max_retries=0)

    def test_init_with_api_key_passes_key(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key")
            mock_cls.assert_called_once_with(max_retries=0, api_key="test-key")

    def test_init_with_timeout_passes_timeout(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(timeout=30.0)
            mock_cls.assert_called_once_with(max_retries=0, timeout=30.0)


class TestLLMClientGenerate:
    async def test_generate_returns_llm_response(self):
        """generate() wraps API response fields into an LLMResponse dataclass."""
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                return_value=_make_api_message('{"skills": []}', input_tokens=100, output_tokens=50),
            )
            llm = LLMClient()
            result = await llm.generate("user prompt", system="system prompt")

        assert isinstance(result, LLMResponse)
        assert result.text == '{"skills": []}'
        assert result.input_tokens == 100
        assert result.output_tokens == 50

    async def test_generate_sends_generation_parameters(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = _client_returning(mock_cls, return_value=_make_api_message("ok"))
            llm = LLMClient()
            await llm.generate(
                "user prompt",
                system="system prompt",
                model="claude-haiku-4-5-20251001",
                temperature=0.7,
                max_tokens=4000,
                top_p=0.9,
            )

        mock_client.messages.create.assert_awaited_once_with(
            model="claude-haiku-4-5-20251001",
            max_tokens=4000,
            temperature=0.7,
            messages=[{"role": "user", "content": "user prompt"}],
            system="system prompt",
            top_p=0.9,
        )

    async def test_generate_omits_unset_top_p_and_system(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = _client_returning(mock_cls, return_value=_make_api_message("ok"))
            await LLMClient().generate("prompt")

        _, kwargs = mock_client.messages.create.call_args
        assert "top_p" not in kwargs
        assert "system" not in kwargs

    async def test_api_error_becomes_backend_error(self):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = _client_returning(
                mock_cls, side_effect=anthropic.APIConnectionError(request=request)
            )
            llm = LLMClient()
            with pytest.raises(GenerationBackendError) as exc_info:
                await llm.generate("prompt")

        assert isinstance(exc_info.value.__cause__, anthropic.APIConnectionError)
        mock_client.messages.create.assert_awaited_once()

    async def test_missing_credentials_becomes_backend_error(self):
        """The SDK reports unresolved auth as TypeError at request time."""
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                side_effect=TypeError(
                    "Could not resolve authentication method. Expected either api_key "
                    "or auth_token to be set."
                ),
            )
            with pytest.raises(GenerationBackendError, match="authentication") as exc_info:
                await LLMClient().generate("hi", system="sys")

        assert isinstance(exc_info.value.__cause__, TypeError)

    async def test_rejected_parameter_becomes_backend_error(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                side_effect=TypeError(
                    "AsyncMessages.create() got an unexpected keyword argument 'temperature'"
                ),
            )
            with pytest.raises(GenerationBackendError, match="temperature"):
                await LLMClient().generate("prompt", temperature=0.7)

    async def test_sdk_client_error_becomes_backend_error(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, side_effect=anthropic.AnthropicError("bad state"))
            with pytest.raises(GenerationBackendError, match="bad state"):
                await LLMClient().generate("prompt")

    async def test_non_text_block_is_empty_completion(self):
        message = _make_api_message("")
        message.content = [SimpleNamespace(type="tool_use", id="toolu_01", name="x", input={})]
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, return_value=message)
            with pytest.raises(GenerationBackendError, match="empty"):
                await LLMClient().generate("prompt")

    async def test_text_after_non_text_block_is_used(self):
        message = _make_api_message("")
        message.content = [
            SimpleNamespace(type="thinking", thinking="..."),
            SimpleNamespace(type="text", text='{"skills": ["SQL"]}'),
        ]
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, return_value=message)
            result = await LLMClient().generate("prompt")

        assert result.text == '{"skills": ["SQL"]}'

    async def test_empty_completion_raises(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, return_value=_make_api_message("   "))
            with pytest.raises(GenerationBackendError, match="empty"):
                await LLMClient().generate("prompt")

    async def test_no_content_blocks_raises(self):
        message = _make_api_message("")
        message.content = []
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, return_value=message)
            with pytest.raises(GenerationBackendError):
                await LLMClient().generate("prompt")

    async def test_token_log_stores_model_and_counts(self):
        """_token_log entries are (model, input_tokens, output_tokens) tuples."""
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls, return_value=_make_api_message("resp", input_tokens=20, output_tokens=8)
            )
            llm = LLMClient()
            await llm.generate("prompt", model="claude-haiku-4-5-20251001")

        model, inp, out = llm._token_log[0]
        assert model == "claude-haiku-4-5-20251001"
        assert inp == 20
        assert out == 8


class TestLLMClientTokenSummary:
    def test_get_token_summary_returns_correct_totals(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic"):
            llm = LLMClient()
            llm._token_log = [
                ("claude-haiku-4-5-20251001", 100, 50),
                ("claude-haiku-4-5-20251001", 200, 80),
            ]

        summary = llm.get_token_summary()

        assert summary["input"] == 300
        assert summary["output"] == 130
        assert len(summary["calls"]) == 2

    def test_get_token_summary_clears_log_after_return(self):
        with patch("resume_generator.clients.llm_client.anthropic.AsyncAnthropic"):
            llm = LLMClient()
            llm._token_log = [("claude-haiku-4-5-20251001", 50, 25)]

        llm.get_token_summary()
        second_summary = llm.get_token_summary()

        assert second_summary["input"] == 0
        assert second_summary["calls"] == []
