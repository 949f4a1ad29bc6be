"""Tests for LLMClient (Claude API wrapper)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from career_optimizer.clients.llm_client import LLMClient, LLMResponse


def _make_api_message(text: str, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = [MagicMock(text=text)]
    return message


def _client_returning(mock_cls, create: AsyncMock) -> MagicMock:
    mock_client = MagicMock()
    mock_client.messages.create = create
    mock_cls.return_value = mock_client
    return mock_client


class TestLLMClientInit:
    def test_init_default_disables_sdk_retries(self):
        """Creates AsyncAnthropic with SDK retries off when no args supplied."""
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient()
            mock_cls.assert_called_once_with(max_retries=0)

    def test_init_with_api_key_passes_key(self):
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key")
            mock_cls.assert_called_once_with(max_retries=0, api_key="test-key")

    def test_init_with_both_params_passes_both(self):
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key", timeout=30.0)
            mock_cls.assert_called_once_with(max_retries=0, api_key="test-key", timeout=30.0)


class TestLLMClientGenerate:
    async def test_generate_returns_llm_response(self):
        """generate() wraps API response fields into an LLMResponse dataclass."""
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                AsyncMock(return_value=_make_api_message("hello world", 100, 50)),
            )
            llm = LLMClient()
            result = await llm.generate("say hello")

        assert isinstance(result, LLMResponse)
        assert result.text == "hello world"
        assert result.input_tokens == 100
        assert result.output_tokens == 50

    async def test_system_prompt_is_passed(self):
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            create = AsyncMock(return_value=_make_api_message("{}"))
            _client_returning(mock_cls, create)
            llm = LLMClient()
            await llm.generate("prompt", system="be terse", model="m", max_tokens=10)

        kwargs = create.call_args.kwargs
        assert kwargs["system"] == "be terse"
        assert kwargs["model"] == "m"
        assert kwargs["max_tokens"] == 10
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    async def test_empty_system_prompt_is_omitted(self):
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            create = AsyncMock(return_value=_make_api_message("{}"))
            _client_returning(mock_cls, create)
            await LLMClient().generate("prompt")

        assert "system" not in create.call_args.kwargs

    async def test_failed_call_is_not_resent(self):
        """A failing call is made exactly once and the error propagates."""
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            create = AsyncMock(side_effect=ConnectionError("down"))
            _client_returning(mock_cls, create)
            llm = LLMClient()
            with pytest.raises(ConnectionError):
                await llm.generate("prompt")

        assert create.await_count == 1


class TestLLMClientGenerateJson:
    async def test_generate_json_parses_valid_json_text(self):
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                AsyncMock(return_value=_make_api_message('{"key": "value", "count": 3}')),
            )
            result = await LLMClient().generate_json("give me json")

        assert result == {"key": "value", "count": 3}

    async def test_generate_json_raises_on_non_json_response(self):
        with patch("career_optimizer.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                AsyncMock(return_value=_make_api_message("Sorry, I can't help with that.")),
            )
            with pytest.raises(ValueError, match="Could not extract JSON"):
                await LLMClient().generate_json("give me json")
