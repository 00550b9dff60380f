"""Claude API wrapper used as the text-generation backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import anthropic

from resume_generator.errors import GenerationBackendError

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


def _completion_text(message) -> str:
    """Concatenate the text blocks of a message; other block types are skipped."""
    parts = [getattr(block, "text", None) for block in message.content or []]
    return "".join(part for part in parts if isinstance(part, str))


class TextGenerationClient(Protocol):
    """Anything that turns a system + user prompt into one completion."""

    async def generate(
        self,
        prompt: str,
        system: str = "",
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        top_p: float | None = None,
    ) -> LLMResponse: ...


class LLMClient:
    """Async Claude API client. Makes exactly one request per call."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        *,
        model: str = "claude-haiku-4-5-20251001",
        temperature: float = 0.7,
        max_tokens: int = 8192,
        top_p: float | None = None,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage.

        Raises:
            GenerationBackendError: the API call failed (network, auth, quota)
                or the completion carried no text.
        """
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        if top_p is not None:
            kwargs["top_p"] = top_p

        logger.debug("LLM call: model=%s max_tokens=%d", model, max_tokens)
        try:
            message = await self.client.messages.create(**kwargs)
        # The SDK raises TypeError for missing credentials and rejected parameters
        except (anthropic.AnthropicError, TypeError) as exc:
            logger.error("LLM call failed", exc_info=True)
            raise GenerationBackendError(f"Text generation request failed: {exc}") from exc

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))

        text = _completion_text(message)
        if not text.strip():
            raise GenerationBackendError("Text generation returned an empty completion")
        return LLMResponse(
            text=text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
