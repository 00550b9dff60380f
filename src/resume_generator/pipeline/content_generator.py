"""Content Generator - one text-generation call with fixed parameters."""

from __future__ import annotations

import logging

from resume_generator.clients.llm_client import LLMResponse, TextGenerationClient
from resume_generator.config import LLMConfig
from resume_generator.errors import GenerationBackendError

logger = logging.getLogger(__name__)


class ContentGenerator:
    def __init__(self, llm: TextGenerationClient, config: LLMConfig | None = None):
        self.llm = llm
        self.config = config or LLMConfig()

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Return the raw completion text. Never retries.

        Raises:
            GenerationBackendError: the backend failed or returned no text.
        """
        response = await self.generate_response(system_prompt, user_prompt)
        return response.text

    async def generate_response(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        """Like ``generate`` but keeps the token usage of the call.

        ``LLMClient`` already rejects empty completions, but any
        ``TextGenerationClient`` can be injected, so the check is repeated here.
        """
        cfg = self.config
        logger.info("Requesting resume content from %s", cfg.model)
        response = await self.llm.generate(
            prompt=user_prompt,
            system=system_prompt,
            model=cfg.model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
            top_p=cfg.top_p,
        )
        if not response.text or not response.text.strip():
            raise GenerationBackendError("Text generation returned an empty completion")
        return response
