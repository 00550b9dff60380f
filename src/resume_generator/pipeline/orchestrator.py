"""Main pipeline orchestrator - prompt, generate, validate, render, print."""

from __future__ import annotations

import base64
import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from resume_generator.clients.llm_client import TextGenerationClient
from resume_generator.config import AppConfig
from resume_generator.errors import ContractViolationError, MalformedResponseError
from resume_generator.export.html_renderer import render_html
from resume_generator.export.pdf_renderer import BrowserEngine
from resume_generator.models.content import GeneratedResumeContent
from resume_generator.models.request import ResumeRequest
from resume_generator.models.status import GenerationStatus
from resume_generator.pipeline.content_generator import ContentGenerator
from resume_generator.pipeline.prompt_builder import build_prompts
from resume_generator.pipeline.response_validator import validate_response

logger = logging.getLogger(__name__)

StatusCallback = Callable[[GenerationStatus, str], None]


@dataclass
class GeneratedResume:
    """Artifact of one successful pipeline run."""

    pdf: bytes
    html: str
    content: GeneratedResumeContent
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)

    @property
    def pdf_base64(self) -> str:
        return base64.b64encode(self.pdf).decode("ascii")


class ResumeGenerator:
    """Runs the resume pipeline for one request at a time per call.

    Holds no per-request state, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        llm: TextGenerationClient,
        browser: BrowserEngine,
        config: AppConfig | None = None,
    ):
        self.config = config or AppConfig()
        self.content_generator = ContentGenerator(llm, self.config.llm)
        self.browser = browser

    async def generate(
        self,
        request: ResumeRequest,
        *,
        on_status: StatusCallback | None = None,
    ) -> GeneratedResume:
        """Generate resume content with the model and render it to PDF.

        Args:
            request: Candidate, history and target role.
            on_status: Optional callback(status, detail) fired with
                GENERATING, then COMPLETED or FAILED.

        Raises:
            ResumeGenerationError: any subclass, after FAILED is reported.
        """
        start = time.monotonic()

        def _notify(status: GenerationStatus, detail: str = ""):
            if on_status:
                on_status(status, detail)

        _notify(GenerationStatus.GENERATING, request.target.job_title)
        try:
            result = await self._run(request)
        except Exception as exc:
            logger.error(
                "Resume generation failed for %s (%s)",
                request.target.company_name,
                type(exc).__name__,
            )
            _notify(GenerationStatus.FAILED, str(exc))
            raise

        result.elapsed_seconds = time.monotonic() - start
        logger.info("Resume generated in %.1fs", result.elapsed_seconds)
        _notify(GenerationStatus.COMPLETED, f"{len(result.pdf)} bytes")
        return result

    async def _run(self, request: ResumeRequest) -> GeneratedResume:
        system_prompt, user_prompt = build_prompts(request)
        response = await self.content_generator.generate_response(system_prompt, user_prompt)
        content = self._validate(response.text, request)

        html = render_html(request, content)
        logger.info("Rendering PDF (%d characters of HTML)", len(html))
        pdf = await self.browser.html_to_pdf(html)

        return GeneratedResume(
            pdf=pdf,
            html=html,
            content=content,
            metadata={
                "model": self.config.llm.model,
                "input_tokens": response.input_tokens,
                "output_tokens": response.output_tokens,
            },
        )

    def render_preview(self, request: ResumeRequest, raw_text: str) -> str:
        """Validate an already-generated completion and return its HTML only."""
        return render_html(request, self._validate(raw_text, request))

    def _validate(self, raw_text: str, request: ResumeRequest) -> GeneratedResumeContent:
        try:
            return validate_response(raw_text, request)
        except MalformedResponseError as exc:
            logger.error("Unparseable model response: %s\nRaw response:\n%s", exc, exc.raw_text)
            raise
        except ContractViolationError as exc:
            logger.error("Model response violates contract at %s: %s", exc.field, exc)
            raise
