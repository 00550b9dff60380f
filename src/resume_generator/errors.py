"""Exception types raised by the generation pipeline."""

from __future__ import annotations


class ResumeGenerationError(Exception):
    """Base class for every failure surfaced by the pipeline."""


class GenerationBackendError(ResumeGenerationError):
    """The text-generation call failed or returned no text."""


class MalformedResponseError(ResumeGenerationError):
    """Model output could not be parsed as JSON."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


class ContractViolationError(ResumeGenerationError):
    """Model output parsed but does not match the resume contract."""

    def __init__(self, message: str, field: str, index: int | None = None):
        super().__init__(message)
        self.field = field
        self.index = index


class RenderingError(ResumeGenerationError):
    """Headless browser launch, navigation or PDF capture failed."""


class PromptTemplateError(ValueError):
    """A prompt template references an unknown or unsupplied slot."""
