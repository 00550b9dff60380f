"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 8192
    temperature: float = 0.7
    top_p: float | None = 0.9
    timeout: float | None = None

    def __post_init__(self):
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be >= 1, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be between 0 and 1, got {self.temperature}")
        if self.top_p is not None and not 0.0 < self.top_p < 1.0:
            raise ValueError(f"top_p must be between 0 and 1 (exclusive), got {self.top_p}")
        if self.timeout is not None and self.timeout < 1:
            raise ValueError(f"timeout must be >= 1 second, got {self.timeout}")


@dataclass(frozen=True)
class PDFConfig:
    viewport_width: int = 1200
    viewport_height: int = 800
    page_format: str = "A4"
    headless: bool = True
    navigation_timeout_ms: int = 0  # 0 disables Playwright's timeout

    def __post_init__(self):
        if self.viewport_width < 1 or self.viewport_height < 1:
            raise ValueError(
                f"viewport must be positive, got {self.viewport_width}x{self.viewport_height}"
            )
        if self.navigation_timeout_ms < 0:
            raise ValueError(
                f"navigation_timeout_ms must be >= 0, got {self.navigation_timeout_ms}"
            )


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    pdf: PDFConfig = field(default_factory=PDFConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    load_dotenv()

    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        pdf=PDFConfig(**raw.get("pdf", {})),
    )
