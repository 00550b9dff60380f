"""PDF Pipeline - rasterizes resume HTML with headless Chromium."""

from __future__ import annotations

import logging
from typing import Protocol

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from resume_generator.config import PDFConfig
from resume_generator.errors import RenderingError

logger = logging.getLogger(__name__)

# Page margins live in the document's own CSS
ZERO_MARGINS = {"top": "0mm", "right": "0mm", "bottom": "0mm", "left": "0mm"}


class BrowserEngine(Protocol):
    """Anything that can turn a self-contained HTML document into PDF bytes."""

    async def html_to_pdf(self, html: str) -> bytes: ...


class PlaywrightBrowserEngine:
    """Launches a fresh headless browser per call and always closes it."""

    def __init__(self, config: PDFConfig | None = None):
        self.config = config or PDFConfig()

    async def html_to_pdf(self, html: str) -> bytes:
        """Load ``html`` into one page and print it to an A4 PDF.

        Raises:
            RenderingError: driver start, launch, navigation or capture failed.
                The browser has already been closed when this propagates.
        """
        try:
            async with async_playwright() as p:
                pdf = await self._render(p, html)
        except PlaywrightError as exc:
            logger.error("Playwright driver failed", exc_info=True)
            raise RenderingError(f"Headless browser driver failed: {exc}") from exc

        logger.debug("Rendered PDF: %d bytes", len(pdf))
        return pdf

    async def _render(self, p, html: str) -> bytes:
        cfg = self.config
        try:
            browser = await p.chromium.launch(headless=cfg.headless)
        except PlaywrightError as exc:
            logger.error("Browser launch failed", exc_info=True)
            raise RenderingError(f"Could not launch headless browser: {exc}") from exc

        try:
            page = await browser.new_page(
                viewport={"width": cfg.viewport_width, "height": cfg.viewport_height}
            )
            await page.set_content(
                html, wait_until="networkidle", timeout=cfg.navigation_timeout_ms
            )
            return await page.pdf(
                format=cfg.page_format,
                margin=ZERO_MARGINS,
                print_background=True,
                prefer_css_page_size=True,
            )
        except PlaywrightError as exc:
            logger.error("PDF rendering failed", exc_info=True)
            raise RenderingError(f"Could not render PDF: {exc}") from exc
        finally:
            await _close_quietly(browser)


async def _close_quietly(browser) -> None:
    """Close ``browser``; a failing close is logged and never masks the result."""
    try:
        await browser.close()
    except PlaywrightError:
        logger.warning("Browser close failed", exc_info=True)
    else:
        logger.debug("Browser closed")
