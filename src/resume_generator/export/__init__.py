"""HTML and PDF export for generated resumes."""
from resume_generator.export.html_renderer import render_html
from resume_generator.export.pdf_renderer import BrowserEngine, PlaywrightBrowserEngine

__all__ = ["render_html", "BrowserEngine", "PlaywrightBrowserEngine"]
