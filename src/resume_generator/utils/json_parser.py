"""Utility to parse JSON from LLM responses."""

from __future__ import annotations

import json
import re

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    """Remove a Markdown code fence (```json ... ``` or ``` ... ```) around text.

    Text without fences is returned stripped of surrounding whitespace only.
    """
    text = text.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    return _CLOSING_FENCE.sub("", text, count=1)


def parse_json(text: str) -> object:
    """Parse a fenced or bare JSON document.

    Raises:
        json.JSONDecodeError: the text is not valid JSON once fences are removed.
    """
    return json.loads(strip_code_fences(text))
