"""Lifecycle states reported while a resume is generated."""

from __future__ import annotations

from enum import Enum


class GenerationStatus(str, Enum):
    PENDING = "pending"
    GENERATING = "generating"
    COMPLETED = "completed"
    FAILED = "failed"
