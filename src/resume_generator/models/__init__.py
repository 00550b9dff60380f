"""Data models for the resume generation pipeline."""

from resume_generator.models.content import GeneratedResumeContent, GeneratedWorkExperience
from resume_generator.models.request import (
    PRESENT,
    EducationEntry,
    ResumeRequest,
    TargetRole,
    WorkExperienceEntry,
)
from resume_generator.models.status import GenerationStatus

__all__ = [
    "PRESENT",
    "EducationEntry",
    "GeneratedResumeContent",
    "GeneratedWorkExperience",
    "GenerationStatus",
    "ResumeRequest",
    "TargetRole",
    "WorkExperienceEntry",
]
