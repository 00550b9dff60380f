"""Pydantic models for validated model output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratedWorkExperience(BaseModel):
    role: str
    company_name: str = Field(alias="companyName")
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    description: str
    achievements: list[str]

    model_config = {"populate_by_name": True}


class GeneratedResumeContent(BaseModel):
    professional_summary: str = Field(alias="professionalSummary")
    work_experience: list[GeneratedWorkExperience] = Field(alias="workExperience")
    skills: list[str]

    model_config = {"populate_by_name": True}
