"""Pydantic models for the candidate and target-role input."""

from __future__ import annotations

from pydantic import BaseModel, Field

PRESENT = "Present"  # end date of an ongoing position or programme

_FROZEN = {"populate_by_name": True, "frozen": True}


class WorkExperienceEntry(BaseModel):
    company_name: str = Field(alias="companyName")
    role: str
    start_date: str = Field(alias="startDate")  # MM/YYYY
    end_date: str = Field(alias="endDate")  # MM/YYYY or PRESENT

    model_config = _FROZEN


class EducationEntry(BaseModel):
    university: str
    diploma: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")

    model_config = _FROZEN


class TargetRole(BaseModel):
    company_name: str = Field(alias="companyName")
    job_title: str = Field(alias="jobTitle")
    job_description: str = Field(alias="jobDescription")

    model_config = _FROZEN


class ResumeRequest(BaseModel):
    """Everything one generation call needs; built per call and discarded."""

    user_name: str = Field(alias="userName")
    email: str
    phone_number: str = Field(alias="phoneNumber")
    linkedin_url: str | None = Field(default=None, alias="linkedinUrl")
    work_experience: tuple[WorkExperienceEntry, ...] = Field(
        default=(), alias="workExperience"
    )
    education: tuple[EducationEntry, ...] = ()
    target: TargetRole

    model_config = _FROZEN
