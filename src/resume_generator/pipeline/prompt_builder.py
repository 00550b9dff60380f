"""Prompt Builder - fills the resume prompt template from a ResumeRequest."""

from __future__ import annotations

import re
from enum import Enum
from typing import Mapping

from resume_generator.errors import PromptTemplateError
from resume_generator.models.request import ResumeRequest

NOT_PROVIDED = "Not provided"
NO_WORK_EXPERIENCE = (
    "No work experience provided. Do not invent any roles, companies or dates; "
    "return an empty workExperience array."
)
NO_EDUCATION = "No specific education provided"

SYSTEM_PROMPT = """\
You are a professional resume writer and ATS optimization specialist. You write \
concise, quantified, keyword-aligned resumes that pass applicant tracking systems.

Core rules:
1. Use ONLY the candidate information you are given. Never fabricate work \
experience, companies, roles or dates.
2. Every achievement states an action, a specific result and its business impact.
3. Mirror the terminology of the job description where the candidate's \
background supports it.
4. Keep a confident, professional tone.
5. Respond with a single JSON object and nothing else."""


class PromptSlot(str, Enum):
    """Named placeholders a resume prompt template may reference."""

    COMPANY_NAME = "companyName"
    JOB_TITLE = "jobTitle"
    JOB_DESCRIPTION = "jobDescription"
    USER_NAME = "userName"
    EMAIL = "email"
    PHONE_NUMBER = "phoneNumber"
    LINKEDIN_URL = "linkedinUrl"
    WORK_EXPERIENCE = "workExperience"
    EDUCATION = "education"


_PLACEHOLDER = re.compile(r"\{([A-Za-z_]\w*)\}")


class PromptTemplate:
    """Prompt text with ``{slot}`` placeholders bound to ``PromptSlot`` names."""

    def __init__(self, text: str):
        names = _PLACEHOLDER.findall(text)
        known = {s.value for s in PromptSlot}
        unknown = sorted(set(names) - known)
        if unknown:
            raise PromptTemplateError(f"Unknown template slots: {', '.join(unknown)}")
        self.text = text
        self.slots = frozenset(PromptSlot(n) for n in names)

    def render(self, values: Mapping[PromptSlot, str]) -> str:
        """Substitute every slot. Fails if a referenced slot has no value."""
        missing = sorted(s.value for s in self.slots if s not in values)
        if missing:
            raise PromptTemplateError(f"No value supplied for slots: {', '.join(missing)}")
        # Single pass so substituted text is never scanned for placeholders again
        return _PLACEHOLDER.sub(lambda m: values[PromptSlot(m.group(1))], self.text)


RESUME_PROMPT = PromptTemplate("""\
Create an ATS-optimized resume that aligns the candidate with the target position.

## TARGET POSITION
**Company:** {companyName}
**Role:** {jobTitle}
**Job Description:** {jobDescription}

## CANDIDATE PROFILE
**Name:** {userName}
**Email:** {email}
**Phone:** {phoneNumber}
**LinkedIn:** {linkedinUrl}

**Work Experience:**
{workExperience}

**Education:**
{education}

## INSTRUCTIONS
- Professional summary: 4 sentences covering experience level and core expertise, \
key skills with quantified results, collaboration and leadership, and the value \
the candidate brings to this role.
- Work experience: one entry per role listed above, in the same order. For each, \
write a 2-3 sentence description of scope and technologies and 4-5 achievements \
(action verb + specific action + quantified result + business impact).
- Skills: 15-20 skills, most relevant to the job description first, no duplicates.

## OUTPUT FORMAT
Return ONLY this JSON object:
{
  "professionalSummary": "string",
  "workExperience": [
    {
      "role": "string (EXACT role from the candidate's work experience)",
      "companyName": "string (EXACT company from the candidate's work experience)",
      "startDate": "string (EXACT start date from the candidate's work experience)",
      "endDate": "string (EXACT end date from the candidate's work experience)",
      "description": "string",
      "achievements": ["string", "string", "string", "string"]
    }
  ],
  "skills": ["string"]
}

Use ONLY the work experience listed above. Do NOT add roles, companies or dates. \
Do not include analysis or commentary outside the JSON.""")


def format_work_experience(request: ResumeRequest) -> str:
    if not request.work_experience:
        return NO_WORK_EXPERIENCE
    return "\n".join(
        f"{e.role} at {e.company_name} ({e.start_date} - {e.end_date})"
        for e in request.work_experience
    )


def format_education(request: ResumeRequest) -> str:
    if not request.education:
        return NO_EDUCATION
    return "\n".join(
        f"{e.diploma} from {e.university} ({e.start_date} - {e.end_date})"
        for e in request.education
    )


def slot_values(request: ResumeRequest) -> dict[PromptSlot, str]:
    """Map every prompt slot to its value for this request."""
    return {
        PromptSlot.COMPANY_NAME: request.target.company_name,
        PromptSlot.JOB_TITLE: request.target.job_title,
        PromptSlot.JOB_DESCRIPTION: request.target.job_description,
        PromptSlot.USER_NAME: request.user_name,
        PromptSlot.EMAIL: request.email,
        PromptSlot.PHONE_NUMBER: request.phone_number,
        PromptSlot.LINKEDIN_URL: request.linkedin_url or NOT_PROVIDED,
        PromptSlot.WORK_EXPERIENCE: format_work_experience(request),
        PromptSlot.EDUCATION: format_education(request),
    }


def build_prompts(
    request: ResumeRequest,
    template: PromptTemplate = RESUME_PROMPT,
    system_prompt: str = SYSTEM_PROMPT,
) -> tuple[str, str]:
    """Return ``(system_prompt, user_prompt)`` for one generation call."""
    return system_prompt, template.render(slot_values(request))
