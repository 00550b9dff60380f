"""Response Validator - turns raw model output into GeneratedResumeContent.

The model is untrusted with respect to structure: it may fence its JSON,
nest the payload under a legacy wrapper key, or drop fields. This module is
the only gate between the model and the renderer, so every rule fails loudly
with the offending field path instead of repairing the payload.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from resume_generator.errors import ContractViolationError, MalformedResponseError
from resume_generator.models.content import GeneratedResumeContent
from resume_generator.models.request import ResumeRequest
from resume_generator.utils.json_parser import parse_json

logger = logging.getLogger(__name__)

UnwrapRule = Callable[[Any], Any]

REQUIRED_FIELDS = ("professionalSummary", "workExperience", "skills")
REQUIRED_ENTRY_TEXT = ("role", "companyName", "description")
ENTRY_DATES = ("startDate", "endDate")

# (generated field, request attribute) pairs that must round-trip verbatim
FIDELITY_FIELDS = (
    ("role", "role"),
    ("companyName", "company_name"),
    ("startDate", "start_date"),
    ("endDate", "end_date"),
)


def unwrap_key(key: str) -> UnwrapRule:
    """Build a rule that replaces ``{key: payload, ...}`` with ``payload``."""

    def rule(value: Any) -> Any:
        if isinstance(value, dict) and isinstance(value.get(key), dict):
            return value[key]
        return value

    rule.__name__ = f"unwrap_{key}"
    return rule


UNWRAP_RULES: tuple[UnwrapRule, ...] = (
    unwrap_key("final_resume"),
    unwrap_key("phase8_final_resume"),
)


def apply_unwrap_rules(value: Any, rules: tuple[UnwrapRule, ...] = UNWRAP_RULES) -> Any:
    for rule in rules:
        value = rule(value)
    return value


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _violation(message: str, field: str, index: int | None = None) -> ContractViolationError:
    return ContractViolationError(f"{field}: {message}", field=field, index=index)


def check_contract(data: Any) -> None:
    """Raise ContractViolationError unless ``data`` has the resume shape."""
    if not isinstance(data, dict):
        raise _violation(f"expected a JSON object, got {type(data).__name__}", "<root>")

    for name in REQUIRED_FIELDS:
        if name not in data or data[name] is None:
            raise _violation("required field is missing", name)

    if not _is_text(data["professionalSummary"]):
        raise _violation("must be a non-empty string", "professionalSummary")

    experience = data["workExperience"]
    if not isinstance(experience, list):
        raise _violation("must be an array", "workExperience")
    for i, entry in enumerate(experience):
        _check_entry(entry, i)

    skills = data["skills"]
    if not isinstance(skills, list):
        raise _violation("must be an array", "skills")
    seen: set[str] = set()
    for i, skill in enumerate(skills):
        if not _is_text(skill):
            raise _violation("must be a non-empty string", f"skills[{i}]", i)
        if skill in seen:
            raise _violation(f"duplicate skill {skill!r}", f"skills[{i}]", i)
        seen.add(skill)


def _check_entry(entry: Any, i: int) -> None:
    path = f"workExperience[{i}]"
    if not isinstance(entry, dict):
        raise _violation("must be an object", path, i)
    for name in REQUIRED_ENTRY_TEXT:
        if not _is_text(entry.get(name)):
            raise _violation("must be a non-empty string", f"{path}.{name}", i)
    for name in ENTRY_DATES:
        if not isinstance(entry.get(name), str):
            raise _violation("must be a string", f"{path}.{name}", i)

    achievements = entry.get("achievements")
    if not isinstance(achievements, list):
        raise _violation("must be an array", f"{path}.achievements", i)
    if not achievements:
        raise _violation("must contain at least one achievement", f"{path}.achievements", i)
    for j, achievement in enumerate(achievements):
        if not _is_text(achievement):
            raise _violation("must be a non-empty string", f"{path}.achievements[{j}]", i)


def check_fidelity(data: dict, request: ResumeRequest) -> None:
    """Generated work entries must be exactly the request's entries, in order."""
    generated = data["workExperience"]
    expected = request.work_experience
    if len(generated) != len(expected):
        raise _violation(
            f"expected {len(expected)} entries matching the input, got {len(generated)}",
            "workExperience",
        )
    for i, (entry, source) in enumerate(zip(generated, expected)):
        for field, attr in FIDELITY_FIELDS:
            want = getattr(source, attr)
            if entry[field] != want:
                raise _violation(
                    f"expected {want!r}, got {entry[field]!r}",
                    f"workExperience[{i}].{field}",
                    i,
                )


def validate_response(raw_text: str, request: ResumeRequest | None = None) -> GeneratedResumeContent:
    """Parse and validate raw model output.

    Args:
        raw_text: The completion text, optionally wrapped in a ```json fence.
        request: When given, work entries must mirror ``request.work_experience``
            one-to-one (role, company and dates verbatim).

    Raises:
        MalformedResponseError: the text is not JSON after fence stripping.
        ContractViolationError: the JSON does not match the resume contract.
    """
    try:
        parsed = parse_json(raw_text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            f"Model response is not valid JSON: {exc}", raw_text=raw_text
        ) from exc

    data = apply_unwrap_rules(parsed)
    check_contract(data)
    if request is not None:
        check_fidelity(data, request)

    logger.debug(
        "Validated response: %d work entries, %d skills",
        len(data["workExperience"]),
        len(data["skills"]),
    )
    return GeneratedResumeContent.model_validate(data)
