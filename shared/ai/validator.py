from typing import Any, Dict, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from shared.schemas.summary import (
    FieldViolation,
    SummaryRequest,
    JOB_DESCRIPTION_MIN_LENGTH,
    TARGET_KEYWORDS_MIN_LENGTH,
)
from .errors import ValidationError

# Attribute and wire spellings both map to the wire name
_WIRE_NAMES = {
    "job_description": "jobDescription",
    "jobDescription": "jobDescription",
    "target_keywords": "targetKeywords",
    "targetKeywords": "targetKeywords",
}

_LABELS = {
    "jobDescription": "Job description",
    "targetKeywords": "Target keywords",
}

_MIN_LENGTHS = {
    "jobDescription": JOB_DESCRIPTION_MIN_LENGTH,
    "targetKeywords": TARGET_KEYWORDS_MIN_LENGTH,
}

_MIN_LENGTH_MESSAGES = {
    "jobDescription": (
        f"Please provide a more detailed job description "
        f"(min {JOB_DESCRIPTION_MIN_LENGTH} characters)."
    ),
    "targetKeywords": (
        f"Please enter at least one keyword "
        f"(min {TARGET_KEYWORDS_MIN_LENGTH} characters)."
    ),
}


def _to_violation(error: Dict[str, Any]) -> FieldViolation:
    loc = error.get("loc") or ("request",)
    field = _WIRE_NAMES.get(str(loc[0]), str(loc[0]))
    label = _LABELS.get(field, field)
    error_type = error.get("type")

    if error_type == "string_too_short":
        value = error.get("input")
        return FieldViolation(
            field=field,
            constraint="min_length",
            message=_MIN_LENGTH_MESSAGES.get(field, error.get("msg", "")),
            min_length=_MIN_LENGTHS.get(field),
            actual_length=len(value) if isinstance(value, str) else None,
        )
    if error_type == "missing":
        return FieldViolation(
            field=field,
            constraint="required",
            message=f"{label} is required.",
            min_length=_MIN_LENGTHS.get(field),
        )
    return FieldViolation(
        field=field,
        constraint="type",
        message=f"{label} must be text.",
    )


def validate(request: Union[SummaryRequest, Mapping[str, Any]]) -> SummaryRequest:
    """
    Check a summary request before any call to the model is made.

    Accepts an existing SummaryRequest or a mapping keyed by either the
    wire names (jobDescription, targetKeywords) or the attribute names.
    Values are passed through unchanged; nothing is trimmed.

    Raises:
        ValidationError: listing every field that fails its constraint
    """
    if isinstance(request, SummaryRequest):
        return request

    if not isinstance(request, Mapping):
        raise ValidationError([
            FieldViolation(
                field="request",
                constraint="type",
                message="Summary request must be an object with jobDescription and targetKeywords.",
            )
        ])

    try:
        return SummaryRequest.model_validate(dict(request))
    except PydanticValidationError as e:
        violations: List[FieldViolation] = []
        seen = set()
        for error in e.errors():
            violation = _to_violation(error)
            if violation.field in seen:
                continue
            seen.add(violation.field)
            violations.append(violation)
        raise ValidationError(violations) from None
