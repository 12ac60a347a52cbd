from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


JOB_DESCRIPTION_MIN_LENGTH = 50
TARGET_KEYWORDS_MIN_LENGTH = 3

ViolationConstraint = Literal["min_length", "required", "type"]


class SummaryRequest(BaseModel):
    """Job description and keywords to tailor a resume summary to."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    job_description: str = Field(
        ...,
        alias="jobDescription",
        min_length=JOB_DESCRIPTION_MIN_LENGTH,
        strict=True,
        description="The job description for the target job application",
    )
    target_keywords: str = Field(
        ...,
        alias="targetKeywords",
        min_length=TARGET_KEYWORDS_MIN_LENGTH,
        strict=True,
        description="Keywords to tailor the resume summary to (free-form text)",
    )


class SummaryResponse(BaseModel):
    """A generated resume summary."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resume_summary: str = Field(
        ...,
        alias="resumeSummary",
        min_length=1,
        description="A tailored resume summary for the job application",
    )

    @field_validator("resume_summary")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        # Checked, not stripped: the summary is returned exactly as generated
        if not value.strip():
            raise ValueError("resumeSummary must not be blank")
        return value


class FieldViolation(BaseModel):
    """One request field that failed validation."""

    field: str = Field(..., description="Wire name of the offending field")
    constraint: ViolationConstraint = Field(..., description="Constraint that was not met")
    message: str = Field(..., description="Human readable explanation")
    min_length: Optional[int] = Field(None, description="Required minimum length")
    actual_length: Optional[int] = Field(None, description="Length of the submitted value")
