"""
Unit tests for summary request validation.

Tests cover:
- Minimum length constraints on both fields
- Pass-through of valid input
- Wire and attribute field names
- Missing and non-text values
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from shared.ai import ValidationError, validate
from shared.schemas.summary import SummaryRequest

from conftest import JOB_DESCRIPTION, TARGET_KEYWORDS


# ============================================================================
# Length Constraint Tests
# ============================================================================

class TestLengthConstraints:
    """Tests for the minimum length rules."""

    def test_short_job_description_rejected(self):
        """A 49 character job description is one short of the minimum."""
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": "x" * 49, "targetKeywords": TARGET_KEYWORDS})

        violations = exc_info.value.violations
        assert len(violations) == 1
        assert violations[0].field == "jobDescription"
        assert violations[0].constraint == "min_length"
        assert violations[0].min_length == 50
        assert violations[0].actual_length == 49

    def test_short_keywords_rejected(self):
        """Keywords under 3 characters are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": JOB_DESCRIPTION, "targetKeywords": "Go"})

        violations = exc_info.value.violations
        assert exc_info.value.fields == ["targetKeywords"]
        assert violations[0].min_length == 3
        assert violations[0].actual_length == 2

    def test_both_fields_reported(self):
        """Every offending field is listed, not just the first."""
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": "short", "targetKeywords": "Go"})

        assert exc_info.value.fields == ["jobDescription", "targetKeywords"]

    def test_messages_name_the_minimum(self):
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": "short", "targetKeywords": "Go"})

        messages = [v.message for v in exc_info.value.violations]
        assert messages == [
            "Please provide a more detailed job description (min 50 characters).",
            "Please enter at least one keyword (min 3 characters).",
        ]

    def test_exact_minimums_accepted(self):
        """Lengths equal to the minimum pass."""
        request = validate({"jobDescription": "x" * 50, "targetKeywords": "abc"})
        assert len(request.job_description) == 50
        assert request.target_keywords == "abc"

    def test_empty_strings_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": "", "targetKeywords": ""})

        assert all(v.actual_length == 0 for v in exc_info.value.violations)


# ============================================================================
# Pass-Through Tests
# ============================================================================

class TestPassThrough:
    """Valid requests come out unchanged."""

    def test_values_identical_to_input(self):
        padded = "  " + JOB_DESCRIPTION + "\n"
        request = validate({"jobDescription": padded, "targetKeywords": TARGET_KEYWORDS})

        assert request.job_description == padded
        assert request.target_keywords == TARGET_KEYWORDS

    def test_attribute_names_accepted(self):
        request = validate({"job_description": JOB_DESCRIPTION, "target_keywords": TARGET_KEYWORDS})
        assert request.job_description == JOB_DESCRIPTION

    def test_existing_request_returned_as_is(self):
        request = SummaryRequest(job_description=JOB_DESCRIPTION, target_keywords=TARGET_KEYWORDS)
        assert validate(request) is request

    def test_request_is_immutable(self):
        request = validate({"jobDescription": JOB_DESCRIPTION, "targetKeywords": TARGET_KEYWORDS})
        with pytest.raises(PydanticValidationError):
            request.target_keywords = "changed"

    def test_serializes_with_wire_names(self):
        request = validate({"jobDescription": JOB_DESCRIPTION, "targetKeywords": TARGET_KEYWORDS})
        assert request.model_dump(by_alias=True) == {
            "jobDescription": JOB_DESCRIPTION,
            "targetKeywords": TARGET_KEYWORDS,
        }


# ============================================================================
# Malformed Input Tests
# ============================================================================

class TestMalformedInput:

    def test_missing_field_is_required_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": JOB_DESCRIPTION})

        violation = exc_info.value.violations[0]
        assert violation.field == "targetKeywords"
        assert violation.constraint == "required"

    def test_bytes_value_is_type_violation(self):
        """Only real text is accepted; bytes are not decoded."""
        raw = JOB_DESCRIPTION.encode("utf-8")
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": raw, "targetKeywords": TARGET_KEYWORDS})

        violation = exc_info.value.violations[0]
        assert violation.field == "jobDescription"
        assert violation.constraint == "type"

    def test_non_text_value_is_type_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            validate({"jobDescription": JOB_DESCRIPTION, "targetKeywords": 12345})

        violation = exc_info.value.violations[0]
        assert violation.field == "targetKeywords"
        assert violation.constraint == "type"

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(["not", "an", "object"])

        assert exc_info.value.fields == ["request"]
