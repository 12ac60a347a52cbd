from typing import List

from shared.schemas.summary import FieldViolation


class SummaryError(Exception):
    """Base class for resume summary failures."""


class ValidationError(SummaryError):
    """Request rejected locally; the model was never called."""

    def __init__(self, violations: List[FieldViolation]):
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"Invalid summary request: {fields}")

    @property
    def fields(self) -> List[str]:
        return [v.field for v in self.violations]


class GenerationError(SummaryError):
    """The model call failed or returned output that does not match SummaryResponse."""
