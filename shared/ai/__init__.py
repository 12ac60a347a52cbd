from .client import SummaryModelClient, OpenAISummaryClient
from .errors import SummaryError, ValidationError, GenerationError
from .summary_generator import (
    generate_summary,
    parse_summary_output,
    build_messages,
    SummaryJob,
    SUMMARY_SYSTEM_PROMPT,
)
from .validator import validate

__all__ = [
    "SummaryModelClient",
    "OpenAISummaryClient",
    "SummaryError",
    "ValidationError",
    "GenerationError",
    "generate_summary",
    "parse_summary_output",
    "build_messages",
    "SummaryJob",
    "SUMMARY_SYSTEM_PROMPT",
    "validate",
]
