from .summary import SummaryRequest, SummaryResponse, FieldViolation
from .portfolio import TimelineEvent, TimelineEntry, Profile, ProfileLinks, Portfolio

__all__ = [
    "SummaryRequest",
    "SummaryResponse",
    "FieldViolation",
    "TimelineEvent",
    "TimelineEntry",
    "Profile",
    "ProfileLinks",
    "Portfolio",
]
