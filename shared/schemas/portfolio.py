from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


TimelineEventType = Literal["work", "project"]


class TimelineEvent(BaseModel):
    """A job or project on the portfolio timeline."""

    model_config = ConfigDict(frozen=True)

    year: str = Field(..., description="Year the entry started")
    type: TimelineEventType = Field(..., description="Work history or project")
    title: str = Field(..., description="Role or project name")
    entity: str = Field(..., description="Employer or client")
    description: str = Field(..., description="What was done")
    tags: List[str] = Field(default_factory=list, description="Technologies and roles")


class TimelineEntry(TimelineEvent):
    """Timeline event as rendered, with its year-marker flag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    show_year: bool = Field(..., alias="showYear", description="Whether a year marker precedes this entry")


class ProfileLinks(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    email: Optional[str] = None


class Profile(BaseModel):
    """Hero section content."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    headline: str
    bio: str
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")
    resume_url: Optional[str] = Field(None, alias="resumeUrl")
    links: ProfileLinks = Field(default_factory=ProfileLinks)


class Portfolio(BaseModel):
    """Everything the portfolio page renders besides the summary form."""

    profile: Profile
    timeline: List[TimelineEntry] = Field(default_factory=list)
