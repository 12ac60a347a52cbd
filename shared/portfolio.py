"""
Static portfolio content: hero profile and work/project timeline.

Hard-coded configuration data. Nothing here is persisted or edited at runtime.
"""
from typing import Iterable, List, Optional

from shared.schemas.portfolio import (
    Portfolio,
    Profile,
    ProfileLinks,
    TimelineEntry,
    TimelineEvent,
    TimelineEventType,
)


PROFILE = Profile(
    name="Varun Miyani",
    headline="Creative Frontend Engineer & Design Enthusiast",
    bio=(
        "I craft beautiful, responsive, and user-centric web experiences. "
        "My passion lies in the intersection of clean code and thoughtful design."
    ),
    avatar_url="https://placehold.co/128x128.png",
    resume_url="/varun-miyani-resume.pdf",
    links=ProfileLinks(),
)

TIMELINE_EVENTS: List[TimelineEvent] = [
    TimelineEvent(
        year="2023",  # Jul 2023 - Present
        type="work",
        title="Senior Software Engineer",
        entity="o9 Solutions Supply Chain",
        description=(
            "Currently working on React.js, jQuery, KendoUI in frontend and Node.js (Express, Sails) "
            "in backend for creating REST API's. Responsibilities include Kendo UI migration, developing "
            "reusable components, and delivering features with accessibility and unit tests. Worked on "
            "o9 Platform using jQuery, Kendo UI, Karma, C# .net MVC."
        ),
        tags=["React.js", "jQuery", "Kendo UI", "Node.js", "Express", "Sails", "REST API", "Karma", "C# .net MVC"],
    ),
    TimelineEvent(
        year="2021",  # Sep 2021 - Jun 2023
        type="work",
        title="Senior Software Engineer (Frontend Lead)",
        entity="Namaste Credit Financial Products and Services",
        description=(
            "Led the frontend team, designed and delivered solutions, wrote technical specifications for "
            "every PRD, managed Git repository and JIRA tasks, developed secure and reusable React "
            "components, handled frontend and backend deployments (AWS), and provided post-release and "
            "production support. Delivered projects include City Union Bank (digital onboarding and loan "
            "sanction), NC Onboarding (digital onboarding for borrowers), and Loan Hub (Marketplace "
            "connecting borrowers and lenders)."
        ),
        tags=["React.js", "Node.js", "Sails.js", "MySQL", "Git", "JIRA", "AWS", "Frontend Lead"],
    ),
    TimelineEvent(
        year="2017",  # Feb 2017 - Aug 2021
        type="work",
        title="Full Stack Developer (Team Lead)",
        entity="SPINTeQ Automotive Products",
        description=(
            "Gathered requirements, acted as System Architect, led the dev team, created REST APIs, did "
            "UI-UX design, frontend and backend development, and mobility development. Managed Git, "
            "monitored progress, automated support activities (sms, email, telegram alerts, database "
            "backup), and managed Azure VMs. Maintained web & mobile applications for TMSA CV, PV and "
            "KYC, and TATA MOTORS PRODUCTS."
        ),
        tags=[
            "HTML", "CSS", "JavaScript", "React.js", "Node.js", "Express.js", "PHP", "CodeIgniter",
            "PostgreSQL", "MS SQL Server", "Azure", "Git", "Team Lead",
        ],
    ),
    TimelineEvent(
        year="2017",
        type="project",
        title="Auto Scheduler",
        entity="SPINTeQ Automotive Products",
        description="Auto schedule vehicle based on priority and availability of resources in workshop.",
        tags=["HTML", "CSS", "JavaScript", "React.js", "Node.js", "Express.js", "PostgreSQL"],
    ),
    TimelineEvent(
        year="2017",
        type="project",
        title="FX",
        entity="SPINTeQ Automotive Products",
        description="Workshop Management System, Asset Tracking, Analytics, Dashboards, Reports.",
        tags=[
            "HTML", "CSS", "JavaScript", "HighCharts.js", "React.js", "Node.js", "Express.js", "PHP",
            "CodeIgniter", "PostgreSQL",
        ],
    ),
    TimelineEvent(
        year="2017",
        type="project",
        title="Insight, Revenue, KPI, Telegram",
        entity="SPINTeQ Automotive Products",
        description=(
            "Admin Dashboard, Workshop Revenue Dashboard, Monitoring Dealer and Region Performance, "
            "Auto Sending Workshop Status & KPI messages."
        ),
        tags=[
            "HTML", "CSS", "JavaScript", "HighCharts.js", "Google Charts", "Materialize", "PHP",
            "CodeIgniter", "MS SQL Server", "Windows Task Scheduler",
        ],
    ),
]


def with_year_markers(events: Iterable[TimelineEvent]) -> List[TimelineEntry]:
    """Flag each event that starts a new year, in display order."""
    entries = []
    last_year: Optional[str] = None
    for event in events:
        show_year = event.year != last_year
        last_year = event.year
        entries.append(TimelineEntry(**event.model_dump(), show_year=show_year))
    return entries


def get_timeline(event_type: Optional[TimelineEventType] = None) -> List[TimelineEntry]:
    events = TIMELINE_EVENTS
    if event_type is not None:
        events = [e for e in events if e.type == event_type]
    return with_year_markers(events)


def get_portfolio() -> Portfolio:
    return Portfolio(profile=PROFILE, timeline=get_timeline())
