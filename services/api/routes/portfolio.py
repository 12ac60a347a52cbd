from typing import List, Optional
from fastapi import APIRouter, Query

from shared.portfolio import get_portfolio, get_timeline
from shared.schemas.portfolio import Portfolio, TimelineEntry, TimelineEventType

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=Portfolio)
async def portfolio():
    """Hero profile and the full timeline."""
    return get_portfolio()


@router.get("/timeline", response_model=List[TimelineEntry])
async def timeline(
    event_type: Optional[TimelineEventType] = Query(
        None, alias="type", description="Only 'work' or only 'project' entries"
    ),
):
    return get_timeline(event_type)
