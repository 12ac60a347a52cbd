import logging
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse

from shared.schemas.summary import SummaryResponse
from shared.ai import GenerationError, SummaryModelClient, ValidationError, generate_summary, validate
from ..dependencies import get_summary_client

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/summary", tags=["summary"])

GENERATION_FAILED_MESSAGE = (
    "There was a problem with the AI summary generator. Please try again later."
)


@router.post("", response_model=SummaryResponse)
async def create_summary(
    payload: Any = Body(..., description="{jobDescription, targetKeywords}"),
    client: Optional[SummaryModelClient] = Depends(get_summary_client),
):
    """
    Generate a resume summary tailored to a job description.

    Input is validated before the model is called; rejected input returns
    422 with one entry per offending field.
    """
    try:
        request = validate(payload)
    except ValidationError as e:
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(e),
                "errors": [v.model_dump() for v in e.violations],
            },
        )

    if client is None:
        raise HTTPException(status_code=503, detail="AI summary generator is not configured")

    try:
        return await generate_summary(request, client)
    except GenerationError as e:
        logger.error(f"Error generating resume summary: {e}")
        raise HTTPException(status_code=502, detail=GENERATION_FAILED_MESSAGE)
