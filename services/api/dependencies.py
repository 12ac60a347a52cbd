import logging
from typing import Optional
from fastapi import Request

from shared.ai import OpenAISummaryClient, SummaryModelClient
from .config import APIConfig

logger = logging.getLogger(__name__)


def build_summary_client(config: APIConfig) -> OpenAISummaryClient:
    """
    Build the OpenAI-backed summary client from configuration.

    Raises:
        ValueError: if no OpenAI API key is configured
    """
    return OpenAISummaryClient(
        api_key=config.openai_api_key,
        model=config.openai_model,
        base_url=config.resolved_openai_base_url,
        max_tokens=config.summary_max_tokens,
    )


def get_summary_client(request: Request) -> Optional[SummaryModelClient]:
    """The client the app was created with, or None when no credentials were found."""
    return getattr(request.app.state, "summary_client", None)
