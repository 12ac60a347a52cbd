import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 500


class SummaryModelClient(ABC):
    """
    Text-generation collaborator used by the summary generator.

    Implementations take chat messages and return the model's raw text.
    Instances are constructed explicitly and passed in; there is no
    module-level client.
    """

    @abstractmethod
    async def complete(self, messages: List[Dict[str, str]]) -> str:
        ...

    async def aclose(self) -> None:
        return None


class OpenAISummaryClient(SummaryModelClient):
    """SummaryModelClient backed by the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        client: Optional[AsyncOpenAI] = None,
    ):
        if client is None:
            if not api_key:
                raise ValueError("OpenAI API key not set. Set OPENAI_API_KEY environment variable.")
            client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self._client = client
        self.model = model
        self.max_tokens = max_tokens

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        logger.debug(f"Calling {self.model} with {len(messages)} messages")
        response = await self._client.chat.completions.create(
            model=self.model,
            messages=messages,
            response_format={"type": "json_object"},
            max_completion_tokens=self.max_tokens,
        )
        return response.choices[0].message.content or ""

    async def aclose(self) -> None:
        await self._client.close()
