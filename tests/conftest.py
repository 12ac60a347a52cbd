"""Shared test fixtures."""

import json
from typing import Dict, List, Optional, Union

import pytest

from shared.ai import SummaryModelClient


JOB_DESCRIPTION = (
    "Senior Backend Engineer needed, 5+ years Go experience, distributed systems focus, "
    "microservices architecture required for fintech platform."
)
TARGET_KEYWORDS = "Go, distributed systems, fintech"
GENERATED_SUMMARY = (
    "Backend engineer with 6 years of Go experience building distributed, "
    "microservice-based payment systems for fintech platforms."
)


class FakeSummaryClient(SummaryModelClient):
    """Records every call and answers with a fixed output or error."""

    def __init__(
        self,
        output: Optional[Union[str, dict]] = None,
        error: Optional[Exception] = None,
    ):
        if output is None:
            output = json.dumps({"resumeSummary": GENERATED_SUMMARY})
        self.output = output
        self.error = error
        self.calls: List[List[Dict[str, str]]] = []
        self.closed = False

    async def complete(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.output

    async def aclose(self):
        self.closed = True


@pytest.fixture
def valid_payload():
    return {"jobDescription": JOB_DESCRIPTION, "targetKeywords": TARGET_KEYWORDS}


@pytest.fixture
def fake_client():
    return FakeSummaryClient()


@pytest.fixture
def make_fake_client():
    """Factory for clients with a custom output or error."""
    return FakeSummaryClient
