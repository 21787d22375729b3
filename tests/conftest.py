"""
Pytest configuration and shared fixtures.

Provides fake backend clients so the triage pipeline can be exercised
without network access.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import httpx
import openai
import pytest

from llm.client import ClassifierClient
from llm.config import LLMConfig

BACKEND_URL = "https://backend.test/v1/responses"

SCENARIO_A = (
    '{"create_incident":true,"severity":"P1","summary":"API down",'
    '"rationale":"total outage reported","confidence":0.95}'
)
SCENARIO_B = (
    '```\n{"create_incident":false,"severity":"none","summary":null,'
    '"rationale":"status update only","confidence":0.8}\n```'
)
SCENARIO_C = (
    '{"create_incident":true,"severity":"P9","summary":null,'
    '"rationale":"ambiguous","confidence":0.4}'
)


class FakeResponses:
    """Stand-in for the OpenAI client's `responses` resource."""

    def __init__(self, output_text: str = "", error: Optional[Exception] = None, status: str = "completed"):
        self.output_text = output_text
        self.error = error
        self.status = status
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            id="resp_test",
            model=kwargs["model"],
            status=self.status,
            output_text=self.output_text,
        )


class FakeOpenAI:
    def __init__(self, **kwargs: Any):
        self.responses = FakeResponses(**kwargs)


def status_error(status_code: int = 500, body: Optional[Dict[str, Any]] = None) -> openai.APIStatusError:
    """Build the error the SDK raises for a backend 4xx/5xx."""
    request = httpx.Request("POST", BACKEND_URL)
    response = httpx.Response(status_code, request=request, json=body)
    return openai.APIStatusError("backend error", response=response, body=body)


def connection_error() -> openai.APIConnectionError:
    return openai.APIConnectionError(request=httpx.Request("POST", BACKEND_URL))


@pytest.fixture
def llm_config() -> LLMConfig:
    """Classifier config with the default policy and generation parameters."""
    return LLMConfig(model="test-model")


@pytest.fixture
def make_classifier(llm_config):
    """
    Factory fixture returning a ClassifierClient backed by FakeOpenAI.

    Usage:
        classifier = make_classifier(output_text="{...}")
        classifier = make_classifier(error=status_error(401))
    """

    def _make(**kwargs: Any) -> ClassifierClient:
        return ClassifierClient(config=llm_config, client=FakeOpenAI(**kwargs))

    return _make
