"""
Shared fixtures for the food info endpoint tests.
"""

from typing import Any, List

import httpx
import pytest

from base.request_handler import FoodInfoRequestHandler
from examples.food_info.agent import FoodInfoAgent
from tools.nutrition_tools import USDAClient
from utils.registry import AgentRegistry

from tests.helpers import AGENT_ID, APPLE_NUTRIENTS, search_payload


@pytest.fixture
def make_usda_client():
    """Factory for a USDAClient backed by httpx.MockTransport."""

    def _make(payload: Any = None, status_code: int = 200, exc: Exception = None) -> USDAClient:
        seen: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if exc is not None:
                raise exc
            return httpx.Response(status_code, json=payload)

        client = USDAClient(
            api_key="test-key",
            base_url="https://fdc.test/v1",
            transport=httpx.MockTransport(handler),
        )
        client.seen_requests = seen
        return client

    return _make


@pytest.fixture
def apple_client(make_usda_client):
    return make_usda_client(search_payload(APPLE_NUTRIENTS))


@pytest.fixture
def make_handler():
    """Factory for a request handler with FoodInfoAgent registered under AGENT_ID."""

    def _make(usda_client: USDAClient, agent: Any = None) -> FoodInfoRequestHandler:
        registry = AgentRegistry()
        registry.register(AGENT_ID, agent or FoodInfoAgent())
        return FoodInfoRequestHandler(registry, usda_client)

    return _make
