"""
Tests for the agent registry and the default food info agent.
"""

import pytest

from base.errors import AgentNotFoundError
from base.models import AgentResponse
from examples.food_info.agent import FoodInfoAgent
from tools.nutrition_tools import extract_nutrition
from utils.registry import AgentRegistry


class TestAgentRegistry:

    def test_register_and_get(self):
        registry = AgentRegistry()
        agent = FoodInfoAgent()
        registry.register("foodInfoAgent", agent)

        assert registry.get("foodInfoAgent") is agent
        assert "foodInfoAgent" in registry
        assert registry.ids() == ["foodInfoAgent"]

    def test_unknown_id_raises(self):
        with pytest.raises(AgentNotFoundError) as exc_info:
            AgentRegistry().get("ghost")

        assert exc_info.value.agent_id == "ghost"
        assert exc_info.value.message == "Agent 'ghost' not found"

    def test_duplicate_id_rejected(self):
        registry = AgentRegistry()
        registry.register("a", FoodInfoAgent())

        with pytest.raises(ValueError, match="already registered"):
            registry.register("a", FoodInfoAgent())

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            AgentRegistry().register("", FoodInfoAgent())


class TestFoodInfoAgent:

    @pytest.mark.asyncio
    async def test_passes_capability_result_through(self):
        summary = extract_nutrition("Bananas, raw", [])
        calls = []

        async def fetch():
            calls.append(True)
            return summary

        response = await FoodInfoAgent().generate([{"role": "user", "content": "banana"}], fetch)

        assert isinstance(response, AgentResponse)
        assert response.text is summary
        assert calls == [True]

    @pytest.mark.asyncio
    async def test_capability_failure_propagates(self):
        async def fetch():
            raise RuntimeError("lookup failed")

        with pytest.raises(RuntimeError, match="lookup failed"):
            await FoodInfoAgent().generate([], fetch)
