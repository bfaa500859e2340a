# food_info/agent.py
"""
Food info agent.
Fetches nutrition data for the requested food and hands the summary back
unchanged, so the endpoint can render it as text and as structured data.
"""

from typing import Dict, List

from base.models import AgentResponse, FetchCapability
from base.simple_agent import BaseNutritionAgent
from utils.logging import get_logger

logger = get_logger(__name__)


class FoodInfoAgent(BaseNutritionAgent):
    """Deterministic agent: one fetch, summary passed through verbatim."""

    def get_agent_name(self) -> str:
        return "Food Info Agent"

    def get_agent_description(self) -> str:
        return (
            "Looks up a food in USDA FoodData Central and returns its calories, "
            "macronutrients, vitamins, minerals and health benefits."
        )

    async def generate(
        self,
        messages: List[Dict[str, str]],
        fetch_capability: FetchCapability
    ) -> AgentResponse:
        if messages:
            logger.debug(f"FoodInfoAgent.generate() first message: {messages[0]['content'][:100]}")
        summary = await fetch_capability()
        logger.info(f"🍎 Summarized '{summary.food_name}' ({summary.calories} kcal)")
        return AgentResponse(text=summary)
