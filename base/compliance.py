"""
Agent card creation for the food info endpoint.
Cards follow A2A protocol v0.3.0.
"""

from typing import List, Optional

from a2a.types import (
    AgentCard,
    AgentProvider,
    AgentSkill,
    AgentCapabilities,
)

FOOD_INFO_ROUTE = "/a2a/agent/food-info/{agent_id}"
LOCAL_BASE_URL = "http://localhost:8000"


def agent_base_url(hu_app_url: Optional[str] = None) -> str:
    """Public base URL: the HealthUniverse app URL when deployed, localhost otherwise."""
    return (hu_app_url or LOCAL_BASE_URL).rstrip("/")


def nutrition_lookup_skill() -> AgentSkill:
    return AgentSkill(
        id="nutrition-lookup",
        name="Nutrition Lookup",
        description="Looks up a food in USDA FoodData Central and summarizes calories, "
                    "macronutrients, vitamins, minerals and health benefits.",
        tags=["nutrition", "food", "usda"],
        examples=["banana", "cheddar cheese", "raw spinach"],
        input_modes=["text/plain"],
        output_modes=["text/plain", "application/json"],
    )


def create_compliant_agent_card(
    name: str,
    description: str,
    agent_id: str,
    version: str = "1.0.0",
    skills: List[AgentSkill] = None,
    organization: str = "Your Organization",
    organization_url: str = "https://example.com",
    base_url: Optional[str] = None,
) -> AgentCard:
    """
    Create an A2A AgentCard pointing at the food info route.

    Args:
        name: Agent name
        description: Agent description
        agent_id: Registry id the route is parameterized with
        version: Agent version
        skills: Agent skills (default: the nutrition lookup skill)
        organization: Organization name
        organization_url: Organization URL
        base_url: Public base URL, usually Settings.hu_app_url (default: localhost)

    Returns:
        AgentCard
    """
    url = agent_base_url(base_url) + FOOD_INFO_ROUTE.format(agent_id=agent_id)

    return AgentCard(
        protocol_version="0.3.0",
        name=name,
        description=description,
        url=url,
        preferred_transport="JSONRPC",
        provider=AgentProvider(organization=organization, url=organization_url),
        version=version,
        skills=skills if skills is not None else [nutrition_lookup_skill()],
        default_input_modes=["text/plain", "application/json"],
        default_output_modes=["text/plain", "application/json"],
        capabilities=AgentCapabilities(
            streaming=False,
            push_notifications=False,
            state_transition_history=False
        ),
    )
