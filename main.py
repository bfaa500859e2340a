#!/usr/bin/env python3
"""
Main entry point for the food info agent deployment.
Exposes the Starlette `app` that uvicorn (or the hosting platform) serves.
"""

from typing import Optional

import uvicorn
from starlette.applications import Starlette

from base.app_builder import create_food_info_app
from base.compliance import create_compliant_agent_card
from base.request_handler import FoodInfoRequestHandler
from examples.food_info.agent import FoodInfoAgent
from tools.nutrition_tools import USDAClient
from utils.config import Settings, get_settings
from utils.logging import get_logger, setup_logging
from utils.registry import AgentRegistry


def create_app(settings: Optional[Settings] = None) -> Starlette:
    """
    Wire settings, the agent registry and the request handler into an app.

    Args:
        settings: Optional settings; loaded from the environment when omitted

    Returns:
        Starlette application
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, force=True)
    logger = get_logger(__name__)

    agent = FoodInfoAgent()
    registry = AgentRegistry()
    registry.register(settings.food_info_agent_id, agent)

    handler = FoodInfoRequestHandler(registry, USDAClient.from_settings(settings))
    agent_card = create_compliant_agent_card(
        name=agent.get_agent_name(),
        description=agent.get_agent_description(),
        agent_id=settings.food_info_agent_id,
        version=settings.agent_version,
        organization=settings.agent_org,
        organization_url=settings.agent_org_url,
        base_url=settings.hu_app_url,
    )

    logger.info(f"Initializing {agent.get_agent_name()} v{settings.agent_version} "
                f"as '{settings.food_info_agent_id}'")
    return create_food_info_app(handler, agent_card, agent_name=agent.get_agent_name())


# Module-level app for `uvicorn main:app`
app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    logger = get_logger(__name__)
    logger.info(f"🚀 Starting food info agent on http://{settings.host}:{settings.port}")
    logger.info(f"🔗 Task endpoint: /a2a/agent/food-info/{settings.food_info_agent_id}")
    logger.info("🔗 Agent card: /.well-known/agent-card.json")
    logger.info("💚 Health endpoint: /health")
    uvicorn.run(app, host=settings.host, port=settings.port)
