"""
App builder for the food info endpoint.
Mounts the JSON-RPC route next to the well-known card and health endpoints.
"""

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from a2a.types import AgentCard

from .compliance import FOOD_INFO_ROUTE
from .request_handler import FoodInfoRequestHandler


def create_food_info_app(
    request_handler: FoodInfoRequestHandler,
    agent_card: AgentCard,
    agent_name: str = None
) -> Starlette:
    """
    Create a Starlette app serving the food info endpoint.

    Args:
        request_handler: Handler for JSON-RPC task requests
        agent_card: The card served on the well-known URIs
        agent_name: Optional agent name for health endpoint

    Returns:
        Configured Starlette application
    """

    async def food_info(request: Request):
        """POST a JSON-RPC task request to the agent named in the path."""
        agent_id = request.path_params["agent_id"]
        try:
            body = await request.json()
        except ValueError:
            # Not JSON; the validator turns this into an Invalid Request
            body = None

        status, envelope = await request_handler.handle(agent_id, body)
        return JSONResponse(envelope, status_code=status)

    async def well_known_agent_card(request: Request):
        """Serve agent card at the A2A well-known URI."""
        return JSONResponse(agent_card.model_dump(mode="json", by_alias=True, exclude_none=True))

    async def health_check(request: Request):
        """Health check endpoint for platform monitoring."""
        return JSONResponse({
            "status": "healthy",
            "agent": agent_name or agent_card.name,
            "version": agent_card.version,
            "protocol": agent_card.protocol_version,
            "agents": request_handler.registry.ids(),
        })

    routes = [
        Route(FOOD_INFO_ROUTE, food_info, methods=["POST"]),
        Route("/.well-known/agent-card.json", well_known_agent_card, methods=["GET"]),  # A2A standard path
        Route("/.well-known/agent.json", well_known_agent_card, methods=["GET"]),  # HealthUniverse expected
        Route("/health", health_check, methods=["GET"]),
    ]

    return Starlette(routes=routes, debug=False)
