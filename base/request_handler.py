"""
Request handler for the food info endpoint.

Validates the JSON-RPC envelope, resolves the agent named in the route, runs
it with a nutrition fetch capability, and wraps the answer in a completed
A2A task. Validation and agent lookup answer on their own; everything after
them sits behind a single failure boundary.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from tools.nutrition_tools import USDAClient, build_fetch_capability
from utils.message_utils import to_agent_input, to_history_messages
from utils.registry import AgentRegistry

from .envelope import build_success, error_envelope_for
from .errors import AgentNotFoundError, EnvelopeValidationError, InvalidAgentResponseError
from .models import InboundParams, NutritionSummary
from .validation import validate_envelope

logger = logging.getLogger(__name__)


def summary_from_response(response: Any) -> NutritionSummary:
    """
    Read the NutritionSummary off an agent response.

    Raises:
        InvalidAgentResponseError: If `text` is missing or not a summary
    """
    text = getattr(response, "text", None)
    if isinstance(text, NutritionSummary):
        return text
    if isinstance(text, dict):
        try:
            return NutritionSummary.model_validate(text)
        except ValidationError as e:
            raise InvalidAgentResponseError(f"text is not a nutrition summary ({e.error_count()} errors)") from e
    raise InvalidAgentResponseError(f"expected a nutrition summary, got {type(text).__name__}")


class FoodInfoRequestHandler:
    """Handles one JSON-RPC call per invocation; keeps no per-request state."""

    def __init__(self, registry: AgentRegistry, usda_client: USDAClient):
        self.registry = registry
        self.usda_client = usda_client

    async def handle(self, agent_id: str, body: Any) -> Tuple[int, Dict[str, Any]]:
        """
        Handle a JSON-RPC request addressed to an agent.

        Args:
            agent_id: Agent identifier from the route
            body: Parsed JSON body, or None when it was not JSON

        Returns:
            Tuple of (http_status, envelope)
        """
        trace = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        logger.info(f"🚀 [{trace}] Request for agent '{agent_id}'")
        logger.debug(f"📥 [{trace}] Body: {body}")

        try:
            envelope = validate_envelope(body)
        except EnvelopeValidationError as e:
            logger.warning(f"❌ [{trace}] Invalid envelope: {e.details or e.message}")
            return error_envelope_for(e, e.request_id)

        try:
            agent = self.registry.get(agent_id)
        except AgentNotFoundError as e:
            logger.warning(f"❌ [{trace}] {e.message}")
            return error_envelope_for(e, envelope.id)

        try:
            params = envelope.params or InboundParams()
            messages = params.message_list()
            agent_messages = to_agent_input(messages)
            logger.info(f"📝 [{trace}] Normalized {len(agent_messages)} message(s)")

            fetch_capability = build_fetch_capability(messages, self.usda_client)
            response = await agent.generate(agent_messages, fetch_capability)
            summary = summary_from_response(response)

            history = to_history_messages(messages, params.task_id)
            result = build_success(envelope.id, params.context_id, params.task_id, summary, history)
        except Exception as e:
            logger.exception(f"💥 [{trace}] Request failed: {e}")
            return error_envelope_for(e, envelope.id)

        logger.info(f"✅ [{trace}] Task {result['result']['id']} completed for '{summary.food_name}'")
        logger.debug(f"📤 [{trace}] Response: {result}")
        return 200, result
