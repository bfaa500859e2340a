"""
Base class for agents served by the food info endpoint.
An agent receives the flattened conversation plus a data-fetch capability.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from .models import AgentResponse, FetchCapability


class BaseNutritionAgent(ABC):
    """
    Base class for nutrition agents.
    Subclasses decide how to use the fetch capability; the endpoint expects
    `response.text` to hold the NutritionSummary it returned.
    """

    @abstractmethod
    def get_agent_name(self) -> str:
        """Return the agent's name."""
        pass

    @abstractmethod
    def get_agent_description(self) -> str:
        """Return the agent's description for the AgentCard."""
        pass

    @abstractmethod
    async def generate(
        self,
        messages: List[Dict[str, str]],
        fetch_capability: FetchCapability
    ) -> AgentResponse:
        """
        Answer a conversation.

        Args:
            messages: Role/content pairs in conversation order
            fetch_capability: Zero-argument coroutine function returning the
                NutritionSummary for the request's query

        Returns:
            AgentResponse whose text is the NutritionSummary
        """
        pass
