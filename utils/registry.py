"""
Agent registry for the food info service.
Maps the route's agent identifier to an agent instance.
"""

from typing import Any, Dict, List

from base.errors import AgentNotFoundError


class AgentRegistry:
    """In-process lookup of agents by id, populated once at startup."""

    def __init__(self):
        self._agents: Dict[str, Any] = {}

    def register(self, agent_id: str, agent: Any) -> None:
        """
        Register an agent under an id.

        Args:
            agent_id: Identifier used in the request path
            agent: Object exposing an async generate(messages, fetch_capability)

        Raises:
            ValueError: If the id is empty or already taken
        """
        if not agent_id:
            raise ValueError("Agent id must be a non-empty string")
        if agent_id in self._agents:
            raise ValueError(f"Agent '{agent_id}' is already registered")
        self._agents[agent_id] = agent

    def get(self, agent_id: str) -> Any:
        """
        Resolve an agent by id.

        Raises:
            AgentNotFoundError: If no agent is registered under the id
        """
        agent = self._agents.get(agent_id)
        if agent is None:
            raise AgentNotFoundError(agent_id)
        return agent

    def ids(self) -> List[str]:
        return list(self._agents)

    def __contains__(self, agent_id: str) -> bool:
        return agent_id in self._agents
