"""
Error taxonomy for the food info endpoint.
Implements the JSON-RPC 2.0 error codes the endpoint answers with.
"""

import logging
from enum import Enum
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class A2AErrorCode(Enum):
    """
    JSON-RPC 2.0 error codes used by the endpoint.
    """
    INVALID_REQUEST = -32600       # Not a valid Request object
    INVALID_PARAMS = -32602        # Unknown agent in the route
    INTERNAL_ERROR = -32603        # Anything raised after validation


INTERNAL_ERROR_MESSAGE = "Internal error"
INVALID_REQUEST_MESSAGE = 'Invalid Request: jsonrpc must be "2.0" and id is required'


class A2AException(Exception):
    """Base exception for failures that end up in an error envelope."""
    error_code = A2AErrorCode.INTERNAL_ERROR
    http_status = 500

    def __init__(self, message: str = None):
        self.message = message or "An A2A error occurred"
        super().__init__(self.message)


class EnvelopeValidationError(A2AException):
    """Raised when the inbound JSON-RPC envelope is malformed."""
    error_code = A2AErrorCode.INVALID_REQUEST
    http_status = 400

    def __init__(self, request_id: Any = None, details: Optional[str] = None):
        self.request_id = request_id
        self.details = details
        super().__init__(INVALID_REQUEST_MESSAGE)


class ResourceNotFoundError(A2AException):
    """Raised when a resource named by the request does not exist."""
    error_code = A2AErrorCode.INVALID_PARAMS
    http_status = 404


class AgentNotFoundError(ResourceNotFoundError):
    """Raised when the route's agent id resolves to no registered agent."""

    def __init__(self, agent_id: str):
        self.agent_id = agent_id
        super().__init__(f"Agent '{agent_id}' not found")


class UpstreamLookupError(A2AException):
    """Raised when the nutrition dataset search fails."""

    def __init__(self, message: str, query: Optional[str] = None):
        self.query = query
        super().__init__(message)


class NoResultsError(UpstreamLookupError):
    """Raised when the dataset search yields no candidate foods."""

    def __init__(self, query: str):
        super().__init__(f'No results found for "{query}"', query=query)


class InvalidAgentResponseError(A2AException):
    """Raised when the agent returns something other than a nutrition summary."""

    def __init__(self, message: str):
        super().__init__(f"Invalid agent response: {message}")


class JSONRPCError:
    """JSON-RPC 2.0 error structure."""

    def __init__(self, code: A2AErrorCode, message: str, data: Dict[str, Any] = None):
        """
        Initialize JSON-RPC error.

        Args:
            code: A2A error code (enum member or raw int)
            message: Human-readable error message
            data: Optional additional error data, omitted from the wire when empty
        """
        self.code = code.value if isinstance(code, A2AErrorCode) else code
        self.message = message
        self.data = data or {}

    def to_jsonrpc_response(self, request_id: Any = None) -> Dict[str, Any]:
        """
        Convert to JSON-RPC error response format.

        Args:
            request_id: The request ID (null when it could not be read)

        Returns:
            JSON-RPC error response dictionary
        """
        error = {
            "code": self.code,
            "message": self.message,
        }
        if self.data:
            error["data"] = self.data
        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "error": error,
        }

