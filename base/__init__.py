"""
Building blocks for the A2A food info endpoint.

This package provides:
- Wire models for inbound envelopes, USDA payloads and nutrition summaries
- The error taxonomy and its JSON-RPC codes
- BaseNutritionAgent: the contract agents served by the endpoint implement

The request handler, envelope builder and app builder live in their own
modules (base.request_handler, base.envelope, base.app_builder).
"""

from .simple_agent import BaseNutritionAgent
from .models import (
    AgentResponse,
    InboundEnvelope,
    InboundMessage,
    NutrientRecord,
    NutritionSummary,
)
from .errors import (
    A2AErrorCode,
    A2AException,
    EnvelopeValidationError,
    ResourceNotFoundError,
    AgentNotFoundError,
    UpstreamLookupError,
    NoResultsError,
    InvalidAgentResponseError,
    JSONRPCError,
)

__all__ = [
    "BaseNutritionAgent",
    "AgentResponse",
    "InboundEnvelope",
    "InboundMessage",
    "NutrientRecord",
    "NutritionSummary",
    "A2AErrorCode",
    "A2AException",
    "EnvelopeValidationError",
    "ResourceNotFoundError",
    "AgentNotFoundError",
    "UpstreamLookupError",
    "NoResultsError",
    "InvalidAgentResponseError",
    "JSONRPCError",
]

__version__ = "1.0.0"
