"""
Inbound envelope validation.
Runs before any agent lookup or invocation.
"""

import logging
from typing import Any

from pydantic import ValidationError

from .errors import EnvelopeValidationError
from .models import InboundEnvelope

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(p) for p in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def validate_envelope(body: Any) -> InboundEnvelope:
    """
    Check the JSON-RPC envelope and parse its params.

    Args:
        body: The parsed request body (None when it was not JSON)

    Returns:
        Parsed InboundEnvelope

    Raises:
        EnvelopeValidationError: If the body is not an object, jsonrpc is not
            "2.0", id is missing, or params do not have the message shape
    """
    if not isinstance(body, dict):
        raise EnvelopeValidationError(None, "Request body must be a JSON object")

    request_id = body.get("id")
    if request_id in (None, "") or isinstance(request_id, bool):
        raise EnvelopeValidationError(None)

    if body.get("jsonrpc") != "2.0":
        raise EnvelopeValidationError(request_id)

    try:
        return InboundEnvelope.model_validate(body)
    except ValidationError as e:
        raise EnvelopeValidationError(request_id, _describe_validation_error(e)) from e
