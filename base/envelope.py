"""
Outbound JSON-RPC envelopes: completed tasks and errors.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from a2a.types import Artifact, Part, TaskState, TaskStatus

from utils.ids import id_or_new, new_id
from utils.message_utils import create_agent_message, create_data_part, create_text_part

from .errors import (
    INTERNAL_ERROR_MESSAGE,
    A2AErrorCode,
    EnvelopeValidationError,
    JSONRPCError,
    ResourceNotFoundError,
)
from .models import NutritionSummary

TEXT_ARTIFACT_NAME = "NutritionInfoText"
DATA_ARTIFACT_NAME = "ToolResults"


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def format_nutrition_text(summary: NutritionSummary) -> str:
    """Fixed multi-line rendering of a summary, as shown to humans."""
    vitamins = ", ".join(summary.vitamins) if summary.vitamins else "N/A"
    minerals = ", ".join(summary.minerals) if summary.minerals else "N/A"
    return (
        f"\n{summary.food_name}:\n"
        f"Calories: {summary.calories}\n"
        f"Protein: {summary.protein}\n"
        f"Fat: {summary.fat}\n"
        f"Carbs: {summary.carbs}\n"
        f"Vitamins: {vitamins}\n"
        f"Minerals: {minerals}\n"
        f"Health Benefits: {', '.join(summary.health_benefits)}\n"
    )


def build_artifacts(text: str, summary: NutritionSummary) -> List[Dict[str, Any]]:
    """The text rendering and the raw summary, each as its own artifact."""
    artifacts = [
        Artifact(
            artifact_id=new_id(),
            name=TEXT_ARTIFACT_NAME,
            parts=[Part(root=create_text_part(text))],
        ),
        Artifact(
            artifact_id=new_id(),
            name=DATA_ARTIFACT_NAME,
            parts=[Part(root=create_data_part(summary.to_wire()))],
        ),
    ]
    return [_dump(artifact) for artifact in artifacts]


def build_success(
    request_id: Any,
    context_id: Optional[str],
    task_id: Optional[str],
    summary: NutritionSummary,
    history_messages: List[Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Build the completed-task envelope.

    Args:
        request_id: JSON-RPC id to echo
        context_id: Caller's contextId, generated when absent
        task_id: Caller's taskId, generated when absent
        summary: Nutrition summary returned by the agent
        history_messages: Replayed inbound messages (see to_history_messages)

    Returns:
        JSON-RPC result envelope
    """
    text = format_nutrition_text(summary)

    status = TaskStatus(
        state=TaskState.completed,
        timestamp=datetime.now(timezone.utc).isoformat(),
        message=create_agent_message(text),
    )
    answer = create_agent_message(text, task_id=id_or_new(task_id))

    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "result": {
            "id": id_or_new(task_id),
            "contextId": id_or_new(context_id),
            "status": _dump(status),
            "artifacts": build_artifacts(text, summary),
            "history": list(history_messages) + [_dump(answer)],
            "kind": "task",
        },
    }


def build_error(
    request_id: Any,
    code: A2AErrorCode,
    message: str,
    details: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build a JSON-RPC error envelope.

    Args:
        request_id: JSON-RPC id to echo, or None
        code: Error code
        message: Error message
        details: Optional detail text, sent as data.details

    Returns:
        JSON-RPC error envelope
    """
    data = {"details": details} if details is not None else None
    return JSONRPCError(code, message, data).to_jsonrpc_response(request_id)


def error_envelope_for(exc: Exception, request_id: Any = None) -> Tuple[int, Dict[str, Any]]:
    """
    Map a failure to its HTTP status and JSON-RPC error envelope.

    Validation and not-found errors keep their own code and message.
    Everything else becomes an internal error whose details carry the
    failure's message.

    Args:
        exc: The exception to convert
        request_id: The request ID to echo back

    Returns:
        Tuple of (http_status, envelope)
    """
    if isinstance(exc, EnvelopeValidationError):
        return exc.http_status, build_error(request_id, exc.error_code, exc.message, exc.details)

    if isinstance(exc, ResourceNotFoundError):
        return exc.http_status, build_error(request_id, exc.error_code, exc.message)

    return 500, build_error(request_id, A2AErrorCode.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE, str(exc))
