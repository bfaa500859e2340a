"""
Utility functions for moving between A2A message parts and agent input.

Inbound protocol messages are flattened to role/content pairs for the agent,
and replayed verbatim into the task history of the response.
"""

import json
from typing import Any, Dict, List, Optional

from a2a.types import DataPart, Message, Part, Role, TextPart

from base.models import InboundDataPart, InboundMessage, InboundTextPart
from utils.ids import id_or_new, new_id


def create_text_part(text: str) -> TextPart:
    """
    Create a TextPart with proper kind field.

    Args:
        text: The text content

    Returns:
        TextPart with kind="text"
    """
    return TextPart(kind="text", text=str(text))


def create_data_part(data: Dict[str, Any]) -> DataPart:
    """
    Create a DataPart with proper kind field for structured data.

    Args:
        data: JSON-serializable mapping

    Returns:
        DataPart with kind="data"
    """
    return DataPart(kind="data", data=data)


def create_agent_message(text: str, task_id: Optional[str] = None) -> Message:
    """
    Create an agent-role Message holding a single text part.

    Args:
        text: The message text
        task_id: Optional task the message belongs to

    Returns:
        Message with a fresh messageId
    """
    return Message(
        role=Role.agent,
        parts=[Part(root=create_text_part(text))],
        kind="message",
        message_id=new_id(),
        task_id=task_id,
    )


def part_to_text(part: Any) -> str:
    """
    Textual form of one part: literal text, JSON for data, empty otherwise.
    """
    if isinstance(part, InboundTextPart):
        return part.text
    if isinstance(part, InboundDataPart):
        return json.dumps(part.data, separators=(",", ":"), ensure_ascii=False)
    return ""


def to_agent_input(messages: List[InboundMessage]) -> List[Dict[str, str]]:
    """
    Flatten protocol messages into role/content pairs for an agent call.

    Each message's parts are rendered with part_to_text and joined by
    newlines, keeping both message and part order.

    Args:
        messages: Inbound protocol messages

    Returns:
        List of {"role", "content"} dicts
    """
    return [
        {
            "role": message.role,
            "content": "\n".join(part_to_text(part) for part in message.parts),
        }
        for message in messages
    ]


def to_history_messages(
    messages: List[InboundMessage],
    fallback_task_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Re-wrap inbound messages as history entries of kind "message".

    Role and parts are kept verbatim. A missing messageId gets a fresh id; a
    missing taskId falls back to the request's taskId, then to a fresh id.

    Args:
        messages: Inbound protocol messages
        fallback_task_id: The request-level taskId, if any

    Returns:
        List of message dicts ready for serialization
    """
    history = []
    for message in messages:
        history.append({
            "kind": "message",
            "role": message.role,
            "parts": message.dump_parts(),
            "messageId": id_or_new(message.message_id),
            "taskId": message.task_id or id_or_new(fallback_task_id),
        })
    return history


def extract_query_text(messages: List[InboundMessage]) -> Optional[str]:
    """
    Text of the first part of the first message, when that part is text.

    Args:
        messages: Inbound protocol messages

    Returns:
        The text, or None when there is no usable leading text part
    """
    if not messages or not messages[0].parts:
        return None
    first_part = messages[0].parts[0]
    if isinstance(first_part, InboundTextPart) and first_part.text:
        return first_part.text
    return None
