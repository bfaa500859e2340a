"""
Identifier generation for protocol entities.
Every id the service mints (task, context, message, artifact) comes from here.
"""

import uuid
from typing import Optional


def new_id() -> str:
    """Return a fresh random UUID4 string."""
    return str(uuid.uuid4())


def id_or_new(value: Optional[str]) -> str:
    """
    Return the caller-supplied id, or a fresh one when it is missing or empty.

    Args:
        value: Identifier supplied by the caller, if any

    Returns:
        The given id or a newly generated UUID4 string
    """
    return value if value else new_id()
