"""
Utility modules for the food info agent.
"""

from .ids import new_id, id_or_new
from .config import ConfigManager, Settings, get_settings
from .registry import AgentRegistry
from .message_utils import to_agent_input, to_history_messages
from .logging import setup_logging, get_logger

__all__ = [
    # Identifiers
    "new_id",
    "id_or_new",

    # Configuration
    "ConfigManager",
    "Settings",
    "get_settings",

    # Agent lookup
    "AgentRegistry",

    # Message normalization
    "to_agent_input",
    "to_history_messages",

    # Logging
    "setup_logging",
    "get_logger"
]

__version__ = "1.0.0"
