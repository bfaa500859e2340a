"""
Logging setup for the food info agent.
Stdlib configuration with UTC timestamps and an optional payload trace.
"""

import os
import sys
import time
import logging
from typing import Optional


_loggers = {}
_configured = False

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers that log every upstream request line at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")


def _level_value(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(level: Optional[str] = None,
                  format: Optional[str] = None,
                  debug_payloads: Optional[bool] = None,
                  force: bool = False):
    """
    Configure logging for the service.

    Handlers are installed once. A later call with force=True re-applies the
    level and payload switch, so settings loaded after import still take effect.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format: Log format string
        debug_payloads: Log inbound and outbound envelopes at DEBUG level
        force: Re-apply the level even if logging is already configured
    """
    global _configured

    if _configured and not force:
        return

    log_level = _level_value(level or os.getenv("LOG_LEVEL", "INFO"))
    if debug_payloads is None:
        debug_payloads = os.getenv("DEBUG_PAYLOADS") == "1"

    if not _configured:
        logging.basicConfig(
            level=log_level,
            format=format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT),
            stream=sys.stdout
        )
        for handler in logging.root.handlers:
            if handler.formatter:
                handler.formatter.converter = time.gmtime
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)

    if debug_payloads:
        logging.getLogger("base.request_handler").setLevel(logging.DEBUG)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger, configuring logging on first use.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if not _configured:
        setup_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]
