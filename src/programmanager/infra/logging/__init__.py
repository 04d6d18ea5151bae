from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    attach_console_queue,
    configure_logging,
    detach_handler,
    get_default_log_path,
    get_logger,
    get_recent_logs,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "attach_console_queue",
    "detach_handler",
    "get_logger",
    "get_recent_logs",
    "get_default_log_path",
    "_CONFIGURED_FLAG_ATTR",
    "_HANDLER_TAG_ATTR",
    "_QUEUE_LISTENER_ATTR",
]
