from __future__ import annotations

"""
Logging Core Orchestrator.

Sets up the logging subsystem once per process. Records are routed through
a single QueueHandler on the root logger and written by a QueueListener
thread, so file I/O never blocks the Tk main loop or a hierarchy rebuild.
The desktop log console subscribes through its own queue.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from programmanager.infra.fs import get_user_data_dir
from programmanager.infra.logging.config import _LEVEL_MAP, LoggingConfig
from programmanager.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_programmanager_configured"
_QUEUE_LISTENER_ATTR: str = "_programmanager_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "programmanager.log") -> str:
    """Resolve the persistent log path (<user data dir>/logs/<file_name>)."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Configure the root logger with a queue-backed handler chain.

    Only the first call per process has an effect; the CLI and the GUI each
    configure exactly once at startup.

    Args:
        cfg: Logging configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False):
        return root

    level_int = _LEVEL_MAP.get(str(cfg.level or "").strip().upper(), logging.INFO)
    root.setLevel(level_int)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)
    return root


def attach_console_queue(log_queue: queue.Queue, level: int = logging.INFO) -> QueueHandler:
    """
    Mirror root log records into a queue polled by the desktop log console.

    Args:
        log_queue: Queue drained on the Tk main loop.
        level: Minimum level forwarded to the console.

    Returns:
        QueueHandler: The installed handler, for detach_handler on close.
    """
    handler = QueueHandler(log_queue)
    handler.setLevel(level)
    _tag_handler(handler)
    logging.getLogger().addHandler(handler)
    return handler


def detach_handler(handler: logging.Handler) -> None:
    """Remove one of our handlers from the root logger."""
    root = logging.getLogger()
    if _is_our_handler(handler) and handler in root.handlers:
        root.removeHandler(handler)
        handler.close()


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_recent_logs(n_lines: int = 100) -> str:
    """
    Return the tail of the persistent log file for the crash modal.

    Args:
        n_lines: Maximum number of lines to retrieve from the end.

    Returns:
        str: Log tail content, or a short notice if unavailable.
    """
    log_path = get_default_log_path()
    if not os.path.exists(log_path):
        return "Log file not found."

    try:
        with open(log_path, "r", encoding="utf-8", errors="replace") as f:
            return "".join(f.readlines()[-n_lines:])
    except OSError as e:
        return f"Error retrieving logs: {e}"


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener, tolerating listeners that were already stopped."""
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
