from __future__ import annotations

"""
Background Worker Threads for GUI Operations.

Runs session operations (rebuilds, mutations, config saves) off the Tk
main loop. Results, or the exception that escaped, are handed to a
completion callback which is responsible for marshalling back to the UI.
"""

import logging
from typing import Any, Callable

from programmanager.domain.operation_models import OperationResult

logger = logging.getLogger(__name__)


def run_session_task(
        task: Callable[[], OperationResult],
        on_complete: Callable[[Any], None]
) -> None:
    """
    Execute one session operation in a dedicated background thread.

    Args:
        task: Zero-argument callable performing the operation.
        on_complete: Receives the OperationResult, or the exception raised.
    """
    try:
        result = task()
    except Exception as e:
        logger.critical(f"Session Thread: Unexpected failure: {e}", exc_info=True)
        on_complete(e)
        return

    on_complete(result)
