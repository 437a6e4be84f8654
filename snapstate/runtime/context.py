# snapstate/runtime/context.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Per-command context handed through to handlers.
"""

import threading
from typing import Any, Dict, Optional

from snapstate.core.errors import CommandCancelledError


class CommandContext:
    """
    Carries a cancellation flag and free-form values for a single command.

    The machine never inspects it. Handlers doing cancellable work (network
    calls, long loops) check it themselves.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self._cancelled = threading.Event()
        self.values: Dict[str, Any] = dict(values or {})

    def cancel(self) -> None:
        """Mark the command as cancelled."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def raise_if_cancelled(self) -> None:
        """
        :raises CommandCancelledError: If :meth:`cancel` has been called.
        """
        if self._cancelled.is_set():
            raise CommandCancelledError("command was cancelled")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return the cancelled flag."""
        return self._cancelled.wait(timeout)
