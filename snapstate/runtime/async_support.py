# snapstate/runtime/async_support.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import inspect
from typing import Optional

from snapstate.core.commands import Command
from snapstate.core.machine import Machine
from snapstate.interfaces.types import DataT
from snapstate.runtime.context import CommandContext


class AsyncMachine(Machine[DataT]):
    """
    Machine whose handlers may be coroutine functions, for commands that await
    network or disk I/O. Lookup, error and transition rules are those of
    :class:`Machine`; a single command still runs to completion per call.
    """

    async def execute(self, command: Command, ctx: Optional[CommandContext] = None) -> str:  # type: ignore[override]
        """
        Execute ``command``, awaiting the handler's result when it is awaitable.

        :raises CommandNotAvailableError: If no state in the chain binds the command.
        """
        registered = self._resolve(command)
        result = registered.handler(ctx if ctx is not None else CommandContext(), self, command)
        if inspect.isawaitable(result):
            result = await result
        return self._apply(result)
