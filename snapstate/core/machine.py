# snapstate/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Generic, Optional, Tuple

from snapstate.core.commands import Command, RegisteredCommand, Result
from snapstate.core.errors import CommandNotAvailableError, StateNotFoundError
from snapstate.core.registry import Registry
from snapstate.core.states import State, build_state_path
from snapstate.interfaces.types import DataT, StateName
from snapstate.runtime.context import CommandContext

logger = logging.getLogger(__name__)


@dataclass
class Snapshot(Generic[DataT]):
    """
    Serializable form of a machine: the current state's name and the data payload.
    This is the only thing persisted between invocations.
    """

    current_state_name: StateName
    data: DataT


class Machine(Generic[DataT]):
    """
    Runtime engine of the hierarchical state machine. Holds the current state,
    the cached root-to-current path and the data payload, and dispatches one
    command at a time through its registry.

    Handlers receive the machine itself and mutate ``machine.data`` in place (or
    replace it). Transitions happen only through a handler's ``Result.next_state``
    or an explicit :meth:`transition_to`.
    """

    def __init__(self, registry: Registry[DataT], initial_state: State, initial_data: DataT) -> None:
        """
        Create a machine in ``initial_state``. The state is not checked against
        the registry; its path is computed from parent links alone.

        :param registry: The registry used for command lookup. Borrowed, not copied.
        :param initial_state: Starting state.
        :param initial_data: Starting payload.
        """
        self.data: DataT = initial_data
        self._registry = registry
        self._current_state: State = initial_state
        self._state_path: Tuple[State, ...] = ()
        self.transition_to(initial_state)

    @classmethod
    def from_snapshot(cls, registry: Registry[DataT], snapshot: Snapshot[DataT]) -> "Machine[DataT]":
        """
        Restore a machine from a snapshot.

        :raises StateNotFoundError: If the snapshot's state name is not registered.
        """
        state = registry.get_state_by_name(snapshot.current_state_name)
        if state is None:
            raise StateNotFoundError(snapshot.current_state_name)
        return cls(registry, state, snapshot.data)

    @property
    def current_state(self) -> State:
        """The currently active state."""
        return self._current_state

    @property
    def state_path(self) -> Tuple[State, ...]:
        """States from the root down to the current state."""
        return self._state_path

    @property
    def registry(self) -> Registry[DataT]:
        """Read-only access to the bound registry, e.g. for help listings."""
        return self._registry

    def execute(self, command: Command, ctx: Optional[CommandContext] = None) -> str:
        """
        Execute ``command`` against the current state.

        Exceptions raised by the handler reach the caller unchanged. Changes the
        handler made to ``data`` before failing are kept, and no transition
        happens.

        :param command: The command to run.
        :param ctx: Passed through to the handler; a fresh context when omitted.
        :return: The handler's output text.
        :raises CommandNotAvailableError: If no state in the chain binds the command.
        """
        registered = self._resolve(command)
        result = registered.handler(ctx if ctx is not None else CommandContext(), self, command)
        return self._apply(result)

    def transition_to(self, new_state: State) -> None:
        """
        Switch to ``new_state`` unconditionally, recomputing the state path.
        """
        self._state_path = tuple(build_state_path(new_state))
        self._current_state = new_state

    def get_snapshot(self) -> Snapshot[DataT]:
        """
        Pair the current state's name with a deep copy of the payload, so later
        commands do not change a snapshot already taken.
        """
        return Snapshot(current_state_name=self._current_state.name, data=copy.deepcopy(self.data))

    def _resolve(self, command: Command) -> RegisteredCommand:
        registered = self._registry.find_command(self._current_state, command.name)
        if registered is None:
            raise CommandNotAvailableError(command.name, self._current_state.name)
        logger.debug("Dispatching %r in state %r", command.name, self._current_state.name)
        return registered

    def _apply(self, result: Result) -> str:
        next_state = result.next_state
        if next_state is not None and next_state.name != self._current_state.name:
            logger.debug("Transition %r -> %r", self._current_state.name, next_state.name)
            self.transition_to(next_state)
        return result.output
