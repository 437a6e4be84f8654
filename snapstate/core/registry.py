# snapstate/core/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, List, Optional

from snapstate.core.commands import CommandDef, RegisteredCommand
from snapstate.core.states import State
from snapstate.interfaces.types import CommandName, DataT, StateName

logger = logging.getLogger(__name__)


class Registry(Generic[DataT]):
    """
    Central table of known states and the command handlers bound to them.
    Acts as the blueprint of a machine's behavior: it is built once at startup
    and only read afterwards.

    Commands are resolved by walking from a state up through its parents, so a
    command bound to an ancestor is available to every descendant unless a
    closer state binds the same name.
    """

    def __init__(self) -> None:
        self._states: Dict[StateName, State] = {}
        self._command_handlers: Dict[StateName, Dict[CommandName, RegisteredCommand]] = {}

    def register_state(self, state: Optional[State]) -> None:
        """
        Add a state and every ancestor not yet known, keyed by name.
        Registering an already known name, or None, is a no-op.

        :param state: The state to register.
        """
        while state is not None and state.name not in self._states:
            self._states[state.name] = state
            logger.debug("Registered state %r", state.name)
            state = state.parent

    def register_command(self, state: State, definition: CommandDef, handler: Callable) -> None:
        """
        Bind a command handler and its definition to a state.

        A second registration for the same (state, command name) pair replaces
        the first; the replacement is only reported through logging.

        :param state: The state the command is available in (and below).
        :param definition: Command metadata; ``definition.name`` is the lookup key.
        :param handler: Callable invoked as ``handler(ctx, machine, command)``.
        """
        handlers = self._command_handlers.setdefault(state.name, {})
        if definition.name in handlers:
            logger.warning(
                "Command %r on state %r registered twice; the last registration wins",
                definition.name,
                state.name,
            )
        handlers[definition.name] = RegisteredCommand(definition=definition, handler=handler)

    def get_state_by_name(self, name: StateName) -> Optional[State]:
        """Return the registered state called ``name``, or None if unknown."""
        return self._states.get(name)

    def is_registered(self, name: StateName) -> bool:
        return name in self._states

    def states(self) -> Dict[StateName, State]:
        """Return a copy of the name -> state table."""
        return dict(self._states)

    def bound_state_names(self) -> List[StateName]:
        """Names of all states that have at least one command bound, sorted."""
        return sorted(name for name, handlers in self._command_handlers.items() if handlers)

    def find_command(self, state: Optional[State], name: CommandName) -> Optional[RegisteredCommand]:
        """
        Find the binding for ``name`` closest to ``state`` in its ancestor chain.

        :param state: Where the search starts (inclusive).
        :param name: The command name.
        :return: The registered command, or None if no state in the chain binds it.
        """
        while state is not None:
            handlers = self._command_handlers.get(state.name)
            if handlers is not None and name in handlers:
                return handlers[name]
            state = state.parent
        return None

    def find_command_handler(self, state: Optional[State], name: CommandName) -> Optional[Callable]:
        """Return the handler :meth:`find_command` resolves, or None."""
        registered = self.find_command(state, name)
        return registered.handler if registered is not None else None

    def find_available_commands(self, state: Optional[State]) -> List[CommandDef]:
        """
        Collect the definitions of every command usable in ``state``.

        Each name appears once, using the definition closest to ``state``. The
        result is sorted by command name, independent of registration order.
        """
        seen: Dict[CommandName, CommandDef] = {}
        while state is not None:
            for name, registered in self._command_handlers.get(state.name, {}).items():
                if name not in seen:
                    seen[name] = registered.definition
            state = state.parent
        return [seen[name] for name in sorted(seen)]
