# snapstate/core/commands.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from snapstate.core.machine import Machine
    from snapstate.core.states import State
    from snapstate.runtime.context import CommandContext


@dataclass(frozen=True)
class Command:
    """
    An instruction submitted to the machine: a name used to look up the handler
    and an ordered sequence of string arguments.
    """

    name: str
    args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but always store an immutable tuple.
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def of(cls, name: str, *args: str) -> "Command":
        """Build a command from a name and positional arguments."""
        return cls(name, args)

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> Optional["Command"]:
        """
        Build a command from raw process arguments. The first token is the
        command name, the remainder are its arguments.

        :return: None when ``argv`` is empty.
        """
        if not argv:
            return None
        return cls(argv[0], tuple(argv[1:]))


@dataclass(frozen=True)
class CommandDef:
    """
    Metadata about a command, used to build help and usage text. Carries no behavior.

    :param name: Command name, also the lookup key.
    :param args: Human-readable argument signature, e.g. ``"[name] [race]"``.
    :param description: One-line description.
    """

    name: str
    args: str = ""
    description: str = ""


@dataclass(frozen=True)
class Result:
    """Outcome of a successful handler call."""

    output: str = ""
    next_state: Optional["State"] = None


# handler(ctx, machine, command) -> Result
CommandHandler = Callable[["CommandContext", "Machine[Any]", Command], Result]


@dataclass(frozen=True)
class RegisteredCommand:
    """Pairs a command's metadata with its handler."""

    definition: CommandDef
    handler: Callable[..., Any]

    @property
    def name(self) -> str:
        return self.definition.name
