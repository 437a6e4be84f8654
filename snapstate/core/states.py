# snapstate/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True, eq=False)
class State:
    """
    Represents a mode of behavior in the state hierarchy. A State is an immutable
    marker holding only its name and a reference to its parent; behavior is bound
    to it through a Registry.

    States are compared by identity. The name is the key used for registry lookups,
    snapshots and transition checks.

    No validation is done here: cycles or duplicate names are the integrator's
    responsibility (see ``snapstate.core.validations``).
    """

    name: str
    parent: Optional[State] = None

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"State({self.name!r}, parent={parent!r})"

    @property
    def is_root(self) -> bool:
        """True when the state has no parent."""
        return self.parent is None

    def lineage(self) -> Iterator[State]:
        """
        Yield this state followed by each ancestor up to the root.
        """
        current: Optional[State] = self
        while current is not None:
            yield current
            current = current.parent


def build_state_path(state: Optional[State]) -> List[State]:
    """
    Build the path of states from the root down to ``state``.

    :param state: The target state. ``None`` yields an empty path.
    :return: Root first, ``state`` last.
    """
    if state is None:
        return []
    path = list(state.lineage())
    path.reverse()
    return path
