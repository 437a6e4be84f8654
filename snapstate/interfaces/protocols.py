# snapstate/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from snapstate.core.machine import Machine, Snapshot


@runtime_checkable
class SnapshotStorage(Protocol):
    """
    Storage collaborator that persists a machine snapshot between invocations.
    """

    def load(self) -> "Snapshot[Any]":
        """
        Read the stored snapshot.

        :raises SnapshotNotFoundError: If nothing has been stored yet.
        :raises SnapshotFormatError: If the stored content is malformed.
        """
        ...

    def save(self, snapshot: "Snapshot[Any]") -> None:
        """Persist the snapshot, replacing any previous one."""
        ...


@runtime_checkable
class StatusRenderer(Protocol):
    """
    Presentation collaborator turning a machine into human-readable status text.
    """

    def __call__(self, machine: "Machine[Any]") -> str: ...
