# snapstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Optional


class HSMError(Exception):
    """
    Base exception class for errors within the hierarchical state machine library.
    """


class StateNotFoundError(HSMError):
    """
    Raised when a snapshot references a state name that is not in the registry.
    """

    def __init__(self, state_name: str) -> None:
        self.state_name = state_name
        super().__init__(f"state '{state_name}' not found in registry")


class CommandNotAvailableError(HSMError):
    """
    Raised when no state in the current ancestor chain binds the requested command.
    The machine is left untouched.
    """

    def __init__(self, command_name: str, state_name: str) -> None:
        self.command_name = command_name
        self.state_name = state_name
        super().__init__(f"command '{command_name}' not available in state '{state_name}'")


class CommandError(HSMError):
    """
    Base class for domain errors raised by command handlers.

    ``output`` holds whatever text the handler produced before failing; the
    machine hands the exception to the caller unchanged.
    """

    def __init__(self, message: str, output: str = "") -> None:
        self.output = output
        super().__init__(message)


class CommandCancelledError(HSMError):
    """
    Raised by a handler that observed a cancelled command context.
    """


class ValidationError(HSMError):
    """
    Raised when validation detects configuration constraint violations.
    """


class SnapshotError(HSMError):
    """
    Raised when a snapshot cannot be read or written.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class SnapshotNotFoundError(SnapshotError):
    """
    Raised when no snapshot exists at the storage location.
    """


class SnapshotFormatError(SnapshotError):
    """
    Raised when a stored snapshot exists but cannot be decoded.
    """


class SnapshotEncodeError(SnapshotError):
    """
    Raised when a machine's payload cannot be encoded for storage.
    """
