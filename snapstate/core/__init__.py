"""
Core package: state hierarchy, command registry and machine runtime.
"""

# Import order matters to avoid circular dependencies
from .errors import (
    CommandCancelledError,
    CommandError,
    CommandNotAvailableError,
    HSMError,
    SnapshotEncodeError,
    SnapshotError,
    SnapshotFormatError,
    SnapshotNotFoundError,
    StateNotFoundError,
    ValidationError,
)
from .states import State, build_state_path
from .commands import Command, CommandDef, CommandHandler, RegisteredCommand, Result
from .registry import Registry
from .machine import Machine, Snapshot
from .validations import Validator

__all__ = [
    # Errors
    "HSMError",
    "StateNotFoundError",
    "CommandNotAvailableError",
    "CommandError",
    "CommandCancelledError",
    "ValidationError",
    "SnapshotError",
    "SnapshotNotFoundError",
    "SnapshotFormatError",
    "SnapshotEncodeError",
    # Hierarchy and commands
    "State",
    "build_state_path",
    "Command",
    "CommandDef",
    "CommandHandler",
    "RegisteredCommand",
    "Result",
    # Runtime
    "Registry",
    "Machine",
    "Snapshot",
    "Validator",
]
