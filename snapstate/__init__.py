"""snapstate: hierarchical state machines for non-interactive CLI programs

Each invocation of a program restores a machine from a persisted snapshot
(current state name + user data), executes a single command and writes the
new snapshot back.

Responsibilities:
    - State hierarchy with behavior inherited from ancestor states
    - Command registration and lookup along the ancestor chain
    - Single-command execution with explicit transitions
    - Snapshot export/import and JSON file persistence

Errors:
    All library errors derive from HSMError. Handler errors are passed
    through to the caller unchanged.

Logging:
    Modules log through ``logging.getLogger(__name__)``; only the CLI
    runner configures handlers.
"""

from snapstate.core import (
    Command,
    CommandCancelledError,
    CommandDef,
    CommandError,
    CommandNotAvailableError,
    HSMError,
    Machine,
    Registry,
    Result,
    Snapshot,
    SnapshotEncodeError,
    SnapshotError,
    SnapshotFormatError,
    SnapshotNotFoundError,
    State,
    StateNotFoundError,
    ValidationError,
    Validator,
)
from snapstate.runtime.context import CommandContext

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandCancelledError",
    "CommandContext",
    "CommandDef",
    "CommandError",
    "CommandNotAvailableError",
    "HSMError",
    "Machine",
    "Registry",
    "Result",
    "Snapshot",
    "SnapshotEncodeError",
    "SnapshotError",
    "SnapshotFormatError",
    "SnapshotNotFoundError",
    "State",
    "StateNotFoundError",
    "ValidationError",
    "Validator",
]
