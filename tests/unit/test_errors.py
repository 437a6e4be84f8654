# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from snapstate.core.errors import (
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


@pytest.mark.parametrize(
    "error_class",
    [
        StateNotFoundError,
        CommandNotAvailableError,
        CommandError,
        CommandCancelledError,
        ValidationError,
        SnapshotError,
    ],
)
def test_error_hierarchy(error_class):
    assert issubclass(error_class, HSMError)


def test_snapshot_errors_share_base():
    assert issubclass(SnapshotNotFoundError, SnapshotError)
    assert issubclass(SnapshotFormatError, SnapshotError)
    assert issubclass(SnapshotEncodeError, SnapshotError)
    assert not issubclass(SnapshotNotFoundError, SnapshotFormatError)


def test_state_not_found_message():
    e = StateNotFoundError("Missing")
    assert e.state_name == "Missing"
    assert str(e) == "state 'Missing' not found in registry"


def test_command_not_available_names_command_and_state():
    e = CommandNotAvailableError("create", "SheetExists")
    assert e.command_name == "create"
    assert e.state_name == "SheetExists"
    assert str(e) == "command 'create' not available in state 'SheetExists'"


def test_command_error_output_defaults_to_empty():
    assert CommandError("usage: inc").output == ""
    assert CommandError("failed", output="half done").output == "half done"


def test_snapshot_error_keeps_path():
    e = SnapshotFormatError("bad json", path="/tmp/x.json")
    assert e.path == "/tmp/x.json"
    assert str(e) == "bad json"
    assert SnapshotNotFoundError("gone").path is None
