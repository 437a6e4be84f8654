# tests/unit/persistence/test_store.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import json
import os
from dataclasses import dataclass
from typing import Any
from unittest.mock import patch

import pytest

from snapstate import Snapshot, SnapshotEncodeError, SnapshotFormatError, SnapshotNotFoundError
from snapstate.interfaces.protocols import SnapshotStorage
from snapstate.persistence.store import SnapshotStore
from tests.helpers import Payload


@pytest.fixture
def store(tmp_path):
    return SnapshotStore(tmp_path / "state.json", Payload)


def test_store_satisfies_storage_protocol(store):
    assert isinstance(store, SnapshotStorage)


def test_missing_file(store):
    assert not store.exists()
    with pytest.raises(SnapshotNotFoundError) as info:
        store.load()
    assert info.value.path == store.path


def test_save_then_load(store):
    snapshot = Snapshot("Ready", Payload(count=2, notes=["x"]))
    store.save(snapshot)
    assert store.exists()
    assert store.load() == snapshot


def test_saved_file_is_readable_json(store):
    store.save(Snapshot("Ready", Payload(count=2)))
    with open(store.path, encoding="utf-8") as f:
        assert json.load(f) == {"currentStateName": "Ready", "data": {"count": 2, "notes": []}}


def test_malformed_file(store):
    with open(store.path, "w", encoding="utf-8") as f:
        f.write("{ nope")
    with pytest.raises(SnapshotFormatError) as info:
        store.load()
    assert store.path in str(info.value)


def test_save_replaces_previous_snapshot(store):
    store.save(Snapshot("A", Payload(count=1)))
    store.save(Snapshot("B", Payload(count=2)))
    assert store.load() == Snapshot("B", Payload(count=2))


def test_failed_write_keeps_previous_snapshot_and_no_temp_files(store, tmp_path):
    store.save(Snapshot("A", Payload(count=1)))

    with patch("snapstate.persistence.store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            store.save(Snapshot("B", Payload(count=2)))

    assert store.load() == Snapshot("A", Payload(count=1))
    assert os.listdir(tmp_path) == ["state.json"]


@dataclass
class Opaque:
    thing: Any = None


def test_unencodable_payload_keeps_previous_snapshot(tmp_path):
    store = SnapshotStore(tmp_path / "state.json", Opaque)
    store.save(Snapshot("A", Opaque(thing="fine")))

    with pytest.raises(SnapshotEncodeError):
        store.save(Snapshot("B", Opaque(thing=object())))

    assert store.load() == Snapshot("A", Opaque(thing="fine"))
    assert os.listdir(tmp_path) == ["state.json"]
