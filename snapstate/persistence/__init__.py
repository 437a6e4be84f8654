"""Snapshot serialization and file storage."""

from snapstate.persistence.serializer import (
    decode_data,
    decode_snapshot,
    encode_data,
    encode_snapshot,
    snapshot_from_dict,
    snapshot_to_dict,
)
from snapstate.persistence.store import SnapshotStore

__all__ = [
    "SnapshotStore",
    "decode_data",
    "decode_snapshot",
    "encode_data",
    "encode_snapshot",
    "snapshot_from_dict",
    "snapshot_to_dict",
]
