# snapstate/persistence/store.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, Generic, Optional, Type, Union

from snapstate.core.errors import SnapshotFormatError, SnapshotNotFoundError
from snapstate.core.machine import Snapshot
from snapstate.interfaces.types import DataT
from snapstate.persistence.serializer import decode_snapshot, encode_snapshot

logger = logging.getLogger(__name__)


class SnapshotStore(Generic[DataT]):
    """
    Keeps one snapshot in a JSON file.

    Writes go to a temporary file in the same directory which then replaces the
    target, so a crash mid-write leaves the previous snapshot intact.
    """

    def __init__(self, path: Union[str, "os.PathLike[str]"], data_type: Optional[Type[DataT]] = None) -> None:
        """
        :param path: Location of the snapshot file.
        :param data_type: Payload type rebuilt on load; None keeps raw JSON values.
        """
        self._path = os.fspath(path)
        self._data_type = data_type

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return os.path.isfile(self._path)

    def load(self) -> Snapshot[DataT]:
        """
        Read and decode the stored snapshot.

        :raises SnapshotNotFoundError: If the file does not exist.
        :raises SnapshotFormatError: If the file cannot be decoded.
        """
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise SnapshotNotFoundError(f"no snapshot at {self._path}", path=self._path) from e
        except UnicodeDecodeError as e:
            raise SnapshotFormatError(f"snapshot at {self._path} is not UTF-8 text", path=self._path) from e

        try:
            snapshot = decode_snapshot(text, self._data_type)
        except SnapshotFormatError as e:
            raise SnapshotFormatError(f"malformed snapshot at {self._path}: {e}", path=self._path) from e
        logger.debug("Loaded snapshot from %s (state %r)", self._path, snapshot.current_state_name)
        return snapshot

    def save(self, snapshot: Snapshot[Any]) -> None:
        """
        Encode ``snapshot`` and atomically replace the stored file.

        :raises SnapshotEncodeError: If the payload cannot be encoded; the stored file is untouched.
        """
        text = encode_snapshot(snapshot, self._data_type)
        directory = os.path.dirname(os.path.abspath(self._path))
        fd, tmp_path = tempfile.mkstemp(prefix=".snapshot-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("Saved snapshot to %s (state %r)", self._path, snapshot.current_state_name)
