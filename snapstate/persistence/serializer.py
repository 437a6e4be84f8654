# snapstate/persistence/serializer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Snapshot serialization.

A snapshot is stored as a record with exactly two fields, ``currentStateName``
and ``data``, pretty-printed as JSON. Payloads are dumped and validated with
pydantic against their declared type, so dataclasses, pydantic models, enums,
sets, tuples and dicts with non-string keys all come back as they went in:
``decode_snapshot(encode_snapshot(s), type(s.data)) == s``.

A dataclass field is stored under a different key by annotating it with
``Annotated[T, pydantic.Field(alias="<key>")]``, e.g. for keys that are Python
keywords.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, Field, PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from snapstate.core.errors import SnapshotEncodeError, SnapshotFormatError
from snapstate.core.machine import Snapshot
from snapstate.interfaces.types import JSONDict

STATE_KEY = "currentStateName"

PayloadT = TypeVar("PayloadT")


class SnapshotRecord(BaseModel, Generic[PayloadT]):
    """Stored shape of a :class:`Snapshot`."""

    current_state_name: str = Field(alias=STATE_KEY)
    data: PayloadT


def snapshot_to_dict(snapshot: Snapshot[Any], data_type: Optional[Type[Any]] = None) -> JSONDict:
    """
    Convert a snapshot to a JSON-compatible dict.

    :param data_type: Declared payload type; defaults to the payload's own type.
    :raises SnapshotEncodeError: If the payload cannot be represented as JSON.
    """
    record = _record_for(snapshot, data_type)
    try:
        return record.model_dump(mode="json", by_alias=True)
    except (PydanticSerializationError, PydanticUserError) as e:
        raise SnapshotEncodeError(f"cannot encode snapshot: {e}") from e


def snapshot_from_dict(raw: Any, data_type: Optional[Type[Any]] = None) -> Snapshot[Any]:
    """
    Build a snapshot from a decoded JSON document.

    :param raw: The decoded document.
    :param data_type: Payload type to rebuild; None keeps the raw JSON value.
    :raises SnapshotFormatError: If the document does not have the expected shape.
    """
    try:
        record = _record_type(data_type).model_validate(raw)
    except ValidationError as e:
        raise SnapshotFormatError(f"invalid snapshot: {e}") from e
    return Snapshot(current_state_name=record.current_state_name, data=record.data)


def encode_snapshot(snapshot: Snapshot[Any], data_type: Optional[Type[Any]] = None) -> str:
    """
    Serialize a snapshot to pretty-printed JSON text.

    :raises SnapshotEncodeError: If the payload cannot be represented as JSON.
    """
    record = _record_for(snapshot, data_type)
    try:
        return record.model_dump_json(by_alias=True, indent=2) + "\n"
    except (PydanticSerializationError, PydanticUserError) as e:
        raise SnapshotEncodeError(f"cannot encode snapshot: {e}") from e


def decode_snapshot(text: str, data_type: Optional[Type[Any]] = None) -> Snapshot[Any]:
    """
    Parse JSON text produced by :func:`encode_snapshot`.

    :raises SnapshotFormatError: If the text is not valid JSON or has the wrong shape.
    """
    try:
        record = _record_type(data_type).model_validate_json(text)
    except ValidationError as e:
        raise SnapshotFormatError(f"invalid snapshot: {e}") from e
    return Snapshot(current_state_name=record.current_state_name, data=record.data)


def encode_data(value: Any, data_type: Optional[Type[Any]] = None) -> Any:
    """
    Convert a payload into JSON-compatible values.

    :raises SnapshotEncodeError: If the payload cannot be represented as JSON.
    """
    payload_type = _payload_type(value, data_type)
    try:
        return TypeAdapter(payload_type).dump_python(value, mode="json", by_alias=True)
    except (PydanticSerializationError, PydanticUserError) as e:
        raise SnapshotEncodeError(f"cannot encode payload of type {payload_type!r}: {e}") from e


def decode_data(raw: Any, data_type: Optional[Type[Any]] = None) -> Any:
    """
    Rebuild a payload of ``data_type`` from JSON-compatible values.

    :raises SnapshotFormatError: If ``raw`` does not fit ``data_type``.
    """
    if data_type is None:
        return raw
    try:
        return TypeAdapter(data_type).validate_python(raw)
    except ValidationError as e:
        raise SnapshotFormatError(f"invalid payload: {e}") from e


def _payload_type(value: Any, data_type: Optional[Type[Any]]) -> Any:
    if data_type is not None:
        return data_type
    return Any if value is None else type(value)


def _record_type(data_type: Optional[Type[Any]]) -> Type[SnapshotRecord[Any]]:
    return SnapshotRecord[Any if data_type is None else data_type]


def _record_for(snapshot: Snapshot[Any], data_type: Optional[Type[Any]]) -> SnapshotRecord[Any]:
    payload_type = _payload_type(snapshot.data, data_type)
    try:
        record_type = SnapshotRecord[payload_type]
    except PydanticUserError as e:
        raise SnapshotEncodeError(f"cannot encode payload of type {payload_type!r}: {e}") from e
    # Payload is stored as is, without validation.
    return record_type.model_construct(current_state_name=snapshot.current_state_name, data=snapshot.data)
