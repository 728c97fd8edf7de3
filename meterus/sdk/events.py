"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Meterus, a product of Garudex Labs

CloudEvent construction for ingestion.

``new_cloud_event`` validates the payload against the value set a protobuf
``Struct`` can hold (null, bool, number, string, list, string-keyed map)
and raises ``EncodingError`` before anything is built when it cannot.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from google.protobuf import struct_pb2, timestamp_pb2

from meterus.exceptions import EncodingError
from meterus.protocol.meters.v1.meters_pb2 import CloudEvent

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]

DEFAULT_SPEC_VERSION = "1.0"


def _describe(path: str) -> str:
    return path or "<root>"


def _normalize(value: Any, path: str) -> JSONValue:
    """Return a plain dict/list copy of ``value`` or raise ``EncodingError``."""
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, numbers.Real):
        return value if isinstance(value, (int, float)) else float(value)
    if isinstance(value, Mapping):
        normalized = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(
                    f"payload keys must be strings, got {type(key).__name__} {key!r} at {_describe(path)}",
                    path=path,
                )
            normalized[key] = _normalize(item, f"{path}.{key}" if path else key)
        return normalized
    if isinstance(value, (list, tuple)):
        return [_normalize(item, f"{path}[{index}]") for index, item in enumerate(value)]
    raise EncodingError(
        f"cannot encode value of type {type(value).__name__} at {_describe(path)}",
        path=path,
    )


def to_struct(data: Optional[Mapping[str, Any]]) -> struct_pb2.Struct:
    """Convert a mapping to a protobuf ``Struct``.

    Raises:
        EncodingError: If ``data`` holds a value a Struct cannot represent.
    """
    if data is None:
        return struct_pb2.Struct()
    if not isinstance(data, Mapping):
        raise EncodingError(f"payload must be a mapping, got {type(data).__name__}")

    normalized = _normalize(data, "")
    struct = struct_pb2.Struct()
    try:
        struct.update(normalized)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"cannot encode payload: {e}") from e
    return struct


def to_timestamp(value: datetime) -> timestamp_pb2.Timestamp:
    """Convert a datetime to a protobuf ``Timestamp``; naive values are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    timestamp = timestamp_pb2.Timestamp()
    timestamp.FromDatetime(value)
    return timestamp


def new_cloud_event(
    id: str,
    source: str,
    spec_version: str,
    event_type: str,
    time: Optional[datetime],
    subject: str,
    data: Optional[Mapping[str, Any]] = None,
) -> CloudEvent:
    """Build a CloudEvent ready for ``MeteringService.ingest``.

    Args:
        id: Caller-chosen event identifier, unique per event.
        source: Producer of the event.
        spec_version: CloudEvents spec version, usually ``"1.0"``.
        event_type: Event type; meters count events whose type matches theirs.
        time: When the event happened. None means now.
        subject: Subject the usage is attributed to.
        data: Structured payload (group-by dimensions, values).

    Raises:
        EncodingError: If ``data`` cannot be encoded.
    """
    payload = to_struct(data)
    return CloudEvent(
        id=id,
        source=source,
        spec_version=spec_version,
        type=event_type,
        time=to_timestamp(time if time is not None else datetime.now(timezone.utc)),
        subject=subject,
        data=payload,
    )
