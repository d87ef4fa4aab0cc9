"""Multipart form construction for upload endpoints.

Two payload flavours exist. On a server the payload picks its own boundary
and hands out the matching ``Content-Type`` header. In a browser runtime the
transport must compute that header itself, so the payload exposes none.
Both share the same ``append`` semantics so services never branch on the
environment.
"""

from __future__ import annotations

import binascii
import json
import mimetypes
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date, datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter

from timberpy.environment import Environment, detect_environment
from timberpy.exceptions import TimberFormDataError

FilePart = tuple[str, Any, str]
TextPart = tuple[None, str]

_jsonable: TypeAdapter[Any] = TypeAdapter(Any)


def is_file_value(value: Any) -> bool:
    """Return True for values sent as a file part rather than text."""
    return isinstance(value, (bytes, bytearray, Path)) or hasattr(value, "read")


def format_timestamp(value: date) -> str:
    """Format a date or datetime as a UTC ISO-8601 timestamp.

    Naive datetimes are treated as local time. Plain dates map to midnight
    UTC. Output looks like ``2025-04-01T09:30:00.000Z``.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def to_json_string(value: Any) -> str:
    """Serialize a structure (models included) as compact JSON."""
    if isinstance(value, BaseModel):
        data = value.model_dump(mode="json", exclude_none=True)
    else:
        data = _jsonable.dump_python(value, mode="json", exclude_none=True)
    return json.dumps(data, separators=(",", ":"))


def serialize_form_value(value: Any) -> str:
    """Convert a non-file value to the text sent in a multipart field."""
    if isinstance(value, (BaseModel, dict, list, tuple)):
        return to_json_string(value)
    if isinstance(value, date):
        return format_timestamp(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def prepare_file(value: Any, fallback_name: str) -> FilePart:
    """Turn a file value into an httpx file tuple.

    Args:
        value: bytes, a filesystem path or a binary file-like object
        fallback_name: Filename used when the value carries none

    Returns:
        Tuple of (filename, content, content_type)
    """
    if isinstance(value, Path):
        if not value.exists():
            raise FileNotFoundError(f"File not found: {value}")
        filename = value.name
        content: Any = value.read_bytes()
    elif isinstance(value, (bytes, bytearray)):
        filename = fallback_name
        content = bytes(value)
    else:
        # file-like object, streamed by httpx
        name = getattr(value, "name", None)
        filename = os.path.basename(name) if isinstance(name, str) and name else fallback_name
        content = value

    content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return filename, content, content_type


class FormPayload(ABC):
    """Multipart body under construction plus the headers it must travel with."""

    def __init__(self) -> None:
        self.fields: list[tuple[str, FilePart | TextPart]] = []

    def append(self, name: str, value: Any) -> None:
        """Append a field. Files become file parts, anything else text."""
        if is_file_value(value):
            self.fields.append((name, prepare_file(value, name)))
        else:
            self.fields.append((name, (None, serialize_form_value(value))))

    def request_kwargs(self) -> dict[str, Any]:
        """Keyword arguments that make httpx encode this payload."""
        return {"files": list(self.fields)}

    def __len__(self) -> int:
        return len(self.fields)

    @property
    @abstractmethod
    def headers(self) -> dict[str, str]:
        """Headers to merge into the outgoing request."""


class ServerFormPayload(FormPayload):
    """Payload that owns its boundary and declares it up front."""

    def __init__(self) -> None:
        super().__init__()
        self.boundary = binascii.hexlify(os.urandom(16)).decode("ascii")

    @property
    def headers(self) -> dict[str, str]:
        # An empty payload is sent without a body.
        if not self.fields:
            return {}
        return {"Content-Type": f"multipart/form-data; boundary={self.boundary}"}


class BrowserFormPayload(FormPayload):
    """Payload whose Content-Type is computed by the transport when sent."""

    @property
    def headers(self) -> dict[str, str]:
        return {}


_PAYLOADS: dict[Environment, type[FormPayload]] = {
    Environment.SERVER: ServerFormPayload,
    Environment.BROWSER: BrowserFormPayload,
}


def get_form_data(environment: Environment | None = None) -> FormPayload:
    """Return a fresh multipart payload suited to the runtime.

    Args:
        environment: Runtime to build for; detected when omitted

    Raises:
        TimberFormDataError: If no payload implementation exists for it
    """
    if environment is None:
        environment = detect_environment()
    try:
        payload_class = _PAYLOADS[environment]
    except KeyError:
        raise TimberFormDataError(
            f"No multipart implementation for environment {environment!r}"
        ) from None
    return payload_class()


def append_indexed(form: FormPayload, name: str, values: Iterable[Any]) -> None:
    """Append each value as ``name[0]``, ``name[1]``, ..."""
    for index, value in enumerate(values):
        form.append(f"{name}[{index}]", value)
