"""Building blocks shared by resource services."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel

from timberpy.client_base import Transport, clean_params
from timberpy.exceptions import TimberValidationError
from timberpy.forms import FormPayload, append_indexed

CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)


def dump_json(data: BaseModel) -> dict[str, Any]:
    """Serialize a request model as a JSON body, leaving out unset fields."""
    return data.model_dump(by_alias=True, exclude_none=True, mode="json")


def require_file(value: Any) -> None:
    """Fail before any request is built when an upload has no file."""
    if value is None or (isinstance(value, (str, bytes, bytearray)) and not value):
        raise TimberValidationError("File is required")


class BaseService:
    """A resource service bound to one shared transport."""

    path: str = ""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def _url(self, *parts: str) -> str:
        return "/".join([self.path, *parts])

    def build_form(
        self,
        data: BaseModel,
        *,
        indexed: Collection[str] = (),
        exclude: Collection[str] = (),
    ) -> FormPayload:
        """Build a multipart payload from a request model.

        Fields left as None are skipped. Names in ``indexed`` are sent as
        ``name[0]``, ``name[1]``, ...; other lists and nested models are sent
        as one JSON string. Extra fields kept by the model are appended last.

        Args:
            data: Request model
            indexed: Field names using indexed array encoding
            exclude: Field names the caller appends itself
        """
        form = self.transport.form()
        for name, field in type(data).model_fields.items():
            if name in exclude:
                continue
            value = getattr(data, name)
            if value is None:
                continue
            key = field.serialization_alias or name
            if name in indexed:
                append_indexed(form, key, value)
            else:
                form.append(key, value)
        for key, value in (data.model_extra or {}).items():
            if value is not None:
                form.append(key, value)
        return form


class ResourceService(BaseService, Generic[CreateT, UpdateT]):
    """CRUD service for resources exchanging JSON bodies."""

    update_method = "PUT"

    async def list(self, **filters: Any) -> httpx.Response:
        """Fetch a page of resources.

        Args:
            **filters: Query parameters such as page, limit, search or sort

        Returns:
            Raw response holding the list envelope
        """
        return await self.transport.request(
            "GET", self.path, params=clean_params(filters)
        )

    async def get(self, id: str) -> httpx.Response:
        """Fetch one resource by ID."""
        return await self.transport.request("GET", self._url(id))

    async def create(self, data: CreateT) -> httpx.Response:
        """Create a resource."""
        return await self.transport.request("POST", self.path, json=dump_json(data))

    async def update(self, id: str, data: UpdateT) -> httpx.Response:
        """Update a resource. Fields left as None are not sent."""
        return await self.transport.request(
            self.update_method, self._url(id), json=dump_json(data)
        )

    async def delete(self, id: str) -> httpx.Response:
        """Delete a resource by ID."""
        return await self.transport.request("DELETE", self._url(id))
