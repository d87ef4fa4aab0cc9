"""Catalogue of items that can be put on invoices."""

from __future__ import annotations

from typing import Any

import httpx

from timberpy.client_base import clean_params
from timberpy.models import InvoiceItemRequest, InvoiceItemUpdate
from timberpy.services.base import BaseService, dump_json


class InvoiceItemService(BaseService):
    """Service for invoice items."""

    path = "/customer/invoice-item"

    async def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
        search: str | None = None,
        filters: str | None = None,
    ) -> httpx.Response:
        """Fetch a page of invoice items.

        Args:
            page: Page number
            limit: Items per page
            sort: Sort expression understood by the API
            search: Free-text search
            filters: Encoded filter expression

        Returns:
            Raw response holding the list envelope
        """
        params: dict[str, Any] = {
            "page": page,
            "limit": limit,
            "sort": sort,
            "search": search,
            "filters": filters,
        }
        return await self.transport.request(
            "GET", self.path, params=clean_params(params)
        )

    async def suggestions(self, search: str) -> httpx.Response:
        """Suggest invoice items matching a search term."""
        return await self.transport.request(
            "GET", self._url("suggestions"), params={"search": search}
        )

    async def create(self, data: InvoiceItemRequest) -> httpx.Response:
        """Create an invoice item."""
        return await self.transport.request("POST", self.path, json=dump_json(data))

    async def update(self, id: str, data: InvoiceItemUpdate) -> httpx.Response:
        """Patch an invoice item."""
        return await self.transport.request(
            "PATCH", self._url(id), json=dump_json(data)
        )
