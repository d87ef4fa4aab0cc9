"""Receipts uploaded for automatic expense extraction."""

from __future__ import annotations

from typing import Any

import httpx

from timberpy.client_base import clean_params
from timberpy.models import RawExpenseData
from timberpy.services.base import BaseService, require_file
from timberpy.uploads import CancelToken, ProgressCallback


class RawExpenseService(BaseService):
    """Service for raw expenses."""

    path = "/customer/raw-expense"

    async def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        **filters: Any,
    ) -> httpx.Response:
        """Fetch a page of raw expenses."""
        params: dict[str, Any] = {"page": page, "limit": limit}
        params.update(filters)
        return await self.transport.request(
            "GET", self.path, params=clean_params(params)
        )

    async def get(self, id: str) -> httpx.Response:
        """Fetch a raw expense by ID."""
        return await self.transport.request("GET", self._url(id))

    async def create(
        self,
        data: RawExpenseData,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Upload a receipt.

        Raises:
            TimberValidationError: If the file is empty
        """
        require_file(data.file)
        form = self.build_form(data)
        return await self.transport.request(
            "POST",
            self.path,
            form=form,
            progress_callback=progress_callback,
            cancel_token=cancel_token,
        )

    async def delete(self, id: str) -> httpx.Response:
        """Delete a raw expense by ID."""
        return await self.transport.request("DELETE", self._url(id))
