"""Recorded expenses."""

from __future__ import annotations

from typing import Any

import httpx

from timberpy.client_base import clean_params
from timberpy.models import ExpenseData, ExpenseUpdate
from timberpy.services.base import BaseService
from timberpy.uploads import CancelToken, ProgressCallback


class ExpenseService(BaseService):
    """Service for expenses.

    Writes are multipart so a receipt can be attached as ``file``. Line
    ``items`` are sent as a JSON string.
    """

    path = "/customer/expense"

    async def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        **filters: Any,
    ) -> httpx.Response:
        """Fetch a page of expenses."""
        params: dict[str, Any] = {"page": page, "limit": limit}
        params.update(filters)
        return await self.transport.request(
            "GET", self.path, params=clean_params(params)
        )

    async def get(self, id: str) -> httpx.Response:
        """Fetch an expense by ID."""
        return await self.transport.request("GET", self._url(id))

    async def create(
        self,
        data: ExpenseData,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Create an expense, optionally with a receipt."""
        return await self.transport.request(
            "POST",
            self.path,
            form=self.build_form(data),
            progress_callback=progress_callback,
            cancel_token=cancel_token,
        )

    async def update(
        self,
        id: str,
        data: ExpenseUpdate,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Update an expense. The receipt is only replaced when given."""
        return await self.transport.request(
            "PUT",
            self._url(id),
            form=self.build_form(data),
            progress_callback=progress_callback,
            cancel_token=cancel_token,
        )

    async def delete(self, id: str) -> httpx.Response:
        """Delete an expense by ID."""
        return await self.transport.request("DELETE", self._url(id))
