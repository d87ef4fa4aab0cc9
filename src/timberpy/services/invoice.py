"""Sales invoices."""

from __future__ import annotations

from typing import Any

import httpx

from timberpy.client_base import clean_params
from timberpy.models import InvoiceData, InvoiceUpdate
from timberpy.services.base import BaseService
from timberpy.uploads import CancelToken, ProgressCallback


class InvoiceService(BaseService):
    """Service for invoices.

    Invoices are written as multipart form data because they may carry a
    logo file. ``items``, ``customer`` and ``biller`` travel as JSON strings,
    dates as UTC ISO-8601 timestamps.

    Example:
        response = await client.invoice.list(page=1, limit=10)
        invoices = response.json()
    """

    path = "/customer/invoice"

    async def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        **filters: Any,
    ) -> httpx.Response:
        """Fetch a page of invoices.

        Args:
            page: Page number
            limit: Invoices per page
            **filters: Additional query parameters

        Returns:
            Raw response holding the list envelope
        """
        params: dict[str, Any] = {"page": page, "limit": limit}
        params.update(filters)
        return await self.transport.request(
            "GET", self.path, params=clean_params(params)
        )

    async def get(self, id: str) -> httpx.Response:
        """Fetch an invoice by ID."""
        return await self.transport.request("GET", self._url(id))

    async def create(
        self,
        data: InvoiceData,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Create an invoice.

        Args:
            data: Invoice payload
            progress_callback: Called as the form body is uploaded
            cancel_token: Aborts the upload when cancelled

        Returns:
            Raw response holding the created invoice
        """
        form = self.build_form(data)
        return await self.transport.request(
            "POST",
            self.path,
            form=form,
            progress_callback=progress_callback,
            cancel_token=cancel_token,
        )

    async def update(
        self,
        id: str,
        data: InvoiceUpdate,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Update an invoice. Fields left as None, a logo included, are not sent."""
        form = self.build_form(data)
        return await self.transport.request(
            "PUT",
            self._url(id),
            form=form,
            progress_callback=progress_callback,
            cancel_token=cancel_token,
        )

    async def delete(self, id: str, remarks: str) -> httpx.Response:
        """Delete an invoice.

        The API records why an invoice was removed, so ``remarks`` is sent in
        the body of the DELETE request as given.
        """
        return await self.transport.request(
            "DELETE", self._url(id), json={"remarks": remarks}
        )

    async def download(self, id: str) -> bytes:
        """Download the invoice PDF.

        Returns:
            The undecoded response body

        Example:
            pdf = await client.invoice.download("invoice_id")
            Path("invoice.pdf").write_bytes(pdf)
        """
        response = await self.transport.request("GET", self._url("download", id))
        return response.content
