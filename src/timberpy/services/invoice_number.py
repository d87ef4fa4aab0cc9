"""Invoice numbering settings for the current company."""

import httpx

from timberpy.models import InvoiceNumberUpdate
from timberpy.services.base import BaseService, dump_json


class InvoiceNumberService(BaseService):
    """Service for invoice numbering.

    There is one numbering configuration per company, so no method takes an
    ID.
    """

    path = "/customer/invoice-number"

    async def get(self) -> httpx.Response:
        """Fetch the numbering configuration."""
        return await self.transport.request("GET", self.path)

    async def next(self) -> httpx.Response:
        """Fetch the number the next invoice will receive.

        The body looks like ``{"enabled": true, "next_invoice_number": 42}``.
        """
        return await self.transport.request("GET", self._url("next"))

    async def update(self, data: InvoiceNumberUpdate) -> httpx.Response:
        """Patch the numbering configuration."""
        return await self.transport.request("PATCH", self.path, json=dump_json(data))
