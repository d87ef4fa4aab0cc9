"""Cheque scans submitted for reconciliation."""

from __future__ import annotations

from typing import Any

import httpx

from timberpy.client_base import clean_params
from timberpy.models import ChequeData
from timberpy.services.base import BaseService, require_file
from timberpy.uploads import CancelToken, ProgressCallback


class ChequeService(BaseService):
    """Service for cheques.

    Example:
        with open("cheque.jpg", "rb") as scan:
            response = await client.cheque.create(ChequeData(file=scan))
    """

    path = "/customer/reconcile/cheque"

    async def list(
        self, page: int | None = None, limit: int | None = None
    ) -> httpx.Response:
        """Fetch a page of cheques."""
        params: dict[str, Any] = {"page": page, "limit": limit}
        return await self.transport.request(
            "GET", self.path, params=clean_params(params)
        )

    async def create(
        self,
        data: ChequeData,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Upload a cheque scan.

        Args:
            data: Cheque file and, optionally, the company it belongs to
            progress_callback: Called as the file is uploaded
            cancel_token: Aborts the upload when cancelled

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
