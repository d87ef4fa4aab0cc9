"""Bank statements submitted for reconciliation."""

from __future__ import annotations

from typing import Any

import httpx

from timberpy.client_base import clean_params
from timberpy.models import BankStatementData
from timberpy.services.base import BaseService, require_file
from timberpy.uploads import CancelToken, ProgressCallback


class BankStatementService(BaseService):
    """Service for bank statements.

    Statements can be large, so uploads report progress and can be
    cancelled.

    Example:
        token = CancelToken()
        response = await client.bank_statement.create(
            BankStatementData(file=Path("statement.pdf")),
            progress_callback=lambda p: print(f"{p.loaded}/{p.total}"),
            cancel_token=token,
        )
    """

    path = "/customer/reconcile/bank-statement"

    async def list(
        self, page: int | None = None, limit: int | None = None
    ) -> httpx.Response:
        """Fetch a page of bank statements."""
        params: dict[str, Any] = {"page": page, "limit": limit}
        return await self.transport.request(
            "GET", self.path, params=clean_params(params)
        )

    async def create(
        self,
        data: BankStatementData,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Upload a bank statement.

        Args:
            data: Statement file
            progress_callback: Called as the file is uploaded
            cancel_token: Aborts the upload when cancelled

        Raises:
            TimberValidationError: If the file is empty
            TimberCancelledError: If cancel_token fires first
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
