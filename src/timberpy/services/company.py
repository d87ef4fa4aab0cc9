"""Companies owned by the authenticated user."""

from __future__ import annotations

import httpx

from timberpy.forms import FormPayload
from timberpy.models import CompanyData, CompanyUpdate
from timberpy.services.base import BaseService, require_file
from timberpy.uploads import CancelToken, ProgressCallback


class CompanyService(BaseService):
    """Service for companies.

    Company writes are multipart: the trade license is uploaded as the
    ``license`` file field and each sector is sent as ``sector[<n>]``.
    """

    path = "/customer/company"

    def _company_form(self, data: CompanyData | CompanyUpdate) -> FormPayload:
        form = self.build_form(data, indexed=("sector",), exclude=("license",))
        # only the first license document is accepted
        if data.license:
            form.append("license", data.license[0])
        return form

    async def get(self) -> httpx.Response:
        """Fetch the company the API key belongs to."""
        return await self.transport.request("GET", self.path)

    async def create(
        self,
        data: CompanyData,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Create a company.

        Args:
            data: Company payload, ``license`` must hold at least one file
            progress_callback: Called as the form body is uploaded
            cancel_token: Aborts the upload when cancelled

        Raises:
            TimberValidationError: If no license file is given
        """
        require_file(data.license[0] if data.license else None)
        form = self._company_form(data)
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
        data: CompanyUpdate,
        *,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Update a company. The license is only replaced when given."""
        form = self._company_form(data)
        return await self.transport.request(
            "PUT",
            self._url(id),
            form=form,
            progress_callback=progress_callback,
            cancel_token=cancel_token,
        )

    async def default(self, id: str) -> httpx.Response:
        """Make a company the default one for the user."""
        return await self.transport.request("PATCH", self._url(id, "default"))
