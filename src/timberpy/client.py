"""Asynchronous Timber API client."""

from __future__ import annotations

import os
from typing import Any

import httpx

from timberpy._version import __version__
from timberpy.auth import ApiKeyAuth, BaseAuth, PartnerKeyAuth
from timberpy.client_base import ClientConfig, Transport
from timberpy.environment import Environment, detect_environment
from timberpy.exceptions import TimberValidationError
from timberpy.services import (
    AuthService,
    BankStatementService,
    BillPaymentService,
    ChequeService,
    CompanyService,
    CustomerService,
    EmployeeService,
    ExpenseCategoryService,
    ExpenseService,
    InvoiceItemService,
    InvoiceNumberService,
    InvoicePaymentService,
    InvoiceService,
    InvoiceTemplateService,
    RawExpenseService,
    SalaryService,
    TaxRateService,
    VendorPaymentService,
)


class TimberClient:
    """Asynchronous client for the Timber API.

    One HTTP connection pool is shared by every resource service. The
    registration service gets its own transport so it can authenticate with
    a partner key.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        partner_api_key: str | None = None,
        environment: Environment | None = None,
        timeout: float | httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Timber client.

        Args:
            api_key: SDK API key (or TIMBER_API_KEY env var)
            base_url: API host (or TIMBER_BASE_URL env var, default: https://api.timber.me)
            partner_api_key: Partner key used only for user registration
            environment: Runtime override; detected when omitted
            timeout: Request timeout; httpx's default applies when omitted
            transport: Custom httpx transport, mainly for testing

        Raises:
            TimberValidationError: If neither api_key nor partner_api_key is available
        """
        api_key = api_key or os.environ.get(ClientConfig.API_KEY_ENV)
        if not api_key and not partner_api_key:
            raise TimberValidationError("API key is required")

        host = base_url or os.environ.get(ClientConfig.BASE_URL_ENV) or ClientConfig.BASE_URL
        self.base_url = f"{host.rstrip('/')}{ClientConfig.API_PREFIX}"
        self.environment = environment or detect_environment()

        client_kwargs: dict[str, Any] = {}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        if transport is not None:
            client_kwargs["transport"] = transport

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "User-Agent": f"timberpy/{__version__}",
            },
            **client_kwargs,
        )

        registration_auth: BaseAuth
        if partner_api_key:
            registration_auth = PartnerKeyAuth(partner_api_key)
        else:
            registration_auth = ApiKeyAuth(api_key or "")

        self.transport = Transport(self.client, ApiKeyAuth(api_key or ""), self.environment)
        self.auth_transport = Transport(self.client, registration_auth, self.environment)

        self.auth = AuthService(self.auth_transport)
        self.expense = ExpenseService(self.transport)
        self.expense_category = ExpenseCategoryService(self.transport)
        self.raw_expense = RawExpenseService(self.transport)
        self.vendor_payment = VendorPaymentService(self.transport)
        self.bill_payment = BillPaymentService(self.transport)
        self.invoice = InvoiceService(self.transport)
        self.invoice_payment = InvoicePaymentService(self.transport)
        self.customer = CustomerService(self.transport)
        self.tax_rate = TaxRateService(self.transport)
        self.salary = SalaryService(self.transport)
        self.employee = EmployeeService(self.transport)
        self.cheque = ChequeService(self.transport)
        self.bank_statement = BankStatementService(self.transport)
        self.company = CompanyService(self.transport)
        self.invoice_number = InvoiceNumberService(self.transport)
        self.invoice_template = InvoiceTemplateService(self.transport)
        self.invoice_item = InvoiceItemService(self.transport)

    async def __aenter__(self) -> TimberClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()


def create_client(api_key: str | None = None, **options: Any) -> TimberClient:
    """Create a TimberClient.

    Args:
        api_key: SDK API key
        **options: base_url, partner_api_key, environment, timeout, transport

    Returns:
        Configured client

    Raises:
        TimberValidationError: If no credential is supplied
    """
    return TimberClient(api_key, **options)
