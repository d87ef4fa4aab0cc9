"""Pytest fixtures for timberpy tests."""

import asyncio
from email.parser import BytesParser
from email.policy import default
from typing import Any

import httpx
import pytest

from timberpy import Environment, TimberClient
from timberpy.exceptions import TimberCancelledError


class RecordingTransport(httpx.AsyncBaseTransport):
    """Stub transport that records what reached it and how it ended."""

    def __init__(
        self,
        status_code: int = 201,
        content: bytes | None = None,
        delay: float = 0.0,
        abort_delay: float = 0.0,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.delay = delay
        self.abort_delay = abort_delay
        self.requests: list[httpx.Request] = []
        self.completed = 0
        self.aborted = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        try:
            await request.aread()
            if self.delay:
                await asyncio.sleep(self.delay)
        except (asyncio.CancelledError, TimberCancelledError):
            self.aborted += 1
            if self.abort_delay:
                await asyncio.sleep(self.abort_delay)
            raise
        self.completed += 1
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json={"_id": "created"})


def parse_multipart(request: httpx.Request) -> list[tuple[str, str | None, bytes]]:
    """Decode a multipart request body into (name, filename, content) parts."""
    content_type = request.headers["Content-Type"].encode()
    message = BytesParser(policy=default).parsebytes(
        b"Content-Type: " + content_type + b"\r\n\r\n" + request.content
    )
    parts = []
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        parts.append((name, part.get_filename(), part.get_payload(decode=True)))
    return parts


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep credentials from the developer's shell out of the tests."""
    monkeypatch.delenv("TIMBER_API_KEY", raising=False)
    monkeypatch.delenv("TIMBER_BASE_URL", raising=False)


@pytest.fixture
def api_key() -> str:
    """Return a test API key."""
    return "test_api_key_12345"


@pytest.fixture
def partner_api_key() -> str:
    """Return a test partner key."""
    return "test_partner_key_67890"


@pytest.fixture
def base_url() -> str:
    """Return the base API URL."""
    return "https://api.timber.me/api/v1/user/sdk"


@pytest.fixture
async def client(api_key: str):
    """Create a TimberClient for testing."""
    client = TimberClient(api_key, environment=Environment.SERVER)
    yield client
    await client.close()


@pytest.fixture
def transport_factory() -> type[RecordingTransport]:
    """Return the stub transport class for tests needing custom behaviour."""
    return RecordingTransport


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Return a stub transport answering 201."""
    return RecordingTransport()


@pytest.fixture
async def stub_client(api_key: str, recording_transport: RecordingTransport):
    """Create a TimberClient wired to the recording transport."""
    client = TimberClient(
        api_key, environment=Environment.SERVER, transport=recording_transport
    )
    yield client
    await client.close()


@pytest.fixture
def parse_form():
    """Return the multipart decoder."""
    return parse_multipart


@pytest.fixture
def invoice_payload() -> dict[str, Any]:
    """Return invoice fields accepted by InvoiceData."""
    return {
        "payment_method": "bank_transfer",
        "title": "April services",
        "company": "company_123",
        "customer": {
            "name": "Acme LLC",
            "email": "billing@acme.example",
            "country_code": "+971",
            "mobile": "5522334455",
            "address": "1 Sheikh Zayed Rd",
        },
        "biller": {
            "name": "Timber Test FZE",
            "email": "accounts@timber.example",
            "country_code": "+971",
            "mobile": "5511223344",
            "address": "IFZA Dubai",
            "trn": "222333222332323",
        },
        "invoice_number": "INV-0001",
        "currency": "AED",
        "items": [
            {
                "id": "item_1",
                "title": "Consulting",
                "quantity": 2,
                "rate": 500,
                "vat": 5,
                "discount": 0,
                "total": 1050,
            }
        ],
        "sub_total": 1000,
        "vat_total": 50,
        "discount_total": 0,
        "total": 1050,
        "amount_due": 1050,
    }


@pytest.fixture
def company_payload() -> dict[str, Any]:
    """Return company fields accepted by CompanyData, license excluded."""
    return {
        "name": "John Enterprises",
        "currency": "AED",
        "language": "English",
        "address": "123 Main St",
        "city": "Dubai",
        "state": "Dubai",
        "zip_code": "00000",
        "country": "UAE",
        "email": "john@example.com",
        "country_code": "+971",
        "mobile": "5522334455",
        "tax_number": "123456789",
        "financial_start_date": "2025-04-01T00:00:00.000Z",
        "license_expiry": "2026-04-01T00:00:00.000Z",
        "license_issue_date": "2025-04-13T00:00:00.000Z",
        "sector": ["product", "service"],
        "user_role": "CEO",
        "business_years": "1-2",
        "size": "1-10",
        "current_method": "Accountant",
        "purpose": "Financial Services",
        "license_number": "LN-123456",
        "license_authority": "IFZA (Dubai)",
        "trn": "222333222332323",
    }
