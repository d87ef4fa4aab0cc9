"""Shared transport functionality for the Timber API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from timberpy.auth import BaseAuth
from timberpy.environment import Environment
from timberpy.exceptions import TimberAPIError, TimberCancelledError
from timberpy.forms import FormPayload, get_form_data
from timberpy.uploads import CancelToken, ProgressCallback, ProgressStream

logger = logging.getLogger(__name__)


class ClientConfig:
    """Configuration for Timber API client."""

    BASE_URL = "https://api.timber.me"
    API_PREFIX = "/api/v1/user/sdk"
    API_KEY_ENV = "TIMBER_API_KEY"
    BASE_URL_ENV = "TIMBER_BASE_URL"


def parse_error_response(response: httpx.Response) -> TimberAPIError:
    """Wrap a non-success response in a TimberAPIError.

    Args:
        response: HTTP response from the API

    Returns:
        TimberAPIError carrying the untouched request and response
    """
    status_code = response.status_code
    try:
        error_data: Any = response.json()
    except ValueError:
        error_data = None

    if isinstance(error_data, dict):
        message = error_data.get("message") or response.text or "Unknown error"
    else:
        message = response.text or f"HTTP {status_code} error"
        error_data = {}

    return TimberAPIError(
        str(message), status_code, error_data, response.request, response
    )


def clean_params(params: dict[str, Any]) -> dict[str, Any]:
    """Drop unset query parameters."""
    return {key: value for key, value in params.items() if value is not None}


class Transport:
    """Base URL, credential and runtime shared by resource services.

    Read-only after construction. Every call composes its own headers, so
    concurrent calls never observe each other's content type.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        auth: BaseAuth,
        environment: Environment,
    ) -> None:
        """Initialize transport.

        Args:
            client: HTTP client whose base URL includes the API prefix
            auth: Credential attached to every request
            environment: Runtime used to pick the multipart payload flavour
        """
        self.client = client
        self.auth = auth
        self.environment = environment

    def form(self) -> FormPayload:
        """Return a new multipart payload for this transport's runtime."""
        return get_form_data(self.environment)

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        form: FormPayload | None = None,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> httpx.Response:
        """Send exactly one request.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            params: Query parameters
            json: JSON body
            form: Multipart body
            progress_callback: Called with UploadProgress as the body is sent
            cancel_token: Aborts the exchange when cancelled

        Returns:
            HTTP response

        Raises:
            TimberAPIError: On status codes >= 400
            TimberCancelledError: If cancel_token fired before completion
        """
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        headers = self.auth.get_headers()
        kwargs: dict[str, Any] = {}
        if form is not None:
            headers.update(form.headers)
            kwargs.update(form.request_kwargs())
        elif json is not None:
            kwargs["json"] = json

        request = self.client.build_request(
            method, endpoint, params=params, headers=headers, **kwargs
        )

        if progress_callback is not None or cancel_token is not None:
            length = request.headers.get("Content-Length")
            request.stream = ProgressStream(
                request.stream,
                total=int(length) if length else None,
                progress_callback=progress_callback,
                cancel_token=cancel_token,
            )

        logger.debug("%s %s", method, request.url)

        if cancel_token is None:
            response = await self.client.send(request)
        else:
            response = await self._send_cancellable(request, cancel_token)

        logger.debug("%s %s -> %s", method, request.url, response.status_code)

        if response.status_code >= 400:
            raise parse_error_response(response)

        return response

    async def _send_cancellable(
        self, request: httpx.Request, cancel_token: CancelToken
    ) -> httpx.Response:
        """Race the send against the cancel token."""
        send = asyncio.ensure_future(self.client.send(request))
        cancelled = asyncio.ensure_future(cancel_token.wait())
        try:
            done, _ = await asyncio.wait(
                {send, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            send.cancel()
            raise
        finally:
            cancelled.cancel()

        if send in done:
            return send.result()

        send.cancel()
        # Cancellation of the calling task still propagates from here.
        await asyncio.wait({send})
        if not send.cancelled():
            send.exception()
        raise TimberCancelledError(cancel_token.reason)
