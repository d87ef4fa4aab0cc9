"""Upload progress reporting and cooperative cancellation."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable, Iterator
from dataclasses import dataclass
from typing import Any

import httpx

from timberpy.exceptions import TimberCancelledError


@dataclass(frozen=True)
class UploadProgress:
    """Snapshot of an upload in progress."""

    loaded: int
    total: int | None = None

    @property
    def fraction(self) -> float | None:
        """Fraction of the body sent, or None when the size is unknown."""
        if not self.total:
            return None
        return self.loaded / self.total


ProgressCallback = Callable[[UploadProgress], Any]


class CancelToken:
    """Handle the caller signals to abort an in-flight request.

    Example:
        token = CancelToken()
        task = asyncio.create_task(client.bank_statement.create(data, cancel_token=token))
        token.cancel("user closed the dialog")
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str | None = None) -> None:
        """Signal cancellation. Calling it again keeps the first reason."""
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise TimberCancelledError(self.reason)

    async def wait(self) -> None:
        """Block until the token is cancelled."""
        await self._event.wait()


class ProgressStream(httpx.SyncByteStream, httpx.AsyncByteStream):
    """Request body wrapper reporting progress and honouring cancellation.

    Wraps the stream httpx built for the request, so the encoded bytes
    (and the multipart boundary) are unchanged.
    """

    def __init__(
        self,
        stream: Any,
        total: int | None = None,
        progress_callback: ProgressCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> None:
        self._stream = stream
        self._total = total
        self._progress_callback = progress_callback
        self._cancel_token = cancel_token
        self._loaded = 0

    def _advance(self, chunk: bytes) -> None:
        if self._cancel_token is not None:
            self._cancel_token.raise_if_cancelled()
        self._loaded += len(chunk)
        if self._progress_callback is not None:
            self._progress_callback(UploadProgress(self._loaded, self._total))

    def __iter__(self) -> Iterator[bytes]:
        self._loaded = 0
        for chunk in self._stream:
            self._advance(chunk)
            yield chunk

    async def __aiter__(self) -> AsyncIterator[bytes]:
        self._loaded = 0
        async for chunk in self._stream:
            self._advance(chunk)
            yield chunk
