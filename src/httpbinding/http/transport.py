# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single round trip over httpx with binding error mapping."""

from __future__ import annotations

import logging
from contextlib import closing
from dataclasses import dataclass
from time import monotonic

import httpx

from ..errors import ErrorCategory, ResponseReadError, TransportError, categorize_exception
from ..url import redact_url

logger = logging.getLogger(__name__)


@dataclass
class HttpResult:
    """Fully read response; the underlying connection is already released."""

    status_code: int
    reason_phrase: str = ""
    content: bytes = b""
    url: str | None = None

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason_phrase}".strip()

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def status_metadata(self) -> dict[str, str]:
        return {"status": self.status_line, "status_code": str(self.status_code)}


def _transport_error(exc: Exception, request: httpx.Request | None, url: str) -> TransportError:
    category = categorize_exception(exc)
    target = redact_url(request.url if request is not None else url)
    return TransportError(f"{type(exc).__name__} for {target}: {exc}", category)


def build_request(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    content: bytes | None = None,
    timeout: float | None = None,
) -> httpx.Request:
    """Build a request on the shared client; an unusable URL is a TransportError."""
    try:
        return client.build_request(method, url, headers=headers, content=content, timeout=timeout)
    except httpx.InvalidURL as exc:
        raise _transport_error(exc, None, url) from exc


def _deadline_error(request: httpx.Request, timeout: float) -> TransportError:
    return TransportError(
        f"{request.method} {redact_url(request.url)} exceeded the {timeout:g}s call timeout",
        ErrorCategory.TIMEOUT,
    )


def send_request(client: httpx.Client, request: httpx.Request, *, timeout: float | None = None) -> HttpResult:
    """
    Send `request`, read the whole body and close the response.

    `timeout` bounds the whole round trip, not just each socket operation: the body is
    read chunk by chunk and the call fails once the deadline has passed. Failures before
    headers arrive (and any timeout) raise TransportError; failures while reading the body
    raise ResponseReadError. Non-2xx statuses are returned, not raised.
    """
    deadline = monotonic() + timeout if timeout is not None and timeout > 0 else None
    try:
        response = client.send(request, stream=True)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise _transport_error(exc, request, str(request.url)) from exc

    with closing(response):
        content = bytearray()
        try:
            if deadline is not None and monotonic() > deadline:
                raise _deadline_error(request, timeout)
            for chunk in response.iter_bytes():
                content.extend(chunk)
                if deadline is not None and monotonic() > deadline:
                    raise _deadline_error(request, timeout)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"timed out reading body from {redact_url(request.url)}: {exc}", ErrorCategory.TIMEOUT
            ) from exc
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise ResponseReadError(f"failed reading body from {redact_url(request.url)}: {exc}") from exc

        logger.debug(
            "%s %s -> %s (%d bytes)",
            request.method,
            redact_url(request.url),
            response.status_code,
            len(content),
        )
        return HttpResult(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            content=bytes(content),
            url=redact_url(response.url),
        )


__all__ = ["HttpResult", "build_request", "send_request"]
