# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP binding: read (GET) and invoke (configured method) against one endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextlib import suppress
from typing import Any

import httpx

from .config import HttpSettings, load_http_settings
from .errors import BindingError, BindingNotInitializedError, UnsupportedOperationError
from .http.auth import add_credentials
from .http.client import create_default_http_client
from .http.transport import HttpResult, build_request, send_request
from .metadata import HttpMetadata, parse_metadata
from .models import InvokeRequest, InvokeResponse, OperationKind, ReadResponse
from .url import redact_url

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
DEFAULT_INVOKE_METHOD = "POST"

ReadHandler = Callable[[ReadResponse], Any]


def _resolve_operation(value: OperationKind | str) -> OperationKind | None:
    try:
        return OperationKind(value)
    except ValueError:
        return None


class HttpBinding:
    """
    Binds a host runtime to a single HTTP endpoint.

    The binding is created uninitialized; `init` parses the property bag once and the
    resulting HttpMetadata is shared, unchanged, by every subsequent call. The httpx
    client is pooled and safe to use from concurrent callers.
    """

    def __init__(self, http_client: httpx.Client | None = None, settings: HttpSettings | None = None):
        self.settings = settings or load_http_settings()
        self.http_client = http_client
        self._metadata: HttpMetadata | None = None

    @property
    def metadata(self) -> HttpMetadata:
        if self._metadata is None:
            raise BindingNotInitializedError("binding used before init")
        return self._metadata

    @property
    def ready(self) -> bool:
        return self._metadata is not None

    def init(self, properties: Mapping[str, Any] | None) -> None:
        """Parse binding properties; may only be called once per instance."""
        if self._metadata is not None:
            raise BindingError("binding is already initialized")
        metadata = parse_metadata(properties)
        if self.http_client is None:
            self.http_client = create_default_http_client(self.settings)
        self._metadata = metadata
        logger.info("HTTP binding ready for %s", redact_url(metadata.url))

    def operations(self) -> list[OperationKind]:
        return [OperationKind.CREATE]

    def read(self, handler: ReadHandler) -> None:
        """
        GET the configured URL and hand the full body to `handler` exactly once.

        Exceptions raised by the handler propagate to the caller unchanged.
        """
        result = self._round_trip("GET", timeout=self.settings.read_timeout)
        handler(ReadResponse(data=result.content, metadata=result.status_metadata()))

    def invoke(self, request: InvokeRequest | bytes | str | None = None) -> InvokeResponse:
        """
        Send the payload using the configured method.

        The status line is always reported in metadata; an HTTP error status is not an
        exception.
        """
        invoke_request = InvokeRequest.coerce(request)
        if _resolve_operation(invoke_request.operation) not in self.operations():
            raise UnsupportedOperationError(str(getattr(invoke_request.operation, "value", invoke_request.operation)))

        method = (self.metadata.method or DEFAULT_INVOKE_METHOD).upper()
        result = self._round_trip(
            method,
            timeout=self.settings.invoke_timeout,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            content=invoke_request.data,
        )
        if not result.is_success:
            logger.info("%s %s returned %s", method, redact_url(self.metadata.url), result.status_line)
        return InvokeResponse(data=result.content or None, metadata=result.status_metadata())

    def _round_trip(
        self,
        method: str,
        *,
        timeout: float,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> HttpResult:
        metadata = self.metadata
        client = self.http_client
        request = build_request(
            client,
            method,
            metadata.url,
            headers=headers,
            content=content,
            timeout=timeout,
        )
        add_credentials(request, metadata.credentials)
        return send_request(client, request, timeout=timeout)

    def close(self) -> None:
        with suppress(Exception):
            if self.http_client is not None:
                self.http_client.close()

    def __enter__(self) -> "HttpBinding":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()


def new_http_binding(properties: Mapping[str, Any] | None, **kwargs: Any) -> HttpBinding:
    """Create and initialize a binding in one step."""
    binding = HttpBinding(**kwargs)
    binding.init(properties)
    return binding


__all__ = ["DEFAULT_INVOKE_METHOD", "HttpBinding", "JSON_CONTENT_TYPE", "ReadHandler", "new_http_binding"]
