# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Binding metadata: property bag parsing into an immutable connection descriptor."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ConfigurationError
from .url import redact_url

logger = logging.getLogger(__name__)

URL_KEY = "url"
METHOD_KEY = "method"
USER_KEY = "user"
PASSWORD_KEY = "password"
CREDENTIALS_KEY = "credentials"


@dataclass(frozen=True)
class Credentials:
    """Basic-auth username/password pair."""

    user: str
    password: str

    @property
    def complete(self) -> bool:
        return bool(self.user) and bool(self.password)

    def __repr__(self) -> str:
        return f"Credentials(user={self.user!r}, password='***')"


@dataclass(frozen=True)
class HttpMetadata:
    """
    Connection descriptor shared by every call of a binding instance.

    `method` only applies to invoke; read always issues GET.
    """

    url: str = ""
    method: str = ""
    credentials: Credentials | None = None


def _string_field(properties: Mapping[str, Any], key: str) -> str:
    value = properties.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigurationError(f"property {key!r} must be a string, got {type(value).__name__}")
    return value


def _credentials_mapping(raw: Any) -> Mapping[str, Any]:
    if isinstance(raw, Mapping):
        return raw
    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except ValueError as exc:
            raise ConfigurationError(f"property {CREDENTIALS_KEY!r} is not valid JSON: {exc}") from exc
        if not isinstance(decoded, Mapping):
            raise ConfigurationError(f"property {CREDENTIALS_KEY!r} must decode to a JSON object")
        return decoded
    raise ConfigurationError(
        f"property {CREDENTIALS_KEY!r} must be an object or JSON string, got {type(raw).__name__}"
    )


def _parse_credentials(properties: Mapping[str, Any]) -> Credentials | None:
    """
    Collapse the flat (`user`/`password`) and nested (`credentials`) shapes into one value.

    A partial pair normalizes to None; the nested shape wins when both are present.
    """
    raw = properties.get(CREDENTIALS_KEY)
    source = _credentials_mapping(raw) if raw is not None else properties

    credentials = Credentials(
        user=_string_field(source, USER_KEY),
        password=_string_field(source, PASSWORD_KEY),
    )
    return credentials if credentials.complete else None


def parse_metadata(properties: Mapping[str, Any] | None) -> HttpMetadata:
    """
    Parse a host-supplied property bag into HttpMetadata.

    Empty or missing `url`/`method` are accepted here; an unusable URL surfaces as a
    TransportError once a request is attempted.
    """
    if properties is None:
        properties = {}
    if not isinstance(properties, Mapping):
        raise ConfigurationError(f"binding properties must be a mapping, got {type(properties).__name__}")

    metadata = HttpMetadata(
        url=_string_field(properties, URL_KEY),
        method=_string_field(properties, METHOD_KEY),
        credentials=_parse_credentials(properties),
    )
    logger.debug(
        "Parsed binding metadata url=%s method=%s credentials=%s",
        redact_url(metadata.url),
        metadata.method or "-",
        metadata.credentials is not None,
    )
    return metadata


__all__ = ["Credentials", "HttpMetadata", "parse_metadata"]
