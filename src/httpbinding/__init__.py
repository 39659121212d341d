# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpbinding package entrypoint.

Exposes an HTTP output/input binding: a host hands it a property bag once (url,
method, optional basic-auth credentials) and then polls it with `read` or fires
one-shot `invoke` calls. HTTP is issued through a shared httpx client.
"""

from .binding import HttpBinding, new_http_binding
from .config import HttpSettings, load_http_settings
from .errors import (
    BindingError,
    BindingNotInitializedError,
    ConfigurationError,
    ErrorCategory,
    ResponseReadError,
    TransportError,
    UnsupportedOperationError,
)
from .log import setup_logging
from .metadata import Credentials, HttpMetadata, parse_metadata
from .models import InvokeRequest, InvokeResponse, OperationKind, ReadResponse
from .version import __version__

__all__ = [
    "BindingError",
    "BindingNotInitializedError",
    "ConfigurationError",
    "Credentials",
    "ErrorCategory",
    "HttpBinding",
    "HttpMetadata",
    "HttpSettings",
    "InvokeRequest",
    "InvokeResponse",
    "OperationKind",
    "ReadResponse",
    "ResponseReadError",
    "TransportError",
    "UnsupportedOperationError",
    "__version__",
    "load_http_settings",
    "new_http_binding",
    "parse_metadata",
    "setup_logging",
]
