# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .auth import AUTHORIZATION_HEADER, add_credentials, basic_auth_header
from .client import create_default_http_client
from .transport import HttpResult, build_request, send_request

__all__ = [
    "AUTHORIZATION_HEADER",
    "HttpResult",
    "add_credentials",
    "basic_auth_header",
    "build_request",
    "create_default_http_client",
    "send_request",
]
