# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Basic-auth header handling."""

from __future__ import annotations

import base64

import httpx

from ..metadata import Credentials

AUTHORIZATION_HEADER = "Authorization"


def basic_auth_header(user: str, password: str) -> str:
    """Return the `Authorization` value for a username/password pair."""
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def add_credentials(request: httpx.Request, credentials: Credentials | None) -> None:
    """
    Attach basic auth to an outgoing request.

    Only a pair with both fields non-empty is applied; anything else leaves the
    request unauthenticated.
    """
    if credentials is None or not credentials.user or not credentials.password:
        return
    request.headers[AUTHORIZATION_HEADER] = basic_auth_header(credentials.user, credentials.password)


__all__ = ["AUTHORIZATION_HEADER", "add_credentials", "basic_auth_header"]
