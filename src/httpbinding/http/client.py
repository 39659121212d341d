# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared httpx client factory."""

from __future__ import annotations

import httpx

from ..config import HttpSettings, load_http_settings


def create_default_http_client(settings: HttpSettings | None = None) -> httpx.Client:
    """
    Build the pooled client a binding reuses for all of its calls.

    Per-call timeouts are applied on each request; the client default is the read timeout.
    """
    settings = settings or load_http_settings()
    return httpx.Client(
        follow_redirects=settings.allow_redirects,
        timeout=settings.read_timeout,
        verify=settings.verify_ssl,
        headers={"User-Agent": settings.user_agent},
    )


__all__ = ["create_default_http_client"]
