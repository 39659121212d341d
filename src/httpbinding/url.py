# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for log and error output."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


def redact_url(url: object) -> str:
    """Return `url` without any `user:password@` userinfo."""
    raw = str(url or "").strip()
    if not raw:
        return "<empty url>"
    try:
        parts = urlsplit(raw)
    except ValueError:
        return "<invalid url>"
    if "@" not in parts.netloc:
        return raw
    return urlunsplit(parts._replace(netloc=parts.netloc.rsplit("@", 1)[-1]))


__all__ = ["redact_url"]
