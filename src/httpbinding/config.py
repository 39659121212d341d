# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpbinding."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"httpbinding/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    read_timeout: float = 60.0
    invoke_timeout: float = 5.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        read_timeout = _float_env("HTTPBINDING_READ_TIMEOUT", cls.read_timeout)
        if read_timeout <= 0:
            read_timeout = cls.read_timeout
        invoke_timeout = _float_env("HTTPBINDING_INVOKE_TIMEOUT", cls.invoke_timeout)
        if invoke_timeout <= 0:
            invoke_timeout = cls.invoke_timeout
        return cls(
            read_timeout=read_timeout,
            invoke_timeout=invoke_timeout,
            user_agent=os.getenv("HTTPBINDING_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("HTTPBINDING_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("HTTPBINDING_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
