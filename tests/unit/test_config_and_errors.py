# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx

from httpbinding import config
from httpbinding.config import DEFAULT_USER_AGENT, HttpSettings
from httpbinding.errors import (
    BindingError,
    ErrorCategory,
    ResponseReadError,
    TransportError,
    categorize_exception,
    error_category_to_reason,
)
from httpbinding.log import TRANSPORT_LOGGERS, setup_logging


def test_http_settings_defaults():
    settings = HttpSettings()
    assert settings.read_timeout == 60.0
    assert settings.invoke_timeout == 5.0
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.allow_redirects is True
    assert settings.verify_ssl is True


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HTTPBINDING_READ_TIMEOUT", "30")
    monkeypatch.setenv("HTTPBINDING_INVOKE_TIMEOUT", "1.5")
    monkeypatch.setenv("HTTPBINDING_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("HTTPBINDING_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("HTTPBINDING_HTTP_VERIFY_SSL", "0")

    settings = config.load_http_settings()

    assert settings.read_timeout == 30.0
    assert settings.invoke_timeout == 1.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("HTTPBINDING_READ_TIMEOUT", "not-a-number")
    monkeypatch.setenv("HTTPBINDING_INVOKE_TIMEOUT", "-3")

    settings = config.load_http_settings()

    assert settings.read_timeout == HttpSettings.read_timeout
    assert settings.invoke_timeout == HttpSettings.invoke_timeout


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("HTTPBINDING_INVOKE_TIMEOUT", "7.7")
    assert config.load_http_settings().invoke_timeout == 7.7
    monkeypatch.setenv("HTTPBINDING_INVOKE_TIMEOUT", "8.8")
    assert config.load_http_settings().invoke_timeout == 8.8


def test_categorize_exception_httpx_types():
    assert categorize_exception(httpx.ReadTimeout("slow")) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectTimeout("slow")) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.UnsupportedProtocol("missing scheme")) is ErrorCategory.INVALID_URL
    assert categorize_exception(httpx.InvalidURL("bad")) is ErrorCategory.INVALID_URL
    assert categorize_exception(ConnectionRefusedError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("?")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_follows_cause_chain():
    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as inner:
            raise httpx.ConnectError("lookup failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR

    try:
        try:
            raise ssl.SSLError("certificate verify failed")
        except ssl.SSLError as inner:
            raise httpx.ConnectError("handshake failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.SSL_ERROR


def test_error_hierarchy():
    transport = TransportError("boom", ErrorCategory.TIMEOUT)
    assert isinstance(transport, BindingError)
    assert transport.is_timeout is True
    assert TransportError("boom").category is ErrorCategory.UNKNOWN_ERROR

    read_error = ResponseReadError("truncated")
    assert isinstance(read_error, BindingError)
    assert isinstance(read_error, IOError)
    assert str(read_error) == "truncated"


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Request timed out"
    assert error_category_to_reason(None) == ""


def test_categorize_redirect_loop():
    assert categorize_exception(httpx.TooManyRedirects("loop")) is ErrorCategory.TOO_MANY_REDIRECTS
    assert error_category_to_reason(ErrorCategory.TOO_MANY_REDIRECTS) == "Redirect limit exceeded"


def test_setup_logging_keeps_transport_loggers_quiet():
    try:
        setup_logging("DEBUG")
        for name in TRANSPORT_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

        setup_logging("ERROR")
        for name in TRANSPORT_LOGGERS:
            assert logging.getLogger(name).level == logging.ERROR
    finally:
        for name in TRANSPORT_LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET)
