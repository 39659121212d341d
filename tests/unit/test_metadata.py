# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import dataclasses

import pytest

from httpbinding.errors import ConfigurationError
from httpbinding.metadata import Credentials, HttpMetadata, parse_metadata


def test_parse_metadata_flat_credentials():
    metadata = parse_metadata({"url": "http://x/api", "method": "POST", "user": "a", "password": "b"})
    assert metadata == HttpMetadata(url="http://x/api", method="POST", credentials=Credentials("a", "b"))


def test_parse_metadata_nested_credentials_mapping_and_json():
    nested = parse_metadata({"url": "http://x", "credentials": {"user": "a", "password": "b"}})
    assert nested.credentials == Credentials("a", "b")

    encoded = parse_metadata({"url": "http://x", "credentials": '{"user": "a", "password": "b"}'})
    assert encoded.credentials == Credentials("a", "b")


def test_parse_metadata_nested_credentials_take_precedence():
    metadata = parse_metadata(
        {
            "url": "http://x",
            "user": "flat",
            "password": "flat-pw",
            "credentials": {"user": "nested", "password": "nested-pw"},
        }
    )
    assert metadata.credentials == Credentials("nested", "nested-pw")


@pytest.mark.parametrize(
    "properties",
    [
        {"url": "http://x"},
        {"url": "http://x", "user": "a"},
        {"url": "http://x", "password": "b"},
        {"url": "http://x", "user": "", "password": "b"},
        {"url": "http://x", "credentials": {"user": "a"}},
        {"url": "http://x", "credentials": {"password": "b"}},
    ],
)
def test_partial_credentials_normalize_to_none(properties):
    assert parse_metadata(properties).credentials is None


def test_parse_metadata_accepts_missing_url_and_method():
    assert parse_metadata({}) == HttpMetadata(url="", method="", credentials=None)
    assert parse_metadata(None) == HttpMetadata()


def test_parse_metadata_ignores_unknown_keys():
    metadata = parse_metadata({"url": "http://x", "direction": "output", "route": "/ignored"})
    assert metadata.url == "http://x"


@pytest.mark.parametrize(
    "properties",
    [
        ["url", "http://x"],
        "url=http://x",
        {"url": 42},
        {"url": "http://x", "method": ["POST"]},
        {"url": "http://x", "user": 1, "password": "b"},
        {"url": "http://x", "credentials": "not json"},
        {"url": "http://x", "credentials": "[1, 2]"},
        {"url": "http://x", "credentials": 7},
        {"url": "http://x", "credentials": {"user": "a", "password": 5}},
    ],
)
def test_parse_metadata_rejects_malformed_bags(properties):
    with pytest.raises(ConfigurationError):
        parse_metadata(properties)


def test_metadata_is_immutable_and_hides_password():
    metadata = parse_metadata({"url": "http://x", "user": "a", "password": "secret"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        metadata.url = "http://elsewhere"  # type: ignore[misc]
    assert "secret" not in repr(metadata)
