# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request/response models exchanged with the host runtime."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OperationKind(str, Enum):
    GET = "get"
    CREATE = "create"
    DELETE = "delete"
    LIST = "list"


def _as_bytes(data: bytes | bytearray | memoryview | str | None) -> bytes:
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


@dataclass
class ReadResponse:
    """Payload handed to the read handler."""

    data: bytes
    metadata: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data.decode("utf-8", errors="replace"),
            "metadata": dict(self.metadata),
        }


@dataclass
class InvokeRequest:
    """A single invoke call: opaque body plus optional per-call metadata."""

    data: bytes = b""
    metadata: dict[str, str] = field(default_factory=dict)
    operation: OperationKind | str = OperationKind.CREATE

    def __post_init__(self) -> None:
        self.data = _as_bytes(self.data)

    @classmethod
    def coerce(cls, value: InvokeRequest | bytes | bytearray | memoryview | str | None) -> InvokeRequest:
        """Accept either a full InvokeRequest or a bare payload."""
        if isinstance(value, InvokeRequest):
            return value
        return cls(data=_as_bytes(value))


@dataclass
class InvokeResponse:
    """
    Result of an invoke call.

    `metadata["status"]` carries the status line (e.g. "404 Not Found"); HTTP error
    codes are reported here rather than raised.
    """

    data: bytes | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def status(self) -> str:
        return self.metadata.get("status", "")

    @property
    def status_code(self) -> int | None:
        raw = self.metadata.get("status_code")
        try:
            return int(raw) if raw is not None else None
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data.decode("utf-8", errors="replace") if self.data is not None else None,
            "metadata": dict(self.metadata),
        }


__all__ = ["InvokeRequest", "InvokeResponse", "OperationKind", "ReadResponse"]
