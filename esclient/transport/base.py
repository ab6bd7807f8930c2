"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Transport base class and data structures.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from esclient.exceptions import CodecError

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass
class TransportRequest:
    """Outbound request representation."""
    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None


@dataclass
class TransportResponse:
    """Inbound response representation.

    The body is kept as raw bytes until :meth:`decode` is called, which
    parses it exactly once.
    """
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    elapsed_ms: float = 0.0
    _consumed: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_json(cls, status_code: int, body: Any, **kwargs: Any) -> TransportResponse:
        """Build a response whose content is ``body`` serialized as JSON."""
        headers = kwargs.pop("headers", {"content-type": "application/json"})
        return cls(
            status_code=status_code,
            headers=headers,
            content=json.dumps(body).encode("utf-8"),
            **kwargs,
        )

    @property
    def consumed(self) -> bool:
        return self._consumed

    def decode(self) -> Any:
        """Parse the body as JSON.

        Raises:
            CodecError: If the body was already consumed, is empty, or is
                not valid UTF-8 JSON.
        """
        if self._consumed:
            raise CodecError("Response body already consumed")
        self._consumed = True

        if not self.content:
            raise CodecError("Response body is empty")
        try:
            return json.loads(self.content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise CodecError(f"Response body is not valid JSON: {e}") from e


def validate_method(method: str) -> str:
    """Normalise ``method`` and reject verbs the transports do not issue."""
    normalized = method.upper()
    if normalized not in SUPPORTED_METHODS:
        raise ValueError(
            f"Unsupported HTTP method '{method}'. "
            f"Expected one of {sorted(SUPPORTED_METHODS)}"
        )
    return normalized


class BaseTransport(ABC):
    """Abstract base for all transports."""

    @abstractmethod
    def send(self, request: TransportRequest) -> TransportResponse:
        """Send a request and return the response.

        Raises:
            TransportError: If no HTTP response could be obtained.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release transport resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the transport is in a usable state."""
        ...
