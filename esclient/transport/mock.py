"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Mock transport for local testing.
"""

from __future__ import annotations

import copy
from typing import Dict, Optional, Tuple, Union

from esclient.transport.base import (
    BaseTransport,
    TransportRequest,
    TransportResponse,
    validate_method,
)

MockReply = Union[TransportResponse, Exception]


class MockTransport(BaseTransport):
    """In-memory mock transport for unit tests.

    Args:
        responses: Mapping from ``(method, path)`` tuples to either a
            ``TransportResponse`` or an exception instance to raise.

    Each matching request receives a fresh copy of the configured response,
    so a route can be hit more than once.

    Example::

        transport = MockTransport({
            ("POST", "/_refresh"): TransportResponse.from_json(
                200, {"_shards": {"total": 2, "successful": 2, "failed": 0}}
            ),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], MockReply]] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], MockReply] = {} if responses is None else responses
        self._sent: list[TransportRequest] = []

    def add_response(self, method: str, path: str, reply: MockReply) -> None:
        """Register (or replace) the reply for ``method path``."""
        self._responses[(method.upper(), path)] = reply

    def send(self, request: TransportRequest) -> TransportResponse:
        method = validate_method(request.method)
        self._sent.append(copy.deepcopy(request))
        reply = self._responses.get((method, request.path))
        if reply is None:
            return TransportResponse.from_json(404, {"error": "not mocked"})
        if isinstance(reply, Exception):
            raise reply
        return copy.deepcopy(reply)

    def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def is_connected(self) -> bool:
        return True

    @property
    def sent_requests(self) -> list[TransportRequest]:
        """All requests that have been sent through this transport."""
        return list(self._sent)
