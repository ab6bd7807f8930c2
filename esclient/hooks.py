"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Request lifecycle hook registry.

Callers subscribe to these hooks to observe or decorate traffic without
subclassing the client or the transports.

Available hooks:
- on_before_request: Fired before every outbound request
- on_after_response: Fired after every response received from the transport
- on_error: Fired when the transport raises
"""

from __future__ import annotations

from typing import Callable, List

from esclient.logging_config import get_logger
from esclient.transport.base import TransportRequest, TransportResponse

logger = get_logger(__name__)


BeforeRequestCallback = Callable[[TransportRequest], TransportRequest]
AfterResponseCallback = Callable[[TransportRequest, TransportResponse], None]
ErrorCallback = Callable[[TransportRequest, Exception], None]


class HookRegistry:
    """
    Manages lifecycle hooks for a :class:`~esclient.client.Client`.

    Multiple callbacks per hook are supported and executed in registration
    order. A failing callback is logged and reported to the error hooks; it
    never aborts the request it observes.
    """

    def __init__(self) -> None:
        self._before_request_callbacks: List[BeforeRequestCallback] = []
        self._after_response_callbacks: List[AfterResponseCallback] = []
        self._error_callbacks: List[ErrorCallback] = []

    # -- Registration methods ------------------------------------------------

    def on_before_request(self, callback: BeforeRequestCallback) -> None:
        """Register a callback fired before every outbound request.

        The callback receives the request and **must** return a
        ``TransportRequest`` (possibly modified).
        """
        self._before_request_callbacks.append(callback)
        logger.debug("Registered on_before_request hook")

    def on_after_response(self, callback: AfterResponseCallback) -> None:
        """Register a callback fired after every response."""
        self._after_response_callbacks.append(callback)
        logger.debug("Registered on_after_response hook")

    def on_error(self, callback: ErrorCallback) -> None:
        """Register a callback fired when a request fails in the transport."""
        self._error_callbacks.append(callback)
        logger.debug("Registered on_error hook")

    # -- Firing methods (called by the client) -------------------------------

    def fire_before_request(self, request: TransportRequest) -> TransportRequest:
        """Fire all on_before_request callbacks in order.

        Each callback receives the (possibly replaced) request from the
        previous callback, forming a pipeline.
        """
        current = request
        for cb in self._before_request_callbacks:
            try:
                current = cb(current)
            except Exception as exc:
                logger.error(f"on_before_request hook error: {exc}", exc_info=True)
                self.fire_error(current, exc)
        return current

    def fire_after_response(
        self, request: TransportRequest, response: TransportResponse
    ) -> None:
        """Fire all on_after_response callbacks."""
        for cb in self._after_response_callbacks:
            try:
                cb(request, response)
            except Exception as exc:
                logger.error(f"on_after_response hook error: {exc}", exc_info=True)
                self.fire_error(request, exc)

    def fire_error(self, request: TransportRequest, error: Exception) -> None:
        """Fire all on_error callbacks."""
        for cb in self._error_callbacks:
            try:
                cb(request, error)
            except Exception:
                # Avoid infinite recursion
                logger.error("on_error hook itself raised an exception", exc_info=True)
