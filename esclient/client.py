"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

esclient Client.

The client owns one transport and hands out operation builders bound to
itself::

    client = Client(base_url="http://localhost:9200")
    client.mapping("articles", "post", {"title": {"type": "string"}}).send()
    result = client.refresh().with_indexes("articles").send()

A client issues one request at a time. Share it across threads only with
external locking, or create one client per thread.
"""

from __future__ import annotations

from typing import Any, Optional

from esclient.config.settings import ClientConfig, configure_logging
from esclient.hooks import HookRegistry
from esclient.logging_config import get_logger
from esclient.operations.delete_index import DeleteIndexOperation
from esclient.operations.mapping import MappingOperation, Properties
from esclient.operations.refresh import RefreshOperation
from esclient.transport.base import (
    BaseTransport,
    TransportRequest,
    TransportResponse,
    validate_method,
)
from esclient.transport.http import HttpTransport

logger = get_logger(__name__)


class Client:
    """Client for an Elasticsearch-compatible HTTP API.

    Args:
        base_url: Root URL of the search service. Defaults to ``http://localhost:9200``.
        username: Optional basic auth user.
        password: Optional basic auth password.
        api_key: Optional API key.
        timeout: Request timeout in seconds.
        verify_certs: Whether to verify TLS certificates.
        transport: Optional custom transport (overrides the URL/credential based default).
            Its ``base_url``, when it has one, is reported as the client's URL.
        hooks: Optional hook registry; a fresh one is created otherwise.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:9200",
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        verify_certs: bool = True,
        transport: Optional[BaseTransport] = None,
        hooks: Optional[HookRegistry] = None,
    ) -> None:
        self._hooks = hooks or HookRegistry()
        self._transport = transport or HttpTransport(
            base_url=base_url,
            username=username,
            password=password,
            api_key=api_key,
            timeout=timeout,
            verify_certs=verify_certs,
        )
        # An injected transport decides where requests actually go.
        self._base_url = getattr(self._transport, "base_url", None) or base_url.rstrip("/")
        logger.debug(
            "client_initialized",
            base_url=self._base_url,
            transport=type(self._transport).__name__,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[BaseTransport] = None,
        hooks: Optional[HookRegistry] = None,
        apply_logging: bool = True,
    ) -> Client:
        """Build a client from a loaded :class:`ClientConfig`.

        Unless ``apply_logging`` is False, the ``logging`` section is applied
        through :func:`configure_logging` before the client is created.
        """
        if apply_logging:
            configure_logging(config.logging)
        connection = config.connection
        return cls(
            base_url=connection.url,
            username=connection.username,
            password=connection.password,
            api_key=connection.api_key,
            timeout=connection.timeout,
            verify_certs=connection.verify_certs,
            transport=transport,
            hooks=hooks,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def hooks(self) -> HookRegistry:
        """Lifecycle hooks fired around every request."""
        return self._hooks

    @property
    def transport(self) -> BaseTransport:
        return self._transport

    # -- Generic dispatch ----------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
    ) -> TransportResponse:
        """Send one request and return the raw response.

        The status code is not inspected here; that is up to the caller.

        Raises:
            TransportError: If the transport could not complete the request.
        """
        request = TransportRequest(method=validate_method(method), path=path, body=body)
        request = self._hooks.fire_before_request(request)
        try:
            response = self._transport.send(request)
        except Exception as exc:
            self._hooks.fire_error(request, exc)
            raise
        self._hooks.fire_after_response(request, response)
        return response

    # -- Operations ----------------------------------------------------------

    def mapping(self, index: str, doc_type: str, properties: Properties) -> MappingOperation:
        """Create ``index`` with a mapping for ``doc_type``.

        See: https://www.elastic.co/guide/en/elasticsearch/reference/2.x/indices-create-index.html
        """
        return MappingOperation(self, index, doc_type, properties)

    def refresh(self) -> RefreshOperation:
        """Refresh

        See: https://www.elastic.co/guide/en/elasticsearch/reference/1.x/indices-refresh.html
        """
        return RefreshOperation(self)

    def delete_index(self, index: str) -> DeleteIndexOperation:
        """Delete ``index``."""
        return DeleteIndexOperation(self, index)

    # -- Lifecycle -----------------------------------------------------------

    def close(self) -> None:
        """Release all resources."""
        self._transport.close()
        logger.debug("client_closed", base_url=self._base_url)

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
