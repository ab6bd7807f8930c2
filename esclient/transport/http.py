"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

HTTP/REST transport (default).
"""

from __future__ import annotations

import json
import time
from typing import Optional

import httpx

from esclient.exceptions import TransportError
from esclient.logging_config import get_logger, log_http_request
from esclient.transport.base import (
    BaseTransport,
    TransportRequest,
    TransportResponse,
    validate_method,
)

logger = get_logger(__name__)

USER_AGENT = "esclient-python"


def encode_body(body: object) -> bytes:
    """Serialize a request body as compact UTF-8 JSON."""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class HttpTransport(BaseTransport):
    """Default HTTP transport using a synchronous ``httpx.Client``.

    No retries are attempted; a failed round trip surfaces as
    :class:`~esclient.exceptions.TransportError`.

    Args:
        base_url: Root URL of the search service (e.g. ``http://localhost:9200``).
        username: Optional basic auth user.
        password: Optional basic auth password.
        api_key: Optional API key sent as ``Authorization: ApiKey <key>``.
        timeout: Request timeout in seconds.
        verify_certs: Whether to verify TLS certificates.
        http_transport: Optional lower-level ``httpx`` transport, mainly for
            tests (``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        verify_certs: bool = True,
        http_transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._username = username
        self._password = password
        self._api_key = api_key
        self._timeout = timeout
        self._verify_certs = verify_certs
        self._http_transport = http_transport
        self._client: Optional[httpx.Client] = None
        self._connected = False

    @property
    def base_url(self) -> str:
        return self._base_url

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
            if self._api_key:
                headers["Authorization"] = f"ApiKey {self._api_key}"
            auth = None
            if self._username is not None:
                auth = httpx.BasicAuth(self._username, self._password or "")
            self._client = httpx.Client(
                base_url=self._base_url,
                headers=headers,
                auth=auth,
                timeout=self._timeout,
                verify=self._verify_certs,
                transport=self._http_transport,
            )
            self._connected = True
        return self._client

    def send(self, request: TransportRequest) -> TransportResponse:
        method = validate_method(request.method)
        client = self._ensure_client()

        headers = dict(request.headers)
        content = None
        if request.body is not None:
            content = encode_body(request.body)
            headers["Content-Type"] = "application/json"

        start = time.monotonic()
        try:
            resp = client.request(
                method=method,
                url=request.path,
                headers=headers,
                content=content,
            )
        except httpx.RequestError as e:
            elapsed = round((time.monotonic() - start) * 1000, 2)
            log_http_request(logger, method, request.path, None, elapsed, error=str(e))
            raise TransportError(f"{method} {request.path} failed: {e}") from e
        elapsed = round((time.monotonic() - start) * 1000, 2)

        log_http_request(logger, method, request.path, resp.status_code, elapsed)

        return TransportResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content,
            elapsed_ms=elapsed,
        )

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
