#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Demo of the mapping and refresh operations.

Runs against the server at ES_URL when it is set, otherwise against an
in-memory transport.
"""

import os

from esclient import Client, EsClientError, MockTransport
from esclient.logging_config import get_logger, set_correlation_id, setup_logging
from esclient.transport.base import TransportResponse


def build_mock_transport() -> MockTransport:
    transport = MockTransport()
    transport.add_response(
        "PUT", "/articles", TransportResponse.from_json(200, {"acknowledged": True})
    )
    transport.add_response(
        "POST",
        "/articles/_refresh",
        TransportResponse.from_json(200, {"_shards": {"total": 2, "successful": 1, "failed": 0}}),
    )
    return transport


def main():
    """Run the demo."""
    setup_logging(level="DEBUG", json_format=False)
    logger = get_logger("demo")
    set_correlation_id()

    url = os.environ.get("ES_URL")
    transport = None if url else build_mock_transport()

    with Client(base_url=url or "http://localhost:9200", transport=transport) as client:
        client.hooks.on_after_response(
            lambda req, resp: logger.info(
                "response", method=req.method, path=req.path, status=resp.status_code
            )
        )
        try:
            client.mapping(
                "articles",
                "post",
                {
                    "title": {"type": "string"},
                    "created_at": {"type": "date", "format": "strict_date_optional_time"},
                },
            ).send()
            result = client.refresh().with_indexes("articles").send()
        except EsClientError as e:
            logger.error("demo_failed", error=str(e))
            return 1

    print(f"Refreshed {result.shards.successful}/{result.shards.total} shards "
          f"({result.shards.failed} failed)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
