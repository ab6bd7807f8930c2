"""
Pytest configuration and shared fixtures for esclient tests.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog

from esclient.client import Client
from esclient.logging_config import clear_correlation_id
from esclient.transport.base import TransportResponse
from esclient.transport.mock import MockTransport


SHARDS_BODY = {"_shards": {"total": 10, "successful": 5, "failed": 0}}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Restore default logging state after the test."""
    yield
    clear_correlation_id()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def mock_transport() -> MockTransport:
    """Empty mock transport; tests register the routes they need."""
    return MockTransport()


@pytest.fixture
def client(mock_transport: MockTransport) -> Generator[Client, None, None]:
    """Client wired to ``mock_transport``."""
    client = Client(transport=mock_transport)
    yield client
    client.close()


@pytest.fixture
def shards_response() -> TransportResponse:
    """A successful refresh response."""
    return TransportResponse.from_json(200, SHARDS_BODY)


@pytest.fixture
def live_client() -> Generator[Client, None, None]:
    """
    Client for a real search server.

    Skips the test unless ESCLIENT_TEST_URL is set.
    """
    url = os.environ.get("ESCLIENT_TEST_URL")
    if not url:
        pytest.skip("ESCLIENT_TEST_URL not set")
    client = Client(base_url=url)
    yield client
    client.close()
