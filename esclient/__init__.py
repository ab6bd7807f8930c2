"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

esclient - typed operation builders for the Elasticsearch HTTP API.

Quick start::

    from esclient import Client
    with Client(base_url="http://localhost:9200") as client:
        client.refresh().with_indexes("articles").send()
"""

from esclient._version import __version__
from esclient.client import Client
from esclient.exceptions import (
    CodecError,
    EsClientError,
    TransportError,
    UnexpectedStatusError,
)
from esclient.hooks import HookRegistry
from esclient.operations import (
    DeleteIndexResult,
    MappingResult,
    RefreshResult,
    ShardCountResult,
)
from esclient.transport import HttpTransport, MockTransport

__all__ = [
    "__version__",
    "Client",
    "HookRegistry",
    "EsClientError",
    "TransportError",
    "CodecError",
    "UnexpectedStatusError",
    "DeleteIndexResult",
    "MappingResult",
    "RefreshResult",
    "ShardCountResult",
    "HttpTransport",
    "MockTransport",
]
