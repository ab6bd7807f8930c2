"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Transports.
"""

from esclient.transport.base import BaseTransport, TransportRequest, TransportResponse
from esclient.transport.http import HttpTransport
from esclient.transport.mock import MockTransport

__all__ = [
    "BaseTransport",
    "TransportRequest",
    "TransportResponse",
    "HttpTransport",
    "MockTransport",
]
