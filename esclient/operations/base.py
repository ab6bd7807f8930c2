"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Generic operation lifecycle shared by every builder.

A builder is created by a :class:`~esclient.client.Client` factory method,
configured through chainable setters that never perform I/O, and finished
with :meth:`Operation.send`, which performs exactly one request:

1. build the path,
2. serialize the body, if the operation carries one,
3. dispatch through the client with the operation's fixed verb,
4. check the status against :meth:`Operation.accepts_status`,
5. decode the response into the operation's result type.

Calling ``send`` again repeats all five steps; nothing is cached.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from esclient.exceptions import UnexpectedStatusError
from esclient.transport.base import TransportResponse

if TYPE_CHECKING:
    from esclient.client import Client

ResultT = TypeVar("ResultT")


class Operation(ABC, Generic[ResultT]):
    """Base class for all operation builders."""

    #: HTTP verb, fixed per operation.
    method: str = "GET"

    def __init__(self, client: Client) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        return self._client

    @abstractmethod
    def path(self) -> str:
        """Request path relative to the client's base URL."""
        ...

    def body(self) -> Optional[Any]:
        """JSON-serializable request body, or None to send no body."""
        return None

    @abstractmethod
    def accepts_status(self, status_code: int) -> bool:
        """Whether ``status_code`` counts as success for this operation."""
        ...

    @abstractmethod
    def decode(self, response: TransportResponse) -> ResultT:
        """Turn an accepted response into the operation's result.

        Raises:
            CodecError: If the body does not fit the result type.
        """
        ...

    def send(self) -> ResultT:
        """Issue the request and return the typed result.

        Raises:
            TransportError: If the transport could not complete the request.
            UnexpectedStatusError: If :meth:`accepts_status` rejects the status.
            CodecError: If the response body cannot be decoded.
        """
        response = self._client.request(self.method, self.path(), self.body())
        if not self.accepts_status(response.status_code):
            raise UnexpectedStatusError(response.status_code)
        return self.decode(response)
