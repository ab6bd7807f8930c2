"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Delete an index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from esclient.operations.base import Operation
from esclient.operations.common import expect_object, join_path
from esclient.exceptions import CodecError
from esclient.transport.base import TransportResponse

if TYPE_CHECKING:
    from esclient.client import Client


@dataclass(frozen=True)
class DeleteIndexResult:
    """Result of a delete-index request."""
    acknowledged: bool

    @classmethod
    def from_dict(cls, data: Any) -> DeleteIndexResult:
        data = expect_object(data, "response body")
        acknowledged = data.get("acknowledged")
        if not isinstance(acknowledged, bool):
            raise CodecError(f"Field 'acknowledged' must be a boolean, got {acknowledged!r}")
        return cls(acknowledged=acknowledged)


class DeleteIndexOperation(Operation[DeleteIndexResult]):
    """``DELETE /<index>``."""

    method = "DELETE"

    def __init__(self, client: Client, index: str) -> None:
        super().__init__(client)
        self._index = index
        self._ignore_missing = False

    @property
    def index(self) -> str:
        return self._index

    def ignore_missing(self, ignore: bool = True) -> DeleteIndexOperation:
        """Treat a missing index (404) as success with ``acknowledged=False``."""
        self._ignore_missing = ignore
        return self

    def path(self) -> str:
        return join_path(self._index)

    def accepts_status(self, status_code: int) -> bool:
        if status_code == 200:
            return True
        return self._ignore_missing and status_code == 404

    def decode(self, response: TransportResponse) -> DeleteIndexResult:
        if response.status_code == 404:
            return DeleteIndexResult(acknowledged=False)
        return DeleteIndexResult.from_dict(response.decode())
