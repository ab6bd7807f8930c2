"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Refresh one, several or all indexes.

See: https://www.elastic.co/guide/en/elasticsearch/reference/1.x/indices-refresh.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, List, Union

from esclient.operations.base import Operation
from esclient.operations.common import (
    ShardCountResult,
    expect_object,
    format_multi,
    join_path,
)
from esclient.exceptions import CodecError
from esclient.transport.base import TransportResponse

if TYPE_CHECKING:
    from esclient.client import Client


@dataclass(frozen=True)
class RefreshResult:
    """Result of a refresh request."""
    shards: ShardCountResult

    @classmethod
    def from_dict(cls, data: Any) -> RefreshResult:
        data = expect_object(data, "response body")
        if "_shards" not in data:
            raise CodecError("Missing field '_shards'")
        return cls(shards=ShardCountResult.from_dict(data["_shards"]))


class RefreshOperation(Operation[RefreshResult]):
    """``POST /<indexes>/_refresh``; every index when none is configured."""

    method = "POST"

    def __init__(self, client: Client) -> None:
        super().__init__(client)
        self._indexes: List[str] = []

    @property
    def indexes(self) -> List[str]:
        return list(self._indexes)

    def with_indexes(self, *indexes: Union[str, Iterable[str]]) -> RefreshOperation:
        """Restrict the refresh to ``indexes``.

        Accepts names as separate arguments or as one iterable; replaces any
        previously configured names.
        """
        names: List[str] = []
        for entry in indexes:
            if isinstance(entry, str):
                names.append(entry)
            else:
                names.extend(entry)
        self._indexes = names
        return self

    def path(self) -> str:
        return join_path(format_multi(self._indexes), "_refresh")

    def accepts_status(self, status_code: int) -> bool:
        return status_code == 200

    def decode(self, response: TransportResponse) -> RefreshResult:
        return RefreshResult.from_dict(response.decode())
