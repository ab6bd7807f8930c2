"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Mapping operation: create an index together with its field mapping.

See: https://www.elastic.co/guide/en/elasticsearch/reference/2.x/indices-create-index.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict

from esclient.operations.base import Operation
from esclient.operations.common import join_path
from esclient.transport.base import TransportResponse

if TYPE_CHECKING:
    from esclient.client import Client

# field name -> attribute name -> attribute value
Properties = Dict[str, Dict[str, Any]]


@dataclass
class MappingRequest:
    """Body of a mapping request for one document type."""
    doc_type: str
    properties: Properties = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mappings": {
                self.doc_type: {
                    "properties": {
                        name: dict(attributes)
                        for name, attributes in self.properties.items()
                    }
                }
            }
        }


@dataclass(frozen=True)
class MappingResult:
    """Acknowledgement that the mapping request got a response."""


class MappingOperation(Operation[MappingResult]):
    """Create ``index`` with ``properties`` mapped under ``doc_type``.

    The operation accepts every status code: any response that arrives
    without a transport or codec error is reported as success, including
    4xx answers. Callers that need stricter semantics can subclass and
    override :meth:`accepts_status`.
    """

    method = "PUT"

    def __init__(
        self,
        client: Client,
        index: str,
        doc_type: str,
        properties: Properties,
    ) -> None:
        super().__init__(client)
        self._index = index
        self._request = MappingRequest(doc_type=doc_type, properties=dict(properties))

    @property
    def index(self) -> str:
        return self._index

    @property
    def doc_type(self) -> str:
        return self._request.doc_type

    def with_property(self, name: str, **attributes: Any) -> MappingOperation:
        """Add (or replace) the attributes of one field."""
        self._request.properties[name] = attributes
        return self

    def path(self) -> str:
        return join_path(self._index)

    def body(self) -> Dict[str, Any]:
        return self._request.to_dict()

    def accepts_status(self, status_code: int) -> bool:
        return True

    def decode(self, response: TransportResponse) -> MappingResult:
        if response.content:
            # Validate the body; its contents are not part of the result
            response.decode()
        return MappingResult()
