"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Operation builders.
"""

from esclient.operations.base import Operation
from esclient.operations.common import ShardCountResult, format_multi, join_path
from esclient.operations.delete_index import DeleteIndexOperation, DeleteIndexResult
from esclient.operations.mapping import (
    MappingOperation,
    MappingRequest,
    MappingResult,
    Properties,
)
from esclient.operations.refresh import RefreshOperation, RefreshResult

__all__ = [
    "Operation",
    "ShardCountResult",
    "format_multi",
    "join_path",
    "DeleteIndexOperation",
    "DeleteIndexResult",
    "MappingOperation",
    "MappingRequest",
    "MappingResult",
    "Properties",
    "RefreshOperation",
    "RefreshResult",
]
