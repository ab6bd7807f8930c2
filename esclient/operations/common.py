"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
esclient, a product of Garudex Labs

Helpers and result records shared by several operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence

from esclient.exceptions import CodecError


def format_multi(names: Sequence[str]) -> str:
    """Join index names into one path segment.

    ``[]`` gives ``""``, ``["a"]`` gives ``"a"`` and ``["a", "b"]`` gives
    ``"a,b"``.
    """
    return ",".join(names)


def join_path(*segments: str) -> str:
    """Build an absolute path from ``segments``, skipping empty ones."""
    return "/" + "/".join(segment for segment in segments if segment)


def expect_object(value: Any, what: str) -> Dict[str, Any]:
    """Return ``value`` if it is a JSON object, raise CodecError otherwise."""
    if not isinstance(value, dict):
        raise CodecError(f"Expected {what} to be a JSON object, got {type(value).__name__}")
    return value


def expect_int(data: Dict[str, Any], key: str) -> int:
    """Return the integer stored under ``key``, raise CodecError otherwise."""
    if key not in data:
        raise CodecError(f"Missing field '{key}'")
    value = data[key]
    # bool is an int subclass but never a valid counter
    if isinstance(value, bool) or not isinstance(value, int):
        raise CodecError(f"Field '{key}' must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class ShardCountResult:
    """How many shards took part in an operation and how they fared."""
    total: int
    successful: int
    failed: int

    @classmethod
    def from_dict(cls, data: Any) -> ShardCountResult:
        data = expect_object(data, "'_shards'")
        return cls(
            total=expect_int(data, "total"),
            successful=expect_int(data, "successful"),
            failed=expect_int(data, "failed"),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "successful": self.successful,
            "failed": self.failed,
        }
