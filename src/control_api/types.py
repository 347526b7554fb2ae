"""Primitive value types shared by the resource models."""

import json
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .base import Model, Tabular


_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class ID(int):
    """
    Signed 64-bit identifier that survives JSON consumers using doubles.

    Always encoded as a quoted decimal string. Decoding accepts either a
    quoted decimal string or a bare JSON number; an empty value decodes to 0.
    """

    def __new__(cls, value: int = 0):
        value = int(value)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"id {value} out of int64 range")
        return super().__new__(cls, value)

    def __str__(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"ID({int(self)})"

    def to_json(self) -> str:
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, raw: str | bytes) -> "ID":
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        if len(raw) == 0:
            return cls(0)

        if raw[:1] == b'"':
            s = json.loads(raw)
            return cls.parse(s)

        value = json.loads(raw)
        if value is None:
            return cls(0)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"cannot decode {raw!r} as id")
        return cls(value)

    @classmethod
    def parse(cls, s: str) -> "ID":
        """Parse the decimal string form; an empty string is 0."""
        if s == "":
            return cls(0)
        if not _DECIMAL_RE.fullmatch(s):
            raise ValueError(f"invalid id {s!r}")
        return cls(int(s, 10))

    @classmethod
    def _coerce(cls, value: Any) -> "ID":
        if isinstance(value, ID):
            return value
        if value is None:
            return cls(0)
        if isinstance(value, (bytes, bytearray)):
            return cls.from_json(bytes(value))
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"cannot decode {value!r} as id")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )


class Status(str, Enum):
    pending = "pending"
    success = "success"
    error = "error"


class Empty(Model, Tabular):
    """Result of operations that return no payload."""

    def table(self) -> list[list[str]]:
        return [["Operation success"]]


def age(t: datetime | None, now: datetime | None = None) -> str:
    """Format the time elapsed since ``t`` in its coarsest non-zero unit (3d, 5h, 45m, 12s).

    An unset timestamp renders as an empty string.
    """
    if t is None:
        return ""
    if now is None:
        now = datetime.now(timezone.utc)
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - t).total_seconds())
    if (x := seconds // 86400) > 0:
        return f"{x}d"
    if (x := seconds // 3600) > 0:
        return f"{x}h"
    if (x := seconds // 60) > 0:
        return f"{x}m"
    return f"{seconds}s"
