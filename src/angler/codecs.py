"""Default JSON codec."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic_core import to_json


def json_serialize(value: Any) -> bytes:
    """Encode plain data, pydantic models, dataclasses and datetimes as JSON."""
    return to_json(value)


def json_deserialize(data: bytes, result_type: Any = Any) -> Any:
    """Decode JSON and validate it into ``result_type``.

    ``Any`` and ``object`` return the plain decoded data.
    """
    if result_type is object:
        result_type = Any
    return TypeAdapter(result_type).validate_json(data)
