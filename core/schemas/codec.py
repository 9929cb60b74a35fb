"""
JSON Codec

Purpose: Serialize request bodies and decode response bodies.

Output is compact (no whitespace), keeps key order, leaves slashes and
non-ASCII characters unescaped, and rejects NaN/Infinity.
"""

import json
import math
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from .errors import DeserializationError, SerializationError

# Compact JSON separators - no whitespace
JSON_SEPARATORS: tuple[str, str] = (",", ":")


def _prepare_value(value: Any, path: str = "", _seen: Optional[set[int]] = None) -> Any:
    """
    Recursively convert a value into plain JSON types.

    ``_seen`` holds the ids of the containers on the current walk, so a
    container that contains itself is reported instead of recursing forever.

    Raises:
        SerializationError: If the value (or a nested value) has no JSON form.
    """
    if _seen is None:
        _seen = set()

    if isinstance(value, Enum):
        return _prepare_value(value.value, path, _seen)

    if value is None or isinstance(value, (bool, int, str)):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(
                message=f"Non-finite float value encountered: {value}",
                details={"path": path, "value": str(value)},
            )
        return value

    if isinstance(value, (datetime, date)):
        return value.isoformat()

    if isinstance(value, BaseModel):
        return _prepare_value(value.model_dump(mode="json"), path, _seen)

    if isinstance(value, (dict, list, tuple)):
        if id(value) in _seen:
            raise SerializationError(
                message="Circular reference detected",
                details={"path": path},
            )
        _seen.add(id(value))
        try:
            return _prepare_container(value, path, _seen)
        finally:
            _seen.discard(id(value))

    raise SerializationError(
        message=f"Cannot serialize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def _prepare_container(value: Any, path: str, _seen: set[int]) -> Any:
    if isinstance(value, dict):
        prepared = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise SerializationError(
                    message=f"Object keys must be strings, got {type(k).__name__}",
                    details={"path": path, "key": repr(k)},
                )
            prepared[k] = _prepare_value(v, f"{path}.{k}" if path else k, _seen)
        return prepared

    return [_prepare_value(item, f"{path}[{i}]", _seen) for i, item in enumerate(value)]


def dumps_json(obj: Any) -> str:
    """
    Serialize a request body to JSON text.

    Args:
        obj: A dict, list, Pydantic model or scalar.

    Returns:
        Compact JSON string, e.g. '{"id":null,"name":"Bob"}'.

    Raises:
        SerializationError: If the object contains non-serializable values.
    """
    prepared = _prepare_value(obj)
    try:
        return json.dumps(
            prepared,
            separators=JSON_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(
            message=f"Failed to serialize to JSON: {e}",
            details={"type": type(obj).__name__, "error": str(e)},
        ) from e


def loads_json(text: str) -> Any:
    """
    Decode a JSON response body.

    Raises:
        DeserializationError: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(
            message=f"Response body is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            body=text,
        ) from e
