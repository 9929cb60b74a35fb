"""
Unit tests for the JSON codec used for request and response bodies.
"""

import math
from datetime import datetime, timezone
from enum import Enum

import pytest
from pydantic import BaseModel

from core.schemas import (
    DeserializationError,
    ErrorCodes,
    SerializationError,
    dumps_json,
    loads_json,
)


class Color(str, Enum):
    RED = "red"


class CommentModel(BaseModel):
    name: str
    text: str


class TestDumpsJson:

    def test_compact_and_ordered(self):
        assert dumps_json({"id": None, "name": "Bob", "text": "Hello, World"}) == (
            '{"id":null,"name":"Bob","text":"Hello, World"}'
        )

    def test_unicode_and_slashes_unescaped(self):
        assert dumps_json({"text": "héllo/wörld"}) == '{"text":"héllo/wörld"}'

    def test_models_enums_and_datetimes(self):
        data = {
            "comment": CommentModel(name="Bob", text="Hi"),
            "color": Color.RED,
            "at": datetime(2026, 1, 1, tzinfo=timezone.utc),
            "tags": ("a", "b"),
        }
        assert dumps_json(data) == (
            '{"comment":{"name":"Bob","text":"Hi"},"color":"red",'
            '"at":"2026-01-01T00:00:00+00:00","tags":["a","b"]}'
        )

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_floats_rejected(self, value):
        with pytest.raises(SerializationError) as exc_info:
            dumps_json({"score": value})
        assert exc_info.value.code == ErrorCodes.SERIALIZATION_ERROR
        assert exc_info.value.details["path"] == "score"

    def test_unknown_types_rejected_with_path(self):
        with pytest.raises(SerializationError) as exc_info:
            dumps_json({"items": [1, {"x": object()}]})
        assert exc_info.value.details["path"] == "items[1].x"

    def test_non_string_keys_rejected(self):
        with pytest.raises(SerializationError):
            dumps_json({1: "one"})

    def test_self_referencing_dict_rejected(self):
        body = {"name": "Bob"}
        body["self"] = body

        with pytest.raises(SerializationError) as exc_info:
            dumps_json(body)
        assert exc_info.value.details["path"] == "self"

    def test_self_referencing_list_rejected(self):
        items = [1]
        items.append({"items": items})

        with pytest.raises(SerializationError) as exc_info:
            dumps_json({"items": items})
        assert exc_info.value.details["path"] == "items[1].items"

    def test_shared_values_are_not_cycles(self):
        tags = ["a", "b"]
        assert dumps_json({"x": tags, "y": [tags, tags]}) == (
            '{"x":["a","b"],"y":[["a","b"],["a","b"]]}'
        )


class TestLoadsJson:

    def test_decodes(self):
        assert loads_json('{"method":"GET"}') == {"method": "GET"}

    def test_invalid_json(self):
        with pytest.raises(DeserializationError) as exc_info:
            loads_json("not json")
        assert exc_info.value.code == ErrorCodes.DESERIALIZATION_ERROR
        assert exc_info.value.details["body_excerpt"] == "not json"
