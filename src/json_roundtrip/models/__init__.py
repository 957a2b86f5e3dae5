"""Data models for the JSON round-tripper."""

from .json_value import (
    JsonValue,
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonArray,
    JsonObject,
    from_python,
)

__all__ = [
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "from_python",
]
