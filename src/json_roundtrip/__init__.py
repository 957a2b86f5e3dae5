"""
JSON Round-Tripper - parse a JSON document and print it back.

Reads a JSON document into an ordered tree of typed values and renders
it again either minified (compact) or indented (pretty).
"""

from .round_tripper import JSONRoundTripper
from .parser import JSONParser
from .printer import JSONPrinter
from .models import JsonValue, JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject
from .types import FormatMode, RoundTripResult, ParseError, ProcessingError

__version__ = "1.0.0"
__all__ = [
    "JSONRoundTripper",
    "JSONParser",
    "JSONPrinter",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "FormatMode",
    "RoundTripResult",
    "ParseError",
    "ProcessingError",
]
