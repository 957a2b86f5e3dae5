"""Recursive-descent JSON parser producing an owned value tree."""

import logging
import math
import re
import string
from typing import Callable, Optional, Tuple
from .types import ParserInterface, ParseError, ErrorType, StructureStatistics, ValueKind
from .models import JsonValue, JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject
from .error_handler import ErrorHandler


DEFAULT_MAX_DEPTH = 256

WHITESPACE = " \t\n\r"

NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

# Run of characters that need no special handling inside a string literal
STRING_CHUNK_RE = re.compile(r'[^"\\\x00-\x1f\ud800-\udfff]*')

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

LITERALS: Tuple[Tuple[str, Callable[[], JsonValue]], ...] = (
    ("true", lambda: JsonBool(True)),
    ("false", lambda: JsonBool(False)),
    ("null", JsonNull),
)


class JSONParser(ParserInterface):
    """
    JSON parser building a JsonValue tree from a complete text buffer.

    Parsing is fail-fast: the first malformed token raises a ParseError
    carrying the offset where it was detected, and no partial tree is
    returned. The parser holds no per-call state, so one instance can be
    reused for any number of documents.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
            max_depth: Maximum container nesting depth accepted
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)
        self.max_depth = max_depth

    def parse(self, text: str) -> JsonValue:
        """
        Parse a JSON document.

        Args:
            text: Complete document text

        Returns:
            Root JsonValue of the parsed tree

        Raises:
            ParseError: If the text is not exactly one well-formed JSON value
            TypeError: If text is not a str
        """
        if not isinstance(text, str):
            raise TypeError(f"JSON text must be str, got {type(text).__name__}")

        validation_result = self.error_handler.validate_input(text)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ParseError("; ".join(error_messages), text, 0)

        pos = self._skip_whitespace(text, 0)
        value, pos = self._parse_value(text, pos, 0)

        pos = self._skip_whitespace(text, pos)
        if pos != len(text):
            raise ParseError("Unexpected data after JSON value", text, pos)

        self.logger.info(f"Parsed JSON document: {len(text)} characters, root {value.kind.value}")
        return value

    def _skip_whitespace(self, text: str, pos: int) -> int:
        end = len(text)
        while pos < end and text[pos] in WHITESPACE:
            pos += 1
        return pos

    def _parse_value(self, text: str, pos: int, depth: int) -> Tuple[JsonValue, int]:
        """Parse the value starting at pos (already past any whitespace)."""
        if pos >= len(text):
            raise ParseError("Unexpected end of input", text, pos)

        char = text[pos]
        if char == "{":
            return self._parse_object(text, pos, depth + 1)
        if char == "[":
            return self._parse_array(text, pos, depth + 1)
        if char == '"':
            value, pos = self._parse_string(text, pos)
            return JsonString(value), pos
        if char == "-" or "0" <= char <= "9":
            return self._parse_number(text, pos)

        for literal, factory in LITERALS:
            if text.startswith(literal, pos):
                return factory(), pos + len(literal)

        raise ParseError(f"Unexpected character {char!r}", text, pos)

    def _check_depth(self, text: str, pos: int, depth: int) -> None:
        if depth > self.max_depth:
            raise ParseError(
                f"Maximum nesting depth of {self.max_depth} exceeded",
                text, pos, ErrorType.DEPTH
            )

    def _parse_object(self, text: str, pos: int, depth: int) -> Tuple[JsonObject, int]:
        self._check_depth(text, pos, depth)
        end = len(text)
        members = []
        seen_keys = set()

        pos = self._skip_whitespace(text, pos + 1)
        if pos < end and text[pos] == "}":
            return JsonObject(members), pos + 1

        while True:
            if pos >= end or text[pos] != '"':
                raise ParseError("Expected string key", text, pos)

            key_pos = pos
            key, pos = self._parse_string(text, pos)
            if key in seen_keys:
                raise ParseError(f"Duplicate object key {key!r}", text, key_pos)
            seen_keys.add(key)

            pos = self._skip_whitespace(text, pos)
            if pos >= end or text[pos] != ":":
                raise ParseError("Expected ':' after object key", text, pos)

            pos = self._skip_whitespace(text, pos + 1)
            value, pos = self._parse_value(text, pos, depth)
            members.append((key, value))

            pos = self._skip_whitespace(text, pos)
            if pos >= end:
                raise ParseError("Unterminated object", text, pos)
            if text[pos] == "}":
                return JsonObject(members), pos + 1
            if text[pos] != ",":
                raise ParseError("Expected ',' or '}' in object", text, pos)
            pos = self._skip_whitespace(text, pos + 1)

    def _parse_array(self, text: str, pos: int, depth: int) -> Tuple[JsonArray, int]:
        self._check_depth(text, pos, depth)
        end = len(text)
        items = []

        pos = self._skip_whitespace(text, pos + 1)
        if pos < end and text[pos] == "]":
            return JsonArray(items), pos + 1

        while True:
            item, pos = self._parse_value(text, pos, depth)
            items.append(item)

            pos = self._skip_whitespace(text, pos)
            if pos >= end:
                raise ParseError("Unterminated array", text, pos)
            if text[pos] == "]":
                return JsonArray(items), pos + 1
            if text[pos] != ",":
                raise ParseError("Expected ',' or ']' in array", text, pos)
            pos = self._skip_whitespace(text, pos + 1)

    def _parse_number(self, text: str, pos: int) -> Tuple[JsonNumber, int]:
        match = NUMBER_RE.match(text, pos)
        if not match:
            raise ParseError("Invalid number", text, pos)

        value = float(match.group())
        if math.isinf(value):
            raise ParseError("Number out of range", text, pos)
        return JsonNumber(value), match.end()

    def _parse_string(self, text: str, pos: int) -> Tuple[str, int]:
        """Parse a string literal; pos points at the opening quote."""
        start = pos
        end = len(text)
        chunks = []
        pos += 1

        while True:
            match = STRING_CHUNK_RE.match(text, pos)
            chunks.append(match.group())
            pos = match.end()

            if pos >= end:
                raise ParseError("Unterminated string", text, start)

            char = text[pos]
            if char == '"':
                return "".join(chunks), pos + 1
            if "\ud800" <= char <= "\udfff":
                raise ParseError("Unpaired surrogate", text, pos)
            if char != "\\":
                raise ParseError("Invalid control character in string", text, pos)
            if pos + 1 >= end:
                raise ParseError("Unterminated string", text, start)

            escape = text[pos + 1]
            if escape == "u":
                decoded, pos = self._parse_unicode_escape(text, pos)
                chunks.append(decoded)
                continue

            try:
                chunks.append(ESCAPES[escape])
            except KeyError:
                raise ParseError(f"Invalid escape sequence '\\{escape}'", text, pos) from None
            pos += 2

    def _read_hex4(self, text: str, pos: int) -> int:
        digits = text[pos + 2:pos + 6]
        if len(digits) != 4 or any(c not in string.hexdigits for c in digits):
            raise ParseError("Invalid \\u escape", text, pos)
        return int(digits, 16)

    def _parse_unicode_escape(self, text: str, pos: int) -> Tuple[str, int]:
        """Decode a \\uXXXX escape (or surrogate pair) starting at the backslash."""
        code = self._read_hex4(text, pos)

        if 0xD800 <= code <= 0xDBFF:
            low_pos = pos + 6
            if text.startswith("\\u", low_pos):
                low = self._read_hex4(text, low_pos)
                if 0xDC00 <= low <= 0xDFFF:
                    combined = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                    return chr(combined), low_pos + 6
            raise ParseError("Unpaired high surrogate", text, pos)

        if 0xDC00 <= code <= 0xDFFF:
            raise ParseError("Unpaired low surrogate", text, pos)

        return chr(code), pos + 6

    def get_structure_statistics(self, value: JsonValue) -> StructureStatistics:
        """
        Get node counts and nesting depth of a parsed tree.

        Args:
            value: Root of the tree to analyze

        Returns:
            StructureStatistics for the tree
        """
        stats = StructureStatistics(root_kind=value.kind)
        self._count_elements(value, stats, 0)
        return stats

    def _count_elements(self, value: JsonValue, stats: StructureStatistics, depth: int) -> None:
        """Recursively count different types of elements."""
        if value.kind == ValueKind.OBJECT:
            depth += 1
            stats.object_count += 1
            stats.total_keys += len(value)
            for _, member in value.members:
                self._count_elements(member, stats, depth)
        elif value.kind == ValueKind.ARRAY:
            depth += 1
            stats.array_count += 1
            stats.total_items += len(value)
            for item in value.items:
                self._count_elements(item, stats, depth)
        elif value.kind == ValueKind.STRING:
            stats.string_count += 1
        elif value.kind == ValueKind.NUMBER:
            stats.number_count += 1
        elif value.kind == ValueKind.BOOLEAN:
            stats.boolean_count += 1
        else:
            stats.null_count += 1

        stats.max_depth = max(stats.max_depth, depth)
