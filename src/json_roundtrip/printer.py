"""JSON printer rendering a value tree in compact or pretty form."""

import logging
import math
import re
from typing import List, Optional
from .types import PrinterInterface, FormatMode, ValueKind
from .models import JsonValue
from .utils.validation import ValidationUtils


DEFAULT_INDENT = "\t"

# Largest magnitude below which every integer is exactly representable as a double
MAX_SAFE_INTEGER = 2 ** 53

ESCAPE_RE = re.compile(r'["\\\x00-\x1f]')

ESCAPE_MAP = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(match: "re.Match[str]") -> str:
    char = match.group()
    return ESCAPE_MAP.get(char) or f"\\u{ord(char):04x}"


class JSONPrinter(PrinterInterface):
    """
    Serializes JsonValue trees back to JSON text.

    Compact mode emits no insignificant whitespace. Pretty mode puts every
    array element and object member on its own line, indented by one
    indent unit per nesting level, with a space after each ':'. Key and
    element order is always the order held by the tree.
    """

    def __init__(self, indent: str = DEFAULT_INDENT,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON printer.

        Args:
            indent: Indentation unit used in pretty mode (spaces and tabs only)
            logger: Optional logger instance

        Raises:
            ValueError: If indent is not a valid indentation unit
        """
        validation_result = ValidationUtils.validate_indent(indent)
        if not validation_result.is_valid:
            raise ValueError(validation_result.errors[0].message)

        self.indent = indent
        self.logger = logger or logging.getLogger(__name__)

    def print(self, value: JsonValue, mode: FormatMode = FormatMode.COMPACT) -> str:
        """
        Render a value tree as JSON text.

        Args:
            value: Root of the tree to render
            mode: FormatMode.COMPACT or FormatMode.PRETTY

        Returns:
            JSON text without a trailing newline
        """
        parts: List[str] = []
        if mode == FormatMode.PRETTY:
            self._write_pretty(value, parts, 0)
        else:
            self._write_compact(value, parts)

        output = "".join(parts)
        self.logger.debug(f"Printed {value.kind.value} in {mode.value} mode: {len(output)} characters")
        return output

    def compact(self, value: JsonValue) -> str:
        return self.print(value, FormatMode.COMPACT)

    def pretty(self, value: JsonValue) -> str:
        return self.print(value, FormatMode.PRETTY)

    def _write_compact(self, value: JsonValue, parts: List[str]) -> None:
        if value.kind == ValueKind.OBJECT:
            parts.append("{")
            for index, (key, member) in enumerate(value.members):
                if index:
                    parts.append(",")
                parts.append(self.format_string(key))
                parts.append(":")
                self._write_compact(member, parts)
            parts.append("}")
        elif value.kind == ValueKind.ARRAY:
            parts.append("[")
            for index, item in enumerate(value.items):
                if index:
                    parts.append(",")
                self._write_compact(item, parts)
            parts.append("]")
        else:
            parts.append(self.format_scalar(value))

    def _write_pretty(self, value: JsonValue, parts: List[str], level: int) -> None:
        if value.kind == ValueKind.OBJECT and value.members:
            inner = self.indent * (level + 1)
            parts.append("{\n")
            for index, (key, member) in enumerate(value.members):
                if index:
                    parts.append(",\n")
                parts.append(inner)
                parts.append(self.format_string(key))
                parts.append(": ")
                self._write_pretty(member, parts, level + 1)
            parts.append("\n" + self.indent * level + "}")
        elif value.kind == ValueKind.ARRAY and value.items:
            inner = self.indent * (level + 1)
            parts.append("[\n")
            for index, item in enumerate(value.items):
                if index:
                    parts.append(",\n")
                parts.append(inner)
                self._write_pretty(item, parts, level + 1)
            parts.append("\n" + self.indent * level + "]")
        else:
            # Scalars and empty containers look the same in both modes
            self._write_compact(value, parts)

    def format_scalar(self, value: JsonValue) -> str:
        """Render a null, boolean, number or string node."""
        if value.kind == ValueKind.NULL:
            return "null"
        if value.kind == ValueKind.BOOLEAN:
            return "true" if value.value else "false"
        if value.kind == ValueKind.NUMBER:
            return self.format_number(value.value)
        if value.kind == ValueKind.STRING:
            return self.format_string(value.value)
        raise TypeError(f"Not a scalar JSON value: {value.kind.value}")

    @staticmethod
    def format_number(number: float) -> str:
        """
        Render a number with no more digits than needed to read it back.

        Integral values in the exactly-representable range print without
        a decimal point; all others use the shortest repr that round-trips.
        """
        if number.is_integer() and abs(number) <= MAX_SAFE_INTEGER:
            if number == 0 and math.copysign(1.0, number) < 0:
                return "-0"
            return str(int(number))
        return repr(number)

    @staticmethod
    def format_string(text: str) -> str:
        return '"' + ESCAPE_RE.sub(_escape_char, text) + '"'
