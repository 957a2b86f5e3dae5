"""Tests for JSON parser."""

import pytest
from json_roundtrip.parser import JSONParser, DEFAULT_MAX_DEPTH
from json_roundtrip.types import ParseError, ErrorType, ValueKind
from json_roundtrip.models import (
    JsonNull,
    JsonBool,
    JsonNumber,
    JsonString,
    JsonArray,
    JsonObject,
)


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_literals(self):
        """Test parsing true, false and null."""
        assert self.parser.parse("true") == JsonBool(True)
        assert self.parser.parse("false") == JsonBool(False)
        assert self.parser.parse("null") == JsonNull()

    @pytest.mark.parametrize("text, expected", [
        ("0", 0.0),
        ("-0", -0.0),
        ("42", 42.0),
        ("-12.25E-2", -0.1225),
        ("1.5e3", 1500.0),
        ("2E+2", 200.0),
        ("9007199254740993", 9007199254740992.0),
    ])
    def test_parse_numbers(self, text, expected):
        """Test parsing numbers into floats."""
        value = self.parser.parse(text)

        assert value.kind == ValueKind.NUMBER
        assert value.value == expected

    @pytest.mark.parametrize("text, position", [
        ("01", 1),
        ("1.", 1),
        ("-", 0),
        (".5", 0),
        ("+1", 0),
        ("1e", 1),
    ])
    def test_parse_invalid_numbers(self, text, position):
        """Test that malformed numbers are rejected at the offending offset."""
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse(text)

        assert exc_info.value.position == position

    def test_parse_number_out_of_range(self):
        """Test that numbers overflowing a double are rejected."""
        with pytest.raises(ParseError, match="out of range"):
            self.parser.parse("[1e999]")

    def test_parse_string_escapes(self):
        """Test all two-character escape sequences."""
        value = self.parser.parse(r'"\" \\ \/ \b \f \n \r \t"')
        assert value == JsonString('" \\ / \b \f \n \r \t')

    def test_parse_escaped_newline_becomes_real_newline(self):
        """Test that a backslash-n escape yields an actual newline."""
        value = self.parser.parse('"a\\nb"')
        assert value.value == "a\nb"

    def test_parse_unicode_escape(self):
        """Test \\uXXXX escapes and raw non-ASCII text."""
        assert self.parser.parse(r'"caf\u00e9"').value == "caf\u00e9"
        assert self.parser.parse('"café"').value == "café"

    def test_parse_surrogate_pair(self):
        """Test that a high/low surrogate pair combines into one code point."""
        value = self.parser.parse(r'"\ud83d\ude00"')
        assert value.value == "\U0001F600"

    @pytest.mark.parametrize("text, message", [
        (r'"\ud83d"', "Unpaired high surrogate"),
        (r'"\ud83dx"', "Unpaired high surrogate"),
        (r'"\ud83d\u0041"', "Unpaired high surrogate"),
        (r'"\ude00"', "Unpaired low surrogate"),
    ])
    def test_parse_lone_surrogates(self, text, message):
        """Test that unpaired surrogates are rejected."""
        with pytest.raises(ParseError, match=message):
            self.parser.parse(text)

    @pytest.mark.parametrize("text, position", [
        ('"\ud800"', 1),
        ('"ab\udfff"', 3),
        ('["ok", "\ud83d\ude00"]', 8),
    ])
    def test_parse_raw_surrogate_code_points(self, text, position):
        """Test that unescaped surrogate code points are rejected."""
        with pytest.raises(ParseError, match="Unpaired surrogate") as exc_info:
            self.parser.parse(text)
        assert exc_info.value.position == position

    def test_parse_invalid_escape(self):
        """Test that unknown escapes are rejected."""
        with pytest.raises(ParseError, match="Invalid escape") as exc_info:
            self.parser.parse(r'"\x"')
        assert exc_info.value.position == 1

    def test_parse_invalid_unicode_escape(self):
        """Test that \\u needs four hex digits."""
        with pytest.raises(ParseError, match="Invalid \\\\u escape"):
            self.parser.parse(r'"\u12G4"')
        with pytest.raises(ParseError, match="Invalid \\\\u escape"):
            self.parser.parse(r'"\u12"')

    def test_parse_raw_control_character(self):
        """Test that unescaped control characters are rejected."""
        with pytest.raises(ParseError, match="control character") as exc_info:
            self.parser.parse('"a\tb"')
        assert exc_info.value.position == 2

    def test_parse_unterminated_string(self):
        """Test that an unterminated string reports where it started."""
        with pytest.raises(ParseError, match="Unterminated string") as exc_info:
            self.parser.parse('["ok", "abc')
        assert exc_info.value.position == 7

    def test_parse_arrays(self):
        """Test parsing empty and nested arrays."""
        assert self.parser.parse("[]") == JsonArray()
        assert self.parser.parse("[1, [2, []]]") == JsonArray([
            JsonNumber(1),
            JsonArray([JsonNumber(2), JsonArray()]),
        ])

    def test_parse_object_keeps_source_order(self):
        """Test that object members keep their source order."""
        value = self.parser.parse('{"b": 1, "a": 2, "c": {}}')

        assert value.keys() == ["b", "a", "c"]
        assert value == JsonObject([
            ("b", JsonNumber(1)),
            ("a", JsonNumber(2)),
            ("c", JsonObject()),
        ])

    def test_whitespace_insensitivity(self):
        """Test that insignificant whitespace does not change the tree."""
        spaced = self.parser.parse(' { "x" : 1 } ')
        tight = self.parser.parse('{"x":1}')
        assert spaced == tight

    def test_parse_all_whitespace_kinds(self):
        """Test space, tab, newline and carriage return between tokens."""
        value = self.parser.parse('\r\n\t[ 1 ,\n\t2 ]\r\n')
        assert value == JsonArray([JsonNumber(1), JsonNumber(2)])

    @pytest.mark.parametrize("text, position, message", [
        ('{"a": }', 6, "Unexpected character"),
        ('{"a" 1}', 5, "Expected ':'"),
        ('{a:1}', 1, "Expected string key"),
        ('{"a":1,}', 7, "Expected string key"),
        ('{"a":1 "b":2}', 7, "Expected ',' or '}'"),
        ('[1,]', 3, "Unexpected character"),
        ('[1 2]', 3, "Expected ',' or ']'"),
        ('[1}', 2, "Expected ',' or ']'"),
        ('[1', 2, "Unterminated array"),
        ('{"a":1', 6, "Unterminated object"),
        ('{"a":', 5, "Unexpected end of input"),
        ('{} x', 3, "Unexpected data after JSON value"),
        ('nul', 0, "Unexpected character"),
        ('True', 0, "Unexpected character"),
    ])
    def test_parse_malformed_input(self, text, position, message):
        """Test that malformed documents fail at the right offset."""
        with pytest.raises(ParseError, match=message) as exc_info:
            self.parser.parse(text)

        error = exc_info.value
        assert error.position == position
        assert error.error_type == ErrorType.SYNTAX

    def test_parse_missing_value_reports_remaining_text(self):
        """Test the diagnostic for an object member without a value."""
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse('{"a": }')

        assert exc_info.value.context == "}"
        assert exc_info.value.error_before() == "Error before: [}]"

    def test_parse_duplicate_key(self):
        """Test that duplicate keys are rejected at the second occurrence."""
        with pytest.raises(ParseError, match="Duplicate object key 'a'") as exc_info:
            self.parser.parse('{"a":1,"a":2}')
        assert exc_info.value.position == 7

    def test_parse_error_line_and_column(self):
        """Test that errors carry 1-based line and column."""
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse('{\n  "a": tru\n}')

        error = exc_info.value
        assert error.position == 9
        assert error.line == 2
        assert error.column == 8
        assert error.context == "tru\n}"
        assert "line 2, column 8" in str(error)

    def test_parse_error_context_is_truncated(self):
        """Test that the remaining-text excerpt is bounded."""
        text = "[" + "x" * 100 + "]"
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse(text)
        assert exc_info.value.context == "x" * ParseError.CONTEXT_LENGTH

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_parse_empty_input(self, text):
        """Test parsing empty JSON text."""
        with pytest.raises(ParseError, match="empty") as exc_info:
            self.parser.parse(text)
        assert exc_info.value.position == 0
        assert "line 1, column 1" in str(exc_info.value)

    def test_parse_rejects_non_string(self):
        """Test that bytes input is a programming error."""
        with pytest.raises(TypeError):
            self.parser.parse(b"{}")

    def test_parse_depth_limit(self):
        """Test the nesting depth limit."""
        parser = JSONParser(max_depth=3)

        assert parser.parse("[[[1]]]") == JsonArray([JsonArray([JsonArray([JsonNumber(1)])])])

        with pytest.raises(ParseError, match="nesting depth") as exc_info:
            parser.parse("[[[[1]]]]")
        assert exc_info.value.error_type == ErrorType.DEPTH
        assert exc_info.value.position == 3

    def test_parse_default_depth_limit(self):
        """Test documents at and beyond the default depth."""
        deepest = "[" * DEFAULT_MAX_DEPTH + "]" * DEFAULT_MAX_DEPTH
        assert self.parser.parse(deepest).kind == ValueKind.ARRAY

        too_deep = "[" * (DEFAULT_MAX_DEPTH + 1) + "]" * (DEFAULT_MAX_DEPTH + 1)
        with pytest.raises(ParseError):
            self.parser.parse(too_deep)

    def test_parser_is_reusable_after_failure(self):
        """Test that a failed parse leaves no state behind."""
        with pytest.raises(ParseError):
            self.parser.parse("[")
        assert self.parser.parse("[1]") == JsonArray([JsonNumber(1)])


class TestStructureStatistics:
    """Tests for structure statistics."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_statistics_for_mixed_document(self):
        """Test counts and depth for a document with every variant."""
        value = self.parser.parse('{"a": [1, "x", null, true], "b": {}}')
        stats = self.parser.get_structure_statistics(value)

        assert stats.root_kind == ValueKind.OBJECT
        assert stats.object_count == 2
        assert stats.array_count == 1
        assert stats.string_count == 1
        assert stats.number_count == 1
        assert stats.boolean_count == 1
        assert stats.null_count == 1
        assert stats.total_keys == 2
        assert stats.total_items == 4
        assert stats.max_depth == 2
        assert stats.node_count == 7

    def test_statistics_for_scalar_root(self):
        """Test that a scalar root has depth zero."""
        stats = self.parser.get_structure_statistics(self.parser.parse("5"))

        assert stats.root_kind == ValueKind.NUMBER
        assert stats.max_depth == 0
        assert stats.node_count == 1

    def test_statistics_for_font_document(self, sample_font_text):
        """Test statistics on a typeface-style document."""
        stats = self.parser.get_structure_statistics(self.parser.parse(sample_font_text))

        assert stats.total_keys == 14 + 3 + 4 * 3 + 4 + 2
        assert stats.max_depth == 3
        assert stats.array_count == 1
