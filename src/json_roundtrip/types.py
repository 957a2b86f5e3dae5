"""Core type definitions for the JSON round-tripper."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class ValueKind(Enum):
    """Enumeration of JSON value variants."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class FormatMode(Enum):
    """Enumeration of serialization modes."""
    COMPACT = "compact"
    PRETTY = "pretty"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    DEPTH = "depth"
    PARAMETER = "parameter"
    ENCODING = "encoding"
    MEMORY = "memory"
    FILESYSTEM = "filesystem"


@dataclass
class RoundTripResult:
    """Result of a parse then print operation."""
    success: bool
    output: str
    mode: FormatMode
    input_size: int = 0
    output_size: int = 0
    errors: Optional[List[str]] = None
    error: Optional["ProcessingError"] = None

    @property
    def error_type(self) -> Optional["ErrorType"]:
        return self.error.error_type if self.error else None

    @property
    def error_position(self) -> Optional[int]:
        """Character offset of a parse failure, if that is what went wrong."""
        return getattr(self.error, "position", None)

    @property
    def error_context(self) -> Optional[str]:
        if isinstance(self.error, ParseError):
            return self.error.context
        return None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    exit_code: int = 1
    partial_results: Optional[Any] = None


@dataclass
class StructureStatistics:
    """Node counts and nesting depth of a parsed tree."""
    object_count: int = 0
    array_count: int = 0
    string_count: int = 0
    number_count: int = 0
    boolean_count: int = 0
    null_count: int = 0
    total_keys: int = 0
    total_items: int = 0
    max_depth: int = 0
    root_kind: Optional[ValueKind] = None

    @property
    def node_count(self) -> int:
        return (self.object_count + self.array_count + self.string_count
                + self.number_count + self.boolean_count + self.null_count)


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class ParseError(ProcessingError):
    """
    Raised when input text is not a well-formed JSON document.

    Carries the character offset at which the failure was detected, the
    1-based line and column of that offset, and a short excerpt of the
    text that remained unparsed.
    """

    CONTEXT_LENGTH = 32

    def __init__(self, message: str, text: str, position: int,
                 error_type: ErrorType = ErrorType.SYNTAX):
        position = max(0, min(position, len(text)))
        self.message = message
        self.position = position
        self.line = text.count("\n", 0, position) + 1
        self.column = position - (text.rfind("\n", 0, position) + 1) + 1
        remaining = text[position:position + self.CONTEXT_LENGTH]
        super().__init__(
            f"{message} at line {self.line}, column {self.column} (char {position})",
            error_type,
            context=remaining,
        )

    def error_before(self) -> str:
        """Render the diagnostic line printed by the command-line driver."""
        return f"Error before: [{self.context}]"


# Abstract base classes for interfaces

class ParserInterface(ABC):
    """Abstract interface for JSON parsers."""

    @abstractmethod
    def parse(self, text: str) -> "JsonValue":
        """Parse a complete document into a value tree."""
        pass


class PrinterInterface(ABC):
    """Abstract interface for JSON printers."""

    @abstractmethod
    def print(self, value: "JsonValue", mode: FormatMode = FormatMode.COMPACT) -> str:
        """Serialize a value tree to text."""
        pass


class RoundTripperInterface(ABC):
    """Abstract interface for the parse then print pipeline."""

    @abstractmethod
    def round_trip(self, text: str, mode: Optional[FormatMode] = None) -> RoundTripResult:
        """Parse text and print it back in the requested mode."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass

