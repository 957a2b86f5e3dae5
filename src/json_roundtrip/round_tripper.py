"""Parse then print pipeline for JSON documents."""

import logging
from pathlib import Path
from typing import Optional, Union
from .types import (
    RoundTripperInterface,
    RoundTripResult,
    FormatMode,
    ProcessingError,
    ErrorType
)
from .models import JsonValue
from .parser import JSONParser, DEFAULT_MAX_DEPTH
from .printer import JSONPrinter, DEFAULT_INDENT
from .error_handler import ErrorHandler
from .io.file_reader import FileReader
from .io.file_writer import FileWriter
from .profiler import PerformanceProfiler
from .utils.validation import ValidationUtils


class JSONRoundTripper(RoundTripperInterface):
    """
    Parses a JSON document and prints it back in compact or pretty form.

    Failures never escape round_trip() or round_trip_file(): they come
    back as an unsuccessful RoundTripResult carrying the error message,
    its type and, for parse failures, the offset and remaining text.
    """

    def __init__(self, default_mode: FormatMode = FormatMode.COMPACT,
                 indent: str = DEFAULT_INDENT,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = False):
        """
        Initialize the round-tripper.

        Args:
            default_mode: Mode used when round_trip() is called without one
            indent: Indentation unit for pretty mode
            max_depth: Maximum container nesting depth accepted by the parser
            logger: Optional logger instance
            enable_profiling: Record time and memory of each round trip
        """
        self.default_mode = default_mode
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger, max_depth=max_depth)
        self.printer = JSONPrinter(indent=indent, logger=self.logger)
        self.file_reader = FileReader(self.error_handler, self.logger)
        self.file_writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def parse(self, text: str) -> JsonValue:
        """Parse text, raising ParseError on malformed input."""
        return self.parser.parse(text)

    def print(self, value: JsonValue, mode: Optional[FormatMode] = None) -> str:
        return self.printer.print(value, self._resolve_mode(mode))

    def round_trip(self, text: str,
                   mode: Optional[Union[FormatMode, str]] = None) -> RoundTripResult:
        """
        Parse text and print the resulting tree.

        Args:
            text: Complete JSON document
            mode: FormatMode or its name; defaults to default_mode

        Returns:
            RoundTripResult with the rendered output or the failure details
        """
        try:
            resolved_mode = self._resolve_mode(mode)
        except ProcessingError as e:
            return self._failure(e, self.default_mode)

        if not isinstance(text, str):
            error = ProcessingError(f"JSON text must be str, got {type(text).__name__}",
                                    ErrorType.PARAMETER)
            return self._failure(error, resolved_mode)

        input_size = len(text.encode("utf-8", "surrogatepass"))

        try:
            if self.profiler:
                with self.profiler.profile_operation(f"round_trip_{resolved_mode.value}", input_size):
                    output = self._run(text, resolved_mode)
                    self.profiler.record_output(len(output.encode("utf-8", "surrogatepass")))
            else:
                output = self._run(text, resolved_mode)

        except ProcessingError as e:
            return self._failure(e, resolved_mode, input_size)
        except RecursionError:
            error = ProcessingError("Document nests too deeply to process", ErrorType.DEPTH)
            return self._failure(error, resolved_mode, input_size)
        except MemoryError:
            error = ProcessingError("Out of memory while processing document", ErrorType.MEMORY)
            return self._failure(error, resolved_mode, input_size)

        output_size = len(output.encode("utf-8", "surrogatepass"))
        self.logger.info(f"Round trip complete: {input_size} bytes in, "
                         f"{output_size} bytes out ({resolved_mode.value})")

        return RoundTripResult(
            success=True,
            output=output,
            mode=resolved_mode,
            input_size=input_size,
            output_size=output_size
        )

    def round_trip_file(self, path: Union[str, Path],
                        mode: Optional[Union[FormatMode, str]] = None) -> RoundTripResult:
        """
        Read a JSON file and round-trip its contents.

        Args:
            path: Path of the JSON file
            mode: FormatMode or its name; defaults to default_mode

        Returns:
            RoundTripResult with the rendered output or the failure details
        """
        try:
            text = self.file_reader.read_text(path)
        except ProcessingError as e:
            try:
                resolved_mode = self._resolve_mode(mode)
            except ProcessingError:
                resolved_mode = self.default_mode
            return self._failure(e, resolved_mode)

        return self.round_trip(text, mode)

    def _run(self, text: str, mode: FormatMode) -> str:
        value = self.parser.parse(text)
        if self.profiler:
            self.profiler.sample_performance()
        return self.printer.print(value, mode)

    def _resolve_mode(self, mode: Optional[Union[FormatMode, str]]) -> FormatMode:
        if mode is None:
            return self.default_mode

        validation_result = ValidationUtils.validate_mode(mode)
        if not validation_result.is_valid:
            raise ProcessingError(validation_result.errors[0].message, ErrorType.PARAMETER)

        if isinstance(mode, FormatMode):
            return mode
        return FormatMode(mode.lower())

    def _failure(self, error: ProcessingError, mode: FormatMode,
                 input_size: int = 0) -> RoundTripResult:
        self.logger.debug(f"Round trip failed: {error}")
        return RoundTripResult(
            success=False,
            output="",
            mode=mode,
            input_size=input_size,
            errors=[str(error)],
            error=error
        )
