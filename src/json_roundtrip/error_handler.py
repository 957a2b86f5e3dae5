"""Error handling implementation for the JSON round-tripper."""

import logging
import os
import pathlib
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ParseError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for round-trip operations.

    Validates inputs before they reach the parser and classifies
    failures so the command-line driver can decide what to report
    and which exit status to use.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON text.

        Args:
            input_data: JSON text to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            result = ValidationUtils.validate_json_text(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Classify a processing error and suggest what to do about it.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with the exit status and a suggested action
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return self._handle_syntax_error(error)
        elif error.error_type == ErrorType.DEPTH:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Document nests deeper than the parser allows. "
                               "Raise the maximum depth if the input is trusted."
            )
        elif error.error_type == ErrorType.FILESYSTEM:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Check that the file exists, is a regular file and is readable."
            )
        elif error.error_type == ErrorType.ENCODING:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Input must be UTF-8 encoded text. Re-save the file as UTF-8."
            )
        elif error.error_type == ErrorType.PARAMETER:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check the command-line options and try again.",
                exit_code=2
            )
        elif error.error_type == ErrorType.MEMORY:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Input is too large to hold in memory as a tree."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )

    def _handle_syntax_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle malformed JSON input."""
        if isinstance(error, ParseError):
            action = f"Fix the JSON near line {error.line}, column {error.column}."
        else:
            action = "Fix the JSON syntax and try again."
        return ErrorResponse(
            can_recover=False,
            suggested_action=action,
            partial_results=None
        )

    def validate_file_path(self, path: str) -> ValidationResult:
        """
        Validate an input file path.

        Args:
            path: File path to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not path:
            errors.append(ValidationError(
                type=ErrorType.FILESYSTEM,
                message="File path cannot be empty",
                location="path"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            resolved_path = pathlib.Path(path).resolve()

            if not resolved_path.exists():
                errors.append(ValidationError(
                    type=ErrorType.FILESYSTEM,
                    message=f"File not found: {path}",
                    location="path"
                ))
            elif not resolved_path.is_file():
                errors.append(ValidationError(
                    type=ErrorType.FILESYSTEM,
                    message=f"Path exists but is not a file: {path}",
                    location="path"
                ))
            elif not os.access(resolved_path, os.R_OK):
                errors.append(ValidationError(
                    type=ErrorType.FILESYSTEM,
                    message=f"File is not readable: {path}",
                    location="path"
                ))

        except (OSError, ValueError) as e:
            errors.append(ValidationError(
                type=ErrorType.FILESYSTEM,
                message=f"Invalid file path: {str(e)}",
                location="path"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
