"""Validation utilities for input text and formatting parameters."""

from typing import Any
from ..types import ValidationResult, ValidationError, ErrorType, FormatMode


# Inputs above this size still parse but are worth a warning
LARGE_INPUT_CHARS = 64 * 1024 * 1024


class ValidationUtils:
    """Utility class for validating round-trip inputs and options."""

    @staticmethod
    def validate_json_text(text: str) -> ValidationResult:
        """
        Run cheap checks on JSON text before parsing it.

        Args:
            text: JSON text to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not text.strip(" \t\n\r"):
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON text is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if text.startswith("\ufeff"):
            warnings.append("Input starts with a byte order mark, which is not valid JSON.")

        if len(text) > LARGE_INPUT_CHARS:
            warnings.append(f"Large input ({len(text)} characters); the whole tree is held in memory.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_indent(indent: Any) -> ValidationResult:
        """
        Validate an indentation unit for pretty printing.

        Args:
            indent: Candidate indentation unit

        Returns:
            ValidationResult with validation details
        """
        errors = []

        if not isinstance(indent, str):
            errors.append(ValidationError(
                type=ErrorType.PARAMETER,
                message=f"Indent must be a string, got {type(indent).__name__}",
                location="indent"
            ))
        elif not indent:
            errors.append(ValidationError(
                type=ErrorType.PARAMETER,
                message="Indent cannot be empty",
                location="indent"
            ))
        elif indent.strip(" \t"):
            errors.append(ValidationError(
                type=ErrorType.PARAMETER,
                message="Indent may contain only spaces and tabs",
                location="indent"
            ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=[])

    @staticmethod
    def validate_mode(mode: Any) -> ValidationResult:
        """Validate a format mode given as a FormatMode or its name."""
        errors = []

        if not isinstance(mode, FormatMode):
            valid_names = [m.value for m in FormatMode]
            if not isinstance(mode, str) or mode.lower() not in valid_names:
                errors.append(ValidationError(
                    type=ErrorType.PARAMETER,
                    message=f"Format mode must be one of {valid_names}, got {mode!r}",
                    location="mode"
                ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=[])
