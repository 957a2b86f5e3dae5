"""Utility functions for the JSON round-tripper."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
