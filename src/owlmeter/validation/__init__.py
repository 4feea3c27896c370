"""
Validation and error handling for the owlmeter package.

This module provides input validation and error handling with consistent
error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_cli_error,
)

from .validators import (
    validate_command,
    validate_enum_choice,
    validate_positive_float,
)

__all__ = [
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    "validate_command",
    "validate_enum_choice",
    "validate_positive_float",
]
