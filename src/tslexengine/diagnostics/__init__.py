"""Diagnostic system for TS catalog errors.

Provides structured error diagnostics with codes, hints and locations.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    TSError,
    TSFormatError,
    TSReferenceError,
    TSSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "TSError",
    "TSFormatError",
    "TSReferenceError",
    "TSSyntaxError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
