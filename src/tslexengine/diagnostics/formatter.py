"""Diagnostic formatting service.

Renders Diagnostic records for terminals (Rust style), logs (one line)
and tooling (JSON).
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.message_not_found("AboutPage", "About")))
        MESSAGE_NOT_FOUND: Message 'About' not found in context 'AboutPage'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between them."""
        return "\n\n".join(map(self.format, diagnostics))

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Render a validate_catalog() result as a headline plus details."""
        if result.is_valid:
            lines = ["Validation passed"]
        else:
            lines = [
                f"Validation failed: {result.error_count} error(s), "
                f"{result.warning_count} warning(s)"
            ]

        if result.errors:
            lines.append("\nErrors:")
            lines.extend(f"  {error.format(sanitize=self.sanitize)}" for error in result.errors)
        if result.warnings:
            lines.append("\nWarnings:")
            lines.extend(f"  {warning.format()}" for warning in result.warnings)

        return "\n".join(lines)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Headline, then a location arrow and a help line when available.

        Example output:
            error[MESSAGE_NOT_FOUND]: Message 'About' not found in context 'AboutPage'
              --> context AboutPage
              = help: Check that the catalog for this locale contains the message
        """
        severity = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        if diagnostic.line is not None:
            lines.append(f"  --> line {diagnostic.line}")
        elif diagnostic.context is not None:
            lines.append(f"  --> context {diagnostic.context}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        return "\n".join(lines)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        optional = {
            "line": diagnostic.line,
            "context": diagnostic.context,
            "source": diagnostic.source_text and self._clip(diagnostic.source_text),
            "hint": diagnostic.hint and self._clip(diagnostic.hint),
        }
        data.update((key, value) for key, value in optional.items() if value is not None)
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return text[: self.max_content_length] + "..."
