"""Unified validation result for TS catalog validation.

Consolidates validation feedback from different stages:
- Parser-level: Junk entries (messages that could not be read)
- Semantic-level: Structured warnings about translation quality

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured syntax error from TS validation.

    Attributes:
        code: Error code (e.g., "parse-error")
        message: Human-readable error message
        content: The unreadable TS fragment
        line: Line number where error occurred (1-indexed, optional)

    Security Note:
        The `content` field may contain catalog text that should not be
        exposed to end users. Use format(sanitize=True) to truncate or
        redact content before logging or displaying errors.
    """

    code: str
    message: str
    content: str
    line: int | None = None

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
    ) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate content to prevent information leakage.
            redact_content: If True (and sanitize=True), completely redact
                           content instead of truncating.

        Returns:
            Formatted error string with optional content sanitization.
        """
        content = self.content
        if sanitize and redact_content:
            content = "[content redacted]"
        elif sanitize and len(content) > _SANITIZE_MAX_CONTENT_LENGTH:
            content = content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."

        location = f" at line {self.line}" if self.line is not None else ""
        return f"[{self.code}]{location}: {self.message} (content: {content!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured semantic warning from TS validation.

    Attributes:
        code: Warning code (e.g., "placeholder-mismatch", "unfinished-translation")
        message: Human-readable warning message
        context: TS context name of the offending message
        source: Source text of the offending message
    """

    code: str
    message: str
    context: str | None = None
    source: str | None = None

    def format(self) -> str:
        """Format warning as a single line."""
        where = f" ({self.context})" if self.context is not None else ""
        return f"[{self.code}]{where}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Everything validate_catalog() found in one catalog.

    Attributes:
        errors: Parse validation errors
        warnings: Semantic validation warnings

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """No errors. Warnings (unfinished work, placeholder drift) are allowed."""
        return not self.errors

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of semantic warnings."""
        return len(self.warnings)

    def warnings_by_code(self, code: str) -> tuple[ValidationWarning, ...]:
        """Get all warnings with the given code."""
        return tuple(w for w in self.warnings if w.code == code)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        """Create a result with errors and/or warnings.

        Args:
            errors: Tuple of validation errors (default: empty)
            warnings: Tuple of validation warnings (default: empty)
        """
        return ValidationResult(errors=errors, warnings=warnings)

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate error content.
            redact_content: If True (and sanitize=True), completely redact
                           error content instead of truncating.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize, redact_content=redact_content)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
