"""TS catalog validation.

Provides standalone validation for TS catalogs without requiring a
Translator instance. Useful for CI pipelines, linters, and tooling that
checks translation quality before lrelease runs.

Architecture:
    - validate_catalog(): Main entry point, orchestrates validation passes
    - _extract_syntax_errors(): Pass 1 - Convert Junk entries to ValidationError
    - _check_header(): Pass 2 - Catalog-level attributes
    - _check_duplicates(): Pass 3 - Repeated (context, source, comment) keys
    - _check_translations(): Pass 4 - Per-message translation checks

Python 3.13+. Depends on Babel (via plural_rules) for numerus form counts.
"""

import logging

from tslexengine.diagnostics import (
    TSSyntaxError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from tslexengine.enums import PlaceholderKind, TranslationType
from tslexengine.runtime.placeholders import extract_placeholders, positional_numbers
from tslexengine.runtime.plural_rules import plural_categories
from tslexengine.syntax import Catalog, Message, TSParser

__all__ = ["validate_catalog"]

logger = logging.getLogger(__name__)


def _extract_syntax_errors(catalog: Catalog) -> list[ValidationError]:
    """Convert Junk entries to ValidationError objects."""
    errors: list[ValidationError] = []
    for entry in catalog.junk:
        message = entry.annotations[0].message if entry.annotations else "Unreadable message"
        line = entry.annotations[0].line if entry.annotations else None
        errors.append(
            ValidationError(
                code="parse-error",
                message=message,
                content=entry.content,
                line=line,
            )
        )
    return errors


def _check_header(catalog: Catalog) -> list[ValidationWarning]:
    if catalog.language:
        return []
    return [
        ValidationWarning(
            code="missing-language",
            message="Catalog has no language attribute; numerus forms cannot be checked",
        )
    ]


def _check_duplicates(catalog: Catalog) -> list[ValidationWarning]:
    """Report active messages sharing a lookup key.

    The runtime keeps the last one, so earlier duplicates never show.
    """
    warnings: list[ValidationWarning] = []
    seen: set[tuple[str, str, str]] = set()
    for context_name, message in catalog.iter_messages():
        if not message.translation.is_active:
            continue
        key = (context_name, message.source, message.comment)
        if key in seen:
            disambiguation = f" ({message.comment})" if message.comment else ""
            warnings.append(
                ValidationWarning(
                    code="duplicate-message",
                    message=f"Duplicate message {message.source!r}{disambiguation}; "
                    f"later definition overrides earlier",
                    context=context_name,
                    source=message.source,
                )
            )
        seen.add(key)
    return warnings


def _uses_count(text: str) -> bool:
    return any(p.kind == PlaceholderKind.COUNT for p in extract_placeholders(text))


def _check_message(
    context_name: str, message: Message, expected_forms: int | None
) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    translation = message.translation

    def warn(code: str, text: str) -> None:
        warnings.append(
            ValidationWarning(code=code, message=text, context=context_name, source=message.source)
        )

    if translation.type == TranslationType.UNFINISHED:
        warn("unfinished-translation", f"Translation of {message.source!r} is unfinished")
    elif translation.is_empty:
        warn("empty-translation", f"Translation of {message.source!r} is empty")

    source_numbers = positional_numbers(message.source)
    source_uses_count = message.numerus and _uses_count(message.source)

    for index, text in enumerate(translation.texts):
        if not text:
            continue
        label = f"form {index}" if message.numerus else "translation"
        text_numbers = positional_numbers(text)
        if text_numbers != source_numbers:
            missing = sorted(source_numbers - text_numbers)
            extra = sorted(text_numbers - source_numbers)
            details = []
            if missing:
                details.append("missing " + ", ".join(f"%{n}" for n in missing))
            if extra:
                details.append("unexpected " + ", ".join(f"%{n}" for n in extra))
            warn(
                "placeholder-mismatch",
                f"Placeholders of {label} differ from source: {'; '.join(details)}",
            )
        if source_uses_count and not _uses_count(text):
            warn("numerus-placeholder-missing", f"Numerus {label} does not use %n")

    if (
        message.numerus
        and expected_forms is not None
        and translation.forms
        and len(translation.forms) != expected_forms
    ):
        warn(
            "numerus-form-count",
            f"Numerus translation has {len(translation.forms)} forms, "
            f"language expects {expected_forms}",
        )

    return warnings


def _check_translations(catalog: Catalog) -> list[ValidationWarning]:
    expected_forms = len(plural_categories(catalog.language)) if catalog.language else None
    warnings: list[ValidationWarning] = []
    for context_name, message in catalog.iter_messages():
        if not message.translation.is_active:
            continue
        warnings.extend(_check_message(context_name, message, expected_forms))
    return warnings


def validate_catalog(
    source: Catalog | str | bytes, parser: TSParser | None = None
) -> ValidationResult:
    """Validate a TS catalog and return structured errors and warnings.

    Vanished and obsolete messages are not checked: the application no
    longer uses them.

    Args:
        source: Parsed Catalog or TS document text/bytes
        parser: Optional parser instance (creates default if not provided)

    Returns:
        ValidationResult with parse errors and quality warnings

    Example:
        >>> from tslexengine.validation import validate_catalog
        >>> result = validate_catalog(ts_source)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(f"Error [{error.code}]: {error.message}")
        >>> for warning in result.warnings:
        ...     print(f"Warning [{warning.code}]: {warning.message}")
    """
    if isinstance(source, Catalog):
        catalog = source
    else:
        if parser is None:
            parser = TSParser()
        try:
            catalog = parser.parse(source)
        except TSSyntaxError as e:
            logger.error("Critical validation error: %s", e)
            error = ValidationError(
                code="critical-parse-error",
                message=str(e),
                content=str(e),
                line=e.diagnostic.line if e.diagnostic is not None else None,
            )
            return ValidationResult(errors=(error,), warnings=())

    # Pass 1: Extract syntax errors from Junk entries
    errors = _extract_syntax_errors(catalog)

    # Passes 2-4: quality warnings
    warnings = _check_header(catalog) + _check_duplicates(catalog) + _check_translations(catalog)

    logger.debug("Validated catalog: %d errors, %d warnings", len(errors), len(warnings))

    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
