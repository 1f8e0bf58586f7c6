"""TS Linter Example - Catalog validation and progress report.

Checks Qt Linguist .ts files for problems that lrelease does not report:

- Messages without <source>
- Unfinished or empty translations
- Placeholders dropped or invented by the translation
- Numerus translations with the wrong number of forms, or without %n
- Duplicate (context, source, comment) keys

Usage:
    python examples/ts_linter.py l10n/*.ts
    python examples/ts_linter.py --strict --format simple l10n/taot_fa.ts

Exit status is 1 when any file has errors (or warnings with --strict).

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from tslexengine.analysis import catalog_statistics
from tslexengine.diagnostics import TSSyntaxError, ValidationResult
from tslexengine.syntax import parse
from tslexengine.validation import validate_catalog


@dataclass(frozen=True, slots=True)
class LintIssue:
    """Immutable lint issue result."""

    severity: str  # "error", "warning"
    rule: str  # Rule ID
    message: str  # Human-readable message
    location: str  # "context" or "line N"


def issues_from_result(result: ValidationResult) -> list[LintIssue]:
    """Flatten a ValidationResult into lint issues."""
    issues = [
        LintIssue(
            severity="error",
            rule=error.code,
            message=error.message,
            location=f"line {error.line}" if error.line is not None else "",
        )
        for error in result.errors
    ]
    issues.extend(
        LintIssue(
            severity="warning",
            rule=warning.code,
            message=warning.message,
            location=warning.context or "",
        )
        for warning in result.warnings
    )
    return issues


def lint_ts_file(path: Path) -> tuple[list[LintIssue], str | None]:
    """Lint one TS file.

    Returns:
        Lint issues and a one-line progress summary (None if unreadable)
    """
    data = path.read_bytes()
    issues = issues_from_result(validate_catalog(data))
    try:
        summary = str(catalog_statistics(parse(data)))
    except TSSyntaxError:
        summary = None
    return issues, summary


def print_lint_results(path: Path, lint_issues: list[LintIssue], *, output_format: str) -> None:
    """Print lint results in a readable format."""
    if output_format == "simple":
        for issue in lint_issues:
            print(f"{path}: {issue.severity}: [{issue.rule}] {issue.message}")
        return

    if not lint_issues:
        print("[OK] No issues found")
        return

    errors = [issue for issue in lint_issues if issue.severity == "error"]
    warnings = [issue for issue in lint_issues if issue.severity == "warning"]

    if errors:
        print(f"\n[ERROR] {len(errors)} error(s):")
        for issue in errors:
            print(f"  [{issue.rule}] {issue.message} ({issue.location})")

    if warnings:
        print(f"\n[WARN] {len(warnings)} warning(s):")
        for issue in warnings:
            print(f"  [{issue.rule}] {issue.message} ({issue.location})")


def main(argv: list[str] | None = None) -> int:
    """Run the linter over the given files."""
    parser = argparse.ArgumentParser(description="Lint Qt Linguist .ts catalogs")
    parser.add_argument("files", nargs="+", type=Path, help="TS files to check")
    parser.add_argument(
        "--strict", action="store_true", help="Treat warnings as failures"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("report", "simple"),
        default="report",
        help="Output format (default: report)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show library log output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    failed = False
    for path in args.files:
        try:
            issues, summary = lint_ts_file(path)
        except OSError as e:
            print(f"{path}: cannot read: {e}", file=sys.stderr)
            failed = True
            continue

        if args.output_format == "report":
            print("=" * 60)
            print(f"{path}" + (f" ({summary})" if summary else ""))
            print("=" * 60)
        print_lint_results(path, issues, output_format=args.output_format)

        if any(issue.severity == "error" for issue in issues):
            failed = True
        elif args.strict and issues:
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
