"""TSLexEngine - Qt Linguist (.ts) catalog engine.

Reads Qt Linguist translation catalogs and answers key-to-string lookups
with numerus (plural form) selection by CLDR rules and positional %N
placeholder substitution, the way QTranslator does inside a Qt application.

Public API:
    Translator - Single-locale message lookup
    TSLocalization - Multi-locale orchestration with fallback chains
    parse_ts - Parse TS XML to a Catalog
    serialize_ts - Serialize a Catalog to TS XML
    ArgValue - Type alias for values accepted by placeholders

Exceptions:
    TSError - Base exception class
    TSSyntaxError - Document-level read errors
    TSReferenceError - Missing or unusable translations
    TSFormatError - Placeholder and numerus formatting errors

Submodules:
    tslexengine.syntax.ast - Catalog node types (Catalog, Context, Message, Translation)
    tslexengine.introspection - Placeholder extraction per message
    tslexengine.validation - Catalog quality checks
    tslexengine.analysis - Completion statistics
    tslexengine.diagnostics - Error types and validation results
    tslexengine.localization - Catalog loaders and type aliases
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    TSError,
    TSFormatError,
    TSReferenceError,
    TSSyntaxError,
)
from .localization import TSLocalization
from .runtime import ArgValue, Translator
from .syntax import parse as parse_ts
from .syntax import serialize as serialize_ts

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("tslexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Highest TS format version read and written
__ts_format_version__ = "2.1"

__all__ = [
    "ArgValue",
    "TSError",
    "TSFormatError",
    "TSLocalization",
    "TSReferenceError",
    "TSSyntaxError",
    "Translator",
    "__ts_format_version__",
    "__version__",
    "parse_ts",
    "serialize_ts",
]
