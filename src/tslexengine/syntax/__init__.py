"""TS syntax layer: catalog nodes, reader and writer.

Python 3.13+. Zero external dependencies.
"""

from .ast import (
    Annotation,
    Catalog,
    Context,
    Junk,
    Location,
    Message,
    MessageKey,
    Translation,
)
from .parser import TSParser, parse
from .serializer import TSSerializer, serialize

__all__ = [
    "Annotation",
    "Catalog",
    "Context",
    "Junk",
    "Location",
    "Message",
    "MessageKey",
    "TSParser",
    "TSSerializer",
    "Translation",
    "parse",
    "serialize",
]
