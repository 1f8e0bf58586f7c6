"""Catalog loading for TSLocalization.

Qt applications ship one TS (or compiled QM) file per language, usually
side by side in a translations directory (``l10n/taot_fa.ts``,
``l10n/taot_zh_CN.ts``). This module turns (locale, resource id) pairs
into TS documents and records what happened for every attempt.

Components:
    CatalogLoader - structural protocol for catalog sources
    PathCatalogLoader - reads ``{locale}`` templated paths below a root
    FallbackInfo - passed to on_fallback callbacks
    CatalogLoadResult - outcome of one load attempt
    LoadSummary - all outcomes collected during TSLocalization construction

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from tslexengine.enums import LoadStatus
from tslexengine.localization.types import ContextName, LocaleCode, ResourceId, TSSource

if TYPE_CHECKING:
    from tslexengine.syntax.ast import Catalog, Junk

__all__ = [
    "CatalogLoadResult",
    "CatalogLoader",
    "FallbackInfo",
    "LoadSummary",
    "PathCatalogLoader",
]

_LOCALE_PLACEHOLDER = "{locale}"
_SEPARATORS = ("/", "\\")


class CatalogLoader(Protocol):
    """Anything that can hand out TS documents per locale.

    Custom loaders (Qt resources, package data, a database) only need
    these two methods; no base class is required.

    Example:
        >>> class PackageLoader:
        ...     def load(self, locale: str, resource_id: str) -> bytes:
        ...         name = resource_id.replace("{locale}", locale)
        ...         return importlib.resources.files("myapp.l10n").joinpath(name).read_bytes()
        ...     def describe_path(self, locale: str, resource_id: str) -> str:
        ...         return "myapp.l10n:" + resource_id.replace("{locale}", locale)
        >>> l10n = TSLocalization(["fa", "zh_CN"], ["taot_{locale}.ts"], PackageLoader())
    """

    def load(self, locale: LocaleCode, resource_id: ResourceId) -> TSSource:
        """Return the TS document for locale.

        Raises:
            FileNotFoundError: The locale has no such catalog
            OSError: The catalog exists but cannot be read
        """

    def describe_path(self, locale: LocaleCode, resource_id: ResourceId) -> str:
        """Where the catalog lives, for log messages and load results."""
        return f"{locale}/{resource_id}"


def _reject_unsafe_locale(locale: LocaleCode) -> None:
    if not locale:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if ".." in locale or any(sep in locale for sep in _SEPARATORS):
        msg = f"Locale {locale!r} must not contain '..' or path separators"
        raise ValueError(msg)


def _reject_unsafe_resource_id(resource_id: ResourceId) -> None:
    if resource_id != resource_id.strip():
        msg = f"Resource ID {resource_id!r} has surrounding whitespace"
        raise ValueError(msg)
    if resource_id.startswith(_SEPARATORS) or Path(resource_id).is_absolute():
        msg = f"Resource ID {resource_id!r} must be relative"
        raise ValueError(msg)
    if ".." in resource_id:
        msg = f"Resource ID {resource_id!r} must not contain '..'"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """Loads TS files from disk.

    The catalog path is ``base_path/resource_id`` with ``{locale}``
    replaced; the placeholder may sit in either part:

        PathCatalogLoader("l10n").load("fa", "taot_{locale}.ts")
        # l10n/taot_fa.ts

        PathCatalogLoader("translations/{locale}").load("fa", "app.ts")
        # translations/fa/app.ts

    Locales and resource ids cannot climb out of the translations
    directory: '..', separators in locales, absolute resource ids and
    resolved paths outside ``root_dir`` are all rejected with ValueError.

    Attributes:
        base_path: Directory, optionally containing {locale}
        root_dir: Directory every catalog must resolve into. Defaults to
            the part of base_path before {locale} (or the working directory).
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.root_dir is not None:
            root = Path(self.root_dir)
        else:
            prefix = self.base_path.partition(_LOCALE_PLACEHOLDER)[0].rstrip("/\\")
            root = Path(prefix) if prefix else Path.cwd()
        object.__setattr__(self, "_resolved_root", root.resolve())

    def _path_template(self, resource_id: ResourceId) -> str:
        template = f"{self.base_path}/{resource_id}"
        if _LOCALE_PLACEHOLDER not in template:
            msg = (
                f"'{{locale}}' placeholder required in base_path or resource_id "
                f"(base_path={self.base_path!r}, resource_id={resource_id!r})"
            )
            raise ValueError(msg)
        return template

    def describe_path(self, locale: LocaleCode, resource_id: ResourceId) -> str:
        """The catalog path with the locale filled in."""
        return f"{self.base_path}/{resource_id}".replace(_LOCALE_PLACEHOLDER, locale)

    def load(self, locale: LocaleCode, resource_id: ResourceId) -> TSSource:
        """Read a TS file as bytes; its XML declaration names the encoding.

        Raises:
            ValueError: Unsafe locale or resource id, a path outside
                root_dir, or no {locale} placeholder anywhere
            FileNotFoundError: No catalog for this locale
            OSError: The file cannot be read
        """
        _reject_unsafe_locale(locale)
        _reject_unsafe_resource_id(resource_id)

        # str.replace leaves any other braces in the path alone
        path = Path(self._path_template(resource_id).replace(_LOCALE_PLACEHOLDER, locale))
        path = path.resolve()
        if not path.is_relative_to(self._resolved_root):
            msg = f"Catalog path {path} is outside {self._resolved_root}"
            raise ValueError(msg)

        return path.read_bytes()


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """A lookup the primary locale could not answer.

    Attributes:
        requested_locale: First locale of the chain
        resolved_locale: Locale whose catalog had the message
        context: Context name of the lookup
        source: Source text of the lookup
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    context: ContextName
    source: str


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """What happened when one catalog was loaded.

    Attributes:
        locale: Locale the catalog was requested for
        resource_id: Resource id as passed to the loader
        status: SUCCESS, NOT_FOUND or ERROR
        error: The exception behind an ERROR
        source_path: Loader's description of the catalog location
        catalog: The parsed catalog on SUCCESS
    """

    locale: LocaleCode
    resource_id: ResourceId
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    catalog: Catalog | None = None

    @property
    def is_success(self) -> bool:
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """No catalog for this locale; normal for partially translated apps."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        return self.status == LoadStatus.ERROR

    @property
    def junk_entries(self) -> tuple[Junk, ...]:
        """Messages of the catalog that could not be read."""
        if self.catalog is None:
            return ()
        return self.catalog.junk

    @property
    def has_junk(self) -> bool:
        return bool(self.junk_entries)


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Outcome of every catalog load performed by a TSLocalization.

    Example:
        >>> summary = l10n.get_load_summary()
        >>> for failed in summary.get_errors():
        ...     logger.error("%s: %s", failed.source_path, failed.error)
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, ok={self.successful}, "
            f"not_found={self.not_found}, errors={self.errors}, junk={self.junk_count})"
        )

    def _count(self, status: LoadStatus) -> int:
        return Counter(r.status for r in self.results)[status]

    def _with_status(self, status: LoadStatus) -> tuple[CatalogLoadResult, ...]:
        return tuple(r for r in self.results if r.status == status)

    @property
    def total_attempted(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return self._count(LoadStatus.SUCCESS)

    @property
    def not_found(self) -> int:
        return self._count(LoadStatus.NOT_FOUND)

    @property
    def errors(self) -> int:
        return self._count(LoadStatus.ERROR)

    @property
    def junk_count(self) -> int:
        """Unreadable messages summed over all loaded catalogs."""
        return sum(len(r.junk_entries) for r in self.results)

    def get_errors(self) -> tuple[CatalogLoadResult, ...]:
        return self._with_status(LoadStatus.ERROR)

    def get_not_found(self) -> tuple[CatalogLoadResult, ...]:
        return self._with_status(LoadStatus.NOT_FOUND)

    def get_successful(self) -> tuple[CatalogLoadResult, ...]:
        return self._with_status(LoadStatus.SUCCESS)

    def get_by_locale(self, locale: LocaleCode) -> tuple[CatalogLoadResult, ...]:
        """Results for one locale, in load order."""
        return tuple(r for r in self.results if r.locale == locale)

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Every catalog was found and parsed. Junk is allowed."""
        return self.successful == self.total_attempted

    @property
    def all_clean(self) -> bool:
        """Every catalog was found and parsed without junk."""
        return self.all_successful and self.junk_count == 0
