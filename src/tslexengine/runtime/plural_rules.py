"""Numerus form layout and selection.

A TS numerus translation stores one form per entry of Qt's numerus table
for the target language; lupdate and Qt Linguist create exactly that many
``<numerusform>`` elements. For most languages Qt's table agrees with CLDR
restricted to the categories integer counts reach, so the layout comes from
Babel: a Russian catalog has three forms (one, few, many).

Qt departs from CLDR in two ways, handled by the tables below:
    - single-form languages (Persian, Turkish, Hungarian, ...) where CLDR
      distinguishes "one" but Qt writes a single form
    - languages whose Qt forms have their own order and boundaries
      (Latvian, Welsh, Irish)

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from collections.abc import Callable, Sequence
from decimal import Decimal
from functools import lru_cache

from babel.core import UnknownLocaleError

from tslexengine.constants import CANONICAL_PLURAL_ORDER, PLURAL_SAMPLE_RANGE
from tslexengine.locale_utils import get_babel_locale, normalize_locale

__all__ = [
    "numerus_form_index",
    "plural_categories",
    "select_numerus_form",
    "select_plural_category",
]

_FALLBACK_CATEGORIES: tuple[str, ...] = ("one", "other")

# Languages Qt translates with a single numerus form
_SINGLE_FORM_LANGUAGES: frozenset[str] = frozenset({
    "bi", "bo", "dz", "fa", "fj", "gn", "hu", "id", "ja", "jv", "ko", "ms",
    "my", "na", "su", "th", "tr", "tt", "vi", "yo", "za", "zh",
})


def _latvian_form(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    return 1 if n != 0 else 2


def _welsh_form(n: int) -> int:
    match n:
        case 0 | 1:
            return n
        case 2 | 3 | 4 | 5:
            return 2
        case 6:
            return 3
        case _:
            return 4


def _irish_form(n: int) -> int:
    return {1: 0, 2: 1}.get(n, 2)


# Qt form labels (in file order) and form index for a non-negative count
_QT_FORM_RULES: dict[str, tuple[tuple[str, ...], Callable[[int], int]]] = {
    "lv": (("one", "other", "zero"), _latvian_form),
    "cy": (("zero", "one", "two", "many", "other"), _welsh_form),
    "ga": (("one", "two", "other"), _irish_form),
}


def _language(locale: str) -> str:
    """Language subtag of a locale code ("zh_CN" -> "zh", "sr@latin" -> "sr")."""
    return normalize_locale(locale).partition("@")[0].partition("_")[0].lower()


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "fa", "zh_CN", "ru-RU")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(42, "zh_CN")
        'other'

    If locale parsing fails, falls back to simple one/other rule.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else "other"

    return locale_obj.plural_form(n)


@lru_cache(maxsize=128)
def plural_categories(locale: str) -> tuple[str, ...]:
    """Numerus form labels for a locale, in the order TS files store the forms.

    Args:
        locale: Locale code

    Returns:
        Qt's layout where it differs from CLDR, otherwise the categories
        integer counts reach in CLDR canonical order; ("one", "other") for
        unknown locales

    Examples:
        >>> plural_categories("zh_CN")
        ('other',)
        >>> plural_categories("fa")
        ('other',)
        >>> plural_categories("ru")
        ('one', 'few', 'many')
        >>> plural_categories("ar")
        ('zero', 'one', 'two', 'few', 'many', 'other')
    """
    language = _language(locale)
    if language in _SINGLE_FORM_LANGUAGES:
        return ("other",)
    if language in _QT_FORM_RULES:
        return _QT_FORM_RULES[language][0]

    try:
        rule = get_babel_locale(locale).plural_form
    except (UnknownLocaleError, ValueError):
        return _FALLBACK_CATEGORIES

    reached = {rule(n) for n in PLURAL_SAMPLE_RANGE}
    return tuple(category for category in CANONICAL_PLURAL_ORDER if category in reached)


def numerus_form_index(n: int, locale: str, form_count: int) -> int:
    """Index of the numerus form to use for count n.

    Categories outside plural_categories(locale) (reachable only by very
    large counts, e.g. French "many" for millions) use the "other" form.
    Indexes past the available forms clamp to the last form.

    Args:
        n: Plural count
        locale: Locale code of the translation
        form_count: Number of forms the translation provides (>= 1)

    Returns:
        Index in range(form_count)
    """
    qt_rule = _QT_FORM_RULES.get(_language(locale))
    if qt_rule is not None:
        return min(qt_rule[1](abs(n)), form_count - 1)

    categories = plural_categories(locale)
    category = select_plural_category(n, locale)
    if category not in categories:
        category = "other" if "other" in categories else categories[-1]
    return min(categories.index(category), form_count - 1)


def select_numerus_form(forms: Sequence[str], n: int | None, locale: str) -> str:
    """Pick the numerus form for count n.

    Args:
        forms: Numerus forms in plural_categories order
        n: Plural count; None selects the first form
        locale: Locale code of the translation

    Returns:
        The selected form ("" when forms is empty)

    Examples:
        >>> select_numerus_form(["%n coin", "%n coins"], 3, "en")
        '%n coins'
        >>> select_numerus_form(["%n 个硬币"], 3, "zh_CN")
        '%n 个硬币'
    """
    if not forms:
        return ""
    if n is None:
        return forms[0]
    return forms[numerus_form_index(n, locale, len(forms))]
