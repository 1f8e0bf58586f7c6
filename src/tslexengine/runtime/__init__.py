"""Runtime layer: translation lookup, numerus selection, placeholder substitution.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from .placeholders import ArgValue, Placeholder, extract_placeholders, substitute
from .plural_rules import plural_categories, select_numerus_form, select_plural_category
from .translator import Translator

__all__ = [
    "ArgValue",
    "Placeholder",
    "Translator",
    "extract_placeholders",
    "plural_categories",
    "select_numerus_form",
    "select_plural_category",
    "substitute",
]
