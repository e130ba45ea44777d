"""Component name normalization: relative file paths to PascalCase names."""

from __future__ import annotations

import re

from autocomponents.errors import NormalizationError

__all__ = ["normalize", "camel_case", "upper_first"]

_LEADING_DOT_SLASH = re.compile(r"^\./")
_EXTENSION = re.compile(r"\.\w+$")

# Acronym before a capitalized word, capitalized/lower word, upper run,
# lower- and upper-case ordinals (1st, 2ND, 4th), digits.
_WORD = re.compile(
    r"[A-Z]+(?=[A-Z][a-z])"
    r"|[A-Z]?[a-z]+"
    r"|[A-Z]+"
    r"|\d*(?:1st|2nd|3rd|(?![123])\dth)(?=\b|[A-Z_])"
    r"|\d*(?:1ST|2ND|3RD|(?![123])\dTH)(?=\b|[a-z_])"
    r"|\d+"
)


def upper_first(text: str) -> str:
    """Upper-case the first character of text, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def camel_case(text: str) -> str:
    """Convert text to lowerCamelCase.

    Words are split on any non-alphanumeric delimiter, on case boundaries and
    between letters and digits. Each word is lower-cased; every word after the
    first is capitalized.

    Example:
        >>> camel_case("vue-date_picker")
        'vueDatePicker'
        >>> camel_case("XMLHttpRequest")
        'xmlHttpRequest'
    """
    words = _WORD.findall(text)
    return "".join(word.lower() if i == 0 else upper_first(word.lower()) for i, word in enumerate(words))


def normalize(relative_path: str) -> str:
    """Derive the canonical PascalCase component name for a relative path.

    Strips a single leading ``./`` and the final extension, then camel-cases
    the stem and upper-cases its first letter.

    Args:
        relative_path: File path relative to the component root, e.g.
            ``./vue-date-picker.py``.

    Returns:
        The canonical name, e.g. ``VueDatePicker``.

    Raises:
        NormalizationError: If the stem contains no letters or digits.
    """
    stem = _EXTENSION.sub("", _LEADING_DOT_SLASH.sub("", relative_path))
    name = upper_first(camel_case(stem))
    if not name:
        raise NormalizationError(path=relative_path)
    return name
