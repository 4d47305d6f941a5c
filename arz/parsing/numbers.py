# arz/parsing/numbers.py

"""Locale-aware price text normalization.

Source pages render prices with Persian digits and Arabic separators
(``۱٬۲۳۴٫۵``) or with Western digits and a dollar sign (``$12,000``).
Both collapse to a plain ``float`` here.
"""

import re

_DIGITS = str.maketrans(
    "۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩",
    "01234567890123456789",
)

# Characters that carry no numeric value: currency sign and the
# Western and Arabic thousands separators.
_STRIP = str.maketrans("", "", "$,٬")

_ARABIC_DECIMAL = "٫"

_PLAIN_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def to_ascii_digits(text: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""
    return text.translate(_DIGITS)


def try_parse_number(text: str | None) -> float | None:
    """Parse price text, returning ``None`` when it is not a number."""
    if text is None:
        return None
    cleaned = (
        to_ascii_digits(text)
        .translate(_STRIP)
        .replace(_ARABIC_DECIMAL, ".")
        .strip()
    )
    if not _PLAIN_DECIMAL.fullmatch(cleaned):
        return None
    return float(cleaned)


def parse_number(text: str | None) -> float:
    """Parse price text into a float, treating garbage as ``0.0``."""
    value = try_parse_number(text)
    return value if value is not None else 0.0
