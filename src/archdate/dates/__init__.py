"""Normalization of free-form archival date strings.

Every function here is pure: no I/O and no shared mutable state. The
compiled patterns are module-level constants and safe to share.
"""

from archdate.dates.errors import UnsupportedFormatError
from archdate.dates.formats import determine_format
from archdate.dates.months import MONTH_ABBREVIATIONS, parse_month_name_date
from archdate.dates.normalize import (
    CENTURY_PIVOT,
    build_dashed,
    expand_two_digit_year,
    normalize_to_dashed,
    strip_noise,
)
from archdate.dates.patterns import DateShape, MatchedDate, classify

__all__ = [
    "CENTURY_PIVOT",
    "MONTH_ABBREVIATIONS",
    "DateShape",
    "MatchedDate",
    "UnsupportedFormatError",
    "build_dashed",
    "classify",
    "determine_format",
    "expand_two_digit_year",
    "normalize_to_dashed",
    "parse_month_name_date",
    "strip_noise",
]
