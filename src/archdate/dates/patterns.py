"""Structural date shapes and the first-match-wins classifier."""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedFormatError
from .months import MONTH_ABBREVIATIONS, parse_month_name_date

logger = logging.getLogger(__name__)

# All patterns are applied with fullmatch.
DASHED_YEAR_FIRST_RE = re.compile(r"\d{4}(-\d{1,2}){0,2}", re.ASCII)
DASHED_YEAR_LAST_RE = re.compile(r"(\d{1,2}-){0,2}\d{4}", re.ASCII)
DOTTED_RE = re.compile(r"(\d{1,2}\.){0,2}(\d{2}|\d{4})", re.ASCII)
SLASHED_YEAR_LAST_RE = re.compile(r"(\d{1,2}/){0,2}\d{4}", re.ASCII)
SLASHED_YEAR_FIRST_RE = re.compile(r"\d{4}(/\d{1,2}){0,2}", re.ASCII)
# Searched, not fullmatched: the abbreviation may sit anywhere in the text.
SHORT_MONTH_RE = re.compile(r"\b(" + "|".join(MONTH_ABBREVIATIONS) + r")\b", re.ASCII)


class DateShape(Enum):
    DASHED_YEAR_FIRST = "dashed-year-first"
    DASHED_YEAR_LAST = "dashed-year-last"
    MONTH_NAME = "month-name"
    DOTTED = "dotted"
    SLASHED_YEAR_LAST = "slashed-year-last"
    SLASHED_YEAR_FIRST = "slashed-year-first"


@dataclass(frozen=True)
class MatchedDate:
    """A classified date with its components in year, month, day order.

    ``month`` and ``day`` are empty when the input did not supply them.
    Components keep their original digit width.
    """

    shape: DateShape
    year: str
    month: str = ""
    day: str = ""


def _ordered(shape: DateShape, parts: list[str], year_first: bool) -> MatchedDate:
    if not year_first:
        parts = parts[::-1]
    return MatchedDate(shape, *parts)


def classify(text: str) -> MatchedDate:
    """Return the first shape *text* matches, in fixed priority order.

    Raises UnsupportedFormatError when nothing matches.
    """
    if DASHED_YEAR_FIRST_RE.fullmatch(text):
        matched = _ordered(DateShape.DASHED_YEAR_FIRST, text.split("-"), True)
    elif DASHED_YEAR_LAST_RE.fullmatch(text):
        matched = _ordered(DateShape.DASHED_YEAR_LAST, text.split("-"), False)
    elif SHORT_MONTH_RE.search(text):
        year, month, day = parse_month_name_date(text)
        matched = MatchedDate(DateShape.MONTH_NAME, year, month, day)
    elif DOTTED_RE.fullmatch(text):
        matched = _ordered(DateShape.DOTTED, text.split("."), False)
    elif SLASHED_YEAR_LAST_RE.fullmatch(text):
        matched = _ordered(DateShape.SLASHED_YEAR_LAST, text.split("/"), False)
    elif SLASHED_YEAR_FIRST_RE.fullmatch(text):
        matched = _ordered(DateShape.SLASHED_YEAR_FIRST, text.split("/"), True)
    else:
        logger.debug("no date shape matches %r", text)
        raise UnsupportedFormatError(text)

    logger.debug("classified %r as %s", text, matched.shape.value)
    return matched
