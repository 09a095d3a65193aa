import re

from .errors import UnsupportedFormatError

MONTH_ABBREVIATIONS: dict[str, str] = {
    "Jan": "01",
    "Feb": "02",
    "Mar": "03",
    "Apr": "04",
    "May": "05",
    "Jun": "06",
    "Jul": "07",
    "Aug": "08",
    "Sep": "09",
    "Oct": "10",
    "Nov": "11",
    "Dec": "12",
}

_DAY_RE = re.compile(r"\d{1,2}", re.ASCII)
_YEAR_RE = re.compile(r"\d{4}", re.ASCII)


def parse_month_name_date(text: str) -> tuple[str, str, str]:
    """Split a ``Jul 1867`` / ``30 Jul. 1957`` style date into components.

    Returns ``(year, month, day)``; ``day`` is empty for the two-word form.
    Word order is always ``[day] month year``.
    """
    words = text.replace(".", "").split()
    if len(words) == 2:
        month_token, year_token = words
        day_token = ""
    elif len(words) == 3:
        day_token, month_token, year_token = words
        if not _DAY_RE.fullmatch(day_token):
            raise UnsupportedFormatError(text)
    else:
        raise UnsupportedFormatError(text)

    month = MONTH_ABBREVIATIONS.get(month_token)
    if month is None or not _YEAR_RE.fullmatch(year_token):
        raise UnsupportedFormatError(text)
    return year_token, month, day_token
