from .errors import UnsupportedFormatError
from .patterns import DASHED_YEAR_FIRST_RE


def determine_format(value: str, *, preserve_width: bool = False) -> str:
    """Describe the layout of a dashed, year-first date string.

    Examples:
        determine_format("1983-07-20") -> "YYYY-MM-DD"
        determine_format("2006") -> "YYYY"
        determine_format("1983-7-20", preserve_width=True) -> "YYYY-M-DD"

    With ``preserve_width`` the month and day letters are repeated once per
    digit of the original field; otherwise they are always doubled.

    Returns ``""`` for ``""``. Raises UnsupportedFormatError if the year is
    not four digits, month or day have more than two digits, there are more
    than three parts, or the separator is not a hyphen.
    """
    if value == "":
        return ""
    text = value.strip()
    if not DASHED_YEAR_FIRST_RE.fullmatch(text):
        raise UnsupportedFormatError(value)

    tokens = ["YYYY"]
    for letter, part in zip("MD", text.split("-")[1:]):
        tokens.append(letter * (len(part) if preserve_width else 2))
    return "-".join(tokens)
