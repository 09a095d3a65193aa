from .patterns import classify

CENTURY_PIVOT = 69
CIRCA_MARKER = "ca."


def strip_noise(value: str) -> str:
    """Reduce a raw date string to the part worth matching.

    Trims surrounding whitespace, drops everything from the first ``;`` on
    (alternate dates such as ``30.07.1957; 1958``) and keeps only the text
    after a ``ca. `` marker.
    """
    text = value.strip()
    if ";" in text:
        text = text.split(";", 1)[0]
    if CIRCA_MARKER in text:
        # A marker without its trailing space leaves nothing to parse.
        _, _, text = text.partition(CIRCA_MARKER + " ")
    return text


def expand_two_digit_year(year: str) -> str:
    """Expand a two-digit year: 69-99 -> 19xx, 00-68 -> 20xx."""
    value = int(year)
    value += 1900 if value >= CENTURY_PIVOT else 2000
    return str(value)


def _pad(component: str) -> str:
    return component.zfill(2) if len(component) == 1 else component


def build_dashed(year: str, month: str = "", day: str = "") -> str:
    """Join components into ``YYYY[-MM[-DD]]``, zero-padding month and day."""
    if len(year) == 2:
        year = expand_two_digit_year(year)
    parts = [year]
    if month:
        parts.append(_pad(month))
        if day:
            parts.append(_pad(day))
    return "-".join(parts)


def normalize_to_dashed(value: str) -> str:
    """Rewrite a date in any supported convention as ``YYYY[-MM[-DD]]``.

    Examples:
        normalize_to_dashed("22.04.1712") -> "1712-04-22"
        normalize_to_dashed("ca. 7/1983") -> "1983-07"
        normalize_to_dashed("30 Jul 1957") -> "1957-07-30"

    Returns ``""`` for ``""``. Raises UnsupportedFormatError for anything
    that is not a recognised date, including whitespace-only input.
    """
    if value == "":
        return ""
    matched = classify(strip_noise(value))
    return build_dashed(matched.year, matched.month, matched.day)
