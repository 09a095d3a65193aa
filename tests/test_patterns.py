import pytest

from archdate.dates import (
    DateShape,
    MatchedDate,
    UnsupportedFormatError,
    classify,
    parse_month_name_date,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1983", MatchedDate(DateShape.DASHED_YEAR_FIRST, "1983")),
        ("1983-7-20", MatchedDate(DateShape.DASHED_YEAR_FIRST, "1983", "7", "20")),
        ("20-7-1983", MatchedDate(DateShape.DASHED_YEAR_LAST, "1983", "7", "20")),
        ("Jul 1867", MatchedDate(DateShape.MONTH_NAME, "1867", "07")),
        ("5 Dec 1867", MatchedDate(DateShape.MONTH_NAME, "1867", "12", "5")),
        ("22.04.12", MatchedDate(DateShape.DOTTED, "12", "04", "22")),
        ("04/1712", MatchedDate(DateShape.SLASHED_YEAR_LAST, "1712", "04")),
        ("1712/04/22", MatchedDate(DateShape.SLASHED_YEAR_FIRST, "1712", "04", "22")),
    ],
)
def test_classify_shapes(text: str, expected: MatchedDate) -> None:
    assert classify(text) == expected


def test_year_only_always_matches_dashed_year_first() -> None:
    # also a valid dotted and slashed shape, but dashed wins
    assert classify("1712").shape is DateShape.DASHED_YEAR_FIRST


def test_two_digit_year_alone_is_dotted() -> None:
    assert classify("57") == MatchedDate(DateShape.DOTTED, "57")


def test_classify_only_accepts_ascii_digits() -> None:
    with pytest.raises(UnsupportedFormatError):
        classify("١٩٨٣")


def test_parse_month_name_date() -> None:
    assert parse_month_name_date("Jul 1867") == ("1867", "07", "")
    assert parse_month_name_date("30 Jul. 1957") == ("1957", "07", "30")
    assert parse_month_name_date("1 Jan 1900") == ("1900", "01", "1")


@pytest.mark.parametrize(
    "text",
    ["Jul", "Jul 1867 1868", "1867 Jul", "Jul 18x7", "xx Jul 1867", "30 jul 1957", "123 Jul 1957"],
)
def test_parse_month_name_date_rejects(text: str) -> None:
    with pytest.raises(UnsupportedFormatError):
        parse_month_name_date(text)


def test_classify_rejects_trailing_newline() -> None:
    with pytest.raises(UnsupportedFormatError):
        classify("1984\n")
