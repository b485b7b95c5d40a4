"""Tests for individual field normalizers."""

import pytest

from bibfront.models import Conference, Journal, PageRange
from bibfront.normalize import InvalidFieldError, MissingFieldError
from bibfront.normalize._fields import (
    extract_abstract,
    extract_doi,
    extract_publisher,
    extract_title,
    extract_url,
    extract_year,
    normalize_authors,
    normalize_pages,
    normalize_series,
    normalize_volume,
    resolve_venue,
)
from bibfront.normalize._helpers import parse_int

# ---------------------------------------------------------------------------
# Authors
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_authors_reordered_and_order_preserved() -> None:
    """'Last, First' names are flipped and keep citation order."""
    authors = normalize_authors({"author": "Doe, John and Smith, Jane"})

    assert authors == ("John Doe", "Jane Smith")


@pytest.mark.unit
def test_author_without_comma_passes_through() -> None:
    assert normalize_authors({"author": "John Doe"}) == ("John Doe",)


@pytest.mark.unit
def test_authors_middle_names_and_mixed_forms() -> None:
    authors = normalize_authors({"author": "Knuth, Donald Ervin and Alan Turing"})

    assert authors == ("Donald Ervin Knuth", "Alan Turing")


@pytest.mark.unit
def test_authors_wrapped_across_lines() -> None:
    """Newlines count as spaces, so a wrapped ' and ' still splits."""
    authors = normalize_authors({"author": "Doe, John and\nSmith, Jane"})

    assert authors == ("John Doe", "Jane Smith")


@pytest.mark.unit
def test_authors_multiple_commas_reversed() -> None:
    """All comma fragments are reversed, not only the first pair."""
    authors = normalize_authors({"author": "Doe,Jr.,John"})

    assert authors == ("John Jr. Doe",)


@pytest.mark.unit
def test_authors_split_on_literal_and_only() -> None:
    """Only ' and ' with surrounding spaces separates authors."""
    authors = normalize_authors({"author": "Anderson, Sandra and Band, Andy"})

    assert authors == ("Sandra Anderson", "Andy Band")


@pytest.mark.unit
def test_authors_missing_is_fatal() -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        normalize_authors({"title": "x"})

    assert exc_info.value.field == "author"


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("123-145", PageRange(123, 145)),
        ("123--145", PageRange(123, 145)),
        ("123–145", PageRange(123, 145)),
        ("p. 12, 34", PageRange(12, 34)),
        ("1-2-3", PageRange(1, 2)),
        ("42", PageRange(42, None)),
        ("e1234", PageRange(1234, None)),
        ("", PageRange(None, None)),
        ("passim", PageRange(None, None)),
    ],
)
def test_pages_first_two_numeric_runs(raw: str, expected: PageRange) -> None:
    assert normalize_pages({"pages": raw}) == expected


@pytest.mark.unit
def test_pages_absent_tag_gives_empty_range() -> None:
    assert normalize_pages({}) == PageRange(None, None)


@pytest.mark.unit
def test_pages_skip_runs_beyond_64_bits() -> None:
    assert normalize_pages({"pages": "99999999999999999999-5"}) == PageRange(5, None)
    assert normalize_pages({"pages": "9223372036854775807-9223372036854775808"}) == PageRange(
        9223372036854775807, None
    )


# ---------------------------------------------------------------------------
# Volume / series
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_volume_parsed() -> None:
    assert normalize_volume({"volume": "12"}) == 12


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["12a", "XII", "", " 12", "1_000"])
def test_volume_unparsable_is_absent(raw: str) -> None:
    assert normalize_volume({"volume": raw}) is None


@pytest.mark.unit
def test_volume_absent() -> None:
    assert normalize_volume({}) is None


@pytest.mark.unit
def test_series_falls_back_to_number() -> None:
    assert normalize_series({"number": "7"}) == 7


@pytest.mark.unit
def test_series_takes_precedence_over_number() -> None:
    assert normalize_series({"series": "3", "number": "7"}) == 3


@pytest.mark.unit
def test_series_unparsable_does_not_fall_back() -> None:
    """Only the first tag present is read."""
    assert normalize_series({"series": "LNCS", "number": "7"}) is None


@pytest.mark.unit
@pytest.mark.parametrize(("raw", "expected"), [("5", 5), ("+5", 5), ("-5", -5), ("٣", None)])
def test_parse_int_accepts_signed_ascii_digits(raw: str, expected: int | None) -> None:
    assert parse_int(raw) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", None),
        ("-9223372036854775809", None),
    ],
)
def test_parse_int_limited_to_64_bits(raw: str, expected: int | None) -> None:
    assert parse_int(raw) == expected


@pytest.mark.unit
def test_volume_beyond_64_bits_is_absent() -> None:
    assert normalize_volume({"volume": "99999999999999999999"}) is None


# ---------------------------------------------------------------------------
# Year
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_year_date_wins_over_year() -> None:
    assert extract_year({"date": "2021-05-01", "year": "1999"}) == 2021


@pytest.mark.unit
def test_year_from_year_tag() -> None:
    assert extract_year({"year": "2020"}) == 2020


@pytest.mark.unit
def test_year_from_date_without_dash() -> None:
    assert extract_year({"date": "2018"}) == 2018


@pytest.mark.unit
def test_year_missing_is_fatal() -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        extract_year({"title": "x"})

    assert exc_info.value.field == "year"


@pytest.mark.unit
@pytest.mark.parametrize("tags", [{"year": "circa 2020"}, {"date": "May 2020"}, {"date": ""}])
def test_year_non_numeric_is_fatal(tags: dict[str, str]) -> None:
    with pytest.raises(InvalidFieldError):
        extract_year(tags)


@pytest.mark.unit
def test_year_invalid_date_does_not_fall_back_to_year() -> None:
    with pytest.raises(InvalidFieldError):
        extract_year({"date": "n.d.", "year": "2020"})


@pytest.mark.unit
def test_year_beyond_64_bits_is_fatal() -> None:
    with pytest.raises(InvalidFieldError):
        extract_year({"year": "99999999999999999999"})


# ---------------------------------------------------------------------------
# Free-text fields
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_optional_text_fields_default_to_empty() -> None:
    assert extract_doi({}) == ""
    assert extract_abstract({}) == ""
    assert extract_publisher({}) is None


@pytest.mark.unit
def test_text_fields_copied_verbatim() -> None:
    tags = {
        "title": "  On {B}ayes  ",
        "url": "https://example.org/p?id=1",
        "doi": "10.1000/xyz",
        "publisher": "ACM",
        "abstract": "We study things.",
    }

    assert extract_title(tags) == "  On {B}ayes  "
    assert extract_url(tags) == "https://example.org/p?id=1"
    assert extract_doi(tags) == "10.1000/xyz"
    assert extract_publisher(tags) == "ACM"
    assert extract_abstract(tags) == "We study things."


@pytest.mark.unit
def test_empty_publisher_is_not_absent() -> None:
    assert extract_publisher({"publisher": ""}) == ""


@pytest.mark.unit
@pytest.mark.parametrize(("extractor", "field"), [(extract_title, "title"), (extract_url, "url")])
def test_mandatory_text_fields(extractor, field: str) -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        extractor({})

    assert exc_info.value.field == field


# ---------------------------------------------------------------------------
# Venue
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_venue_journal_beats_booktitle() -> None:
    assert resolve_venue({"journal": "X", "booktitle": "Y"}) == Journal("X")


@pytest.mark.unit
def test_venue_journaltitle_is_journal() -> None:
    assert resolve_venue({"journaltitle": "Z", "booktitle": "Y"}) == Journal("Z")


@pytest.mark.unit
def test_venue_journal_beats_journaltitle() -> None:
    assert resolve_venue({"journal": "X", "journaltitle": "Z"}) == Journal("X")


@pytest.mark.unit
def test_venue_booktitle_is_conference() -> None:
    assert resolve_venue({"booktitle": "Y"}) == Conference("Y")


@pytest.mark.unit
def test_venue_empty_journal_still_wins() -> None:
    """Presence decides, not content."""
    assert resolve_venue({"journal": "", "booktitle": "Y"}) == Journal("")


@pytest.mark.unit
def test_venue_missing_is_fatal() -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        resolve_venue({"title": "x"})

    assert exc_info.value.field == "venue"


@pytest.mark.unit
def test_tag_mapping_unknown_field() -> None:
    from bibfront.normalize.tag_mappings import get_tags

    assert get_tags("series") == ["series", "number"]
    with pytest.raises(ValueError, match="Unknown record field"):
        get_tags("isbn")
