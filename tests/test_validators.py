from __future__ import annotations

import pytest

from cli.validators import ArgumentValidationError, build_search_query, filter_integer
from core.domain.models import SearchQuery


def test_valid_arguments_build_a_query():
    assert build_search_query("Matrix", "5", year="1999", page="2") == SearchQuery(
        text="Matrix", limit=5, page=2, year=1999
    )


def test_page_defaults_to_one_and_year_to_none():
    query = build_search_query("Matrix", "3")

    assert query.page == 1
    assert query.year is None


def test_search_is_trimmed():
    assert build_search_query("  Alien  ", "1").text == "Alien"


@pytest.mark.parametrize("raw", ["42", " 42 ", "+42", "007"])
def test_filter_integer_accepts_plain_integers(raw):
    assert filter_integer(raw, "limit") == int(raw.strip())


@pytest.mark.parametrize("raw", ["invalid", "1.5", "1e3", "1_000", "", "  "])
def test_filter_integer_rejects_non_integers(raw):
    with pytest.raises(ArgumentValidationError, match="^Limit must be an integer.$"):
        filter_integer(raw, "limit")


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (("", "5"), "Search must not be empty."),
        (("   ", "5"), "Search must not be empty."),
        (("Test", "invalid"), "Limit must be an integer."),
        (("Test", "0"), "Limit must be greater than 0."),
        (("Test", "5", "invalid"), "Year must be an integer."),
        (("Test", "5", "0"), "Year must be greater than 0."),
        (("Test", "5", None, "invalid"), "Page must be an integer."),
        (("Test", "5", None, "0"), "Page number must be greater than 0."),
        (("Test", "5", None, "-3"), "Page number must be greater than 0."),
    ],
)
def test_single_violation_messages(args, message):
    with pytest.raises(ArgumentValidationError) as info:
        build_search_query(*args)

    assert str(info.value) == message


@pytest.mark.parametrize(
    ("args", "message"),
    [
        # search wins over everything else
        (("", "invalid", "invalid", "0"), "Search must not be empty."),
        # limit wins over year and page
        (("Test", "invalid", "invalid", "0"), "Limit must be an integer."),
        # year wins over page
        (("Test", "5", "invalid", "invalid"), "Year must be an integer."),
        (("Test", "5", "2000", "0"), "Page number must be greater than 0."),
    ],
)
def test_first_violation_wins(args, message):
    with pytest.raises(ArgumentValidationError) as info:
        build_search_query(*args)

    assert str(info.value) == message
