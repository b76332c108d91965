from __future__ import annotations

import pytest

from brochurecost.page_ranges import (
    InvalidCharactersError,
    InvalidRangeError,
    PageOutOfBoundsError,
    PageRangeError,
    parse_color_pages,
)


def test_mixed_singles_and_ranges():
    assert parse_color_pages("1, 3-5, 7", 10) == {1, 3, 4, 5, 7}


def test_empty_input_yields_empty_set():
    assert parse_color_pages("", 8) == frozenset()
    assert parse_color_pages("  ,, ", 8) == frozenset()


def test_duplicates_collapse_and_result_is_immutable():
    pages = parse_color_pages("2, 2, 1-3, 3", 8)
    assert pages == {1, 2, 3}
    assert isinstance(pages, frozenset)


def test_trailing_and_double_commas_ignored():
    assert parse_color_pages("1,,2,", 4) == {1, 2}


def test_range_beyond_max_reports_first_offending_page():
    with pytest.raises(PageOutOfBoundsError) as excinfo:
        parse_color_pages("7-19", 8)
    assert excinfo.value.value == 9
    assert excinfo.value.max_page == 8
    assert "9" in str(excinfo.value)
    assert "8" in str(excinfo.value)


def test_range_entirely_beyond_max_reports_its_start():
    with pytest.raises(PageOutOfBoundsError) as excinfo:
        parse_color_pages("12-14", 8)
    assert excinfo.value.value == 12


def test_single_page_beyond_max():
    with pytest.raises(PageOutOfBoundsError) as excinfo:
        parse_color_pages("1, 9", 8)
    assert excinfo.value.value == 9


def test_invalid_characters_rejected():
    with pytest.raises(InvalidCharactersError):
        parse_color_pages("1, a", 8)
    with pytest.raises(InvalidCharactersError):
        parse_color_pages("1;2", 8)


@pytest.mark.parametrize("token", ["5-3", "-4", "4-", "-"])
def test_malformed_ranges_rejected(token):
    with pytest.raises(InvalidRangeError) as excinfo:
        parse_color_pages(token, 8)
    assert excinfo.value.token == token


def test_first_error_wins():
    with pytest.raises(InvalidRangeError):
        parse_color_pages("5-3, 99", 8)
    with pytest.raises(PageOutOfBoundsError):
        parse_color_pages("99, 5-3", 8)


def test_errors_share_value_error_base():
    with pytest.raises(ValueError):
        parse_color_pages("x", 8)
    assert issubclass(PageOutOfBoundsError, PageRangeError)


def test_whitespace_inside_single_token_uses_leading_number():
    assert parse_color_pages("3 4", 8) == {3}


def test_whitespace_around_range_bounds():
    assert parse_color_pages(" 2 - 4 ", 8) == {2, 3, 4}


def test_page_zero_is_dropped():
    assert parse_color_pages("0, 0-2", 8) == {1, 2}


def test_parse_is_idempotent():
    assert parse_color_pages("1-3, 6", 8) == parse_color_pages("1-3, 6", 8)
    errors = []
    for _ in range(2):
        with pytest.raises(PageOutOfBoundsError) as excinfo:
            parse_color_pages("6-12", 8)
        errors.append((excinfo.value.value, excinfo.value.max_page))
    assert errors[0] == errors[1]
