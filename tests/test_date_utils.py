"""Tests for date helpers."""
from datetime import date

import pytest

from reading_stats.date_utils import date_is_in_current_year, parse_date


def test_date_is_in_current_year():
    today = date(2026, 10, 18)

    assert date_is_in_current_year(date(2026, 1, 1), today)
    assert date_is_in_current_year(date(2026, 12, 31), today)
    assert not date_is_in_current_year(date(2025, 12, 31), today)
    assert not date_is_in_current_year(None, today)


def test_date_is_in_current_year_defaults_to_today():
    assert date_is_in_current_year(date.today())


def test_parse_date():
    assert parse_date("2020-05-03") == date(2020, 5, 3)
    assert parse_date("2020-05-03T10:15:00Z") == date(2020, 5, 3)
    assert parse_date("") is None
    assert parse_date(None) is None


def test_parse_date_malformed():
    with pytest.raises(ValueError):
        parse_date("03/05/2020")
