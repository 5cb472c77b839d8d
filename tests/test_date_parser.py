"""Tests for date parsing."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from spendview.utils.date_parser import parse_date, parse_record_date, get_date_range


def test_parse_record_date_iso():
    """Test parsing an ISO statement date."""
    assert parse_record_date("2024-06-01") == date(2024, 6, 1)


def test_parse_record_date_with_time():
    """Test that the time part of a statement date is dropped."""
    assert parse_record_date("2024-06-01 14:05:00") == date(2024, 6, 1)
    assert parse_record_date("2024-06-01T14:05") == date(2024, 6, 1)


def test_parse_record_date_strips_whitespace():
    assert parse_record_date("  2024-06-01 ") == date(2024, 6, 1)


@pytest.mark.parametrize("value", ["06/01/2024", "01/06/2024", "June 1, 2024", "2024-13-01", "2024-02-30", "yesterday", "2024-06", "2024", "20240601", "2024-W23-3"])
def test_parse_record_date_rejects_ambiguous_or_invalid(value):
    """Only unambiguous, valid ISO dates are accepted for records."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_record_date(value)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_last_month():
    """Test parsing 'last month'."""
    result = parse_date("last month")
    today = date.today()
    if today.month == 1:
        expected = date(today.year - 1, 12, 1)
    else:
        expected = date(today.year, today.month - 1, 1)
    assert result == expected


def test_parse_last_week():
    """Test parsing 'last week'."""
    result = parse_date("last week")
    today = date.today()
    expected = today - timedelta(days=today.weekday() + 7)
    assert result == expected
    assert result.weekday() == 0


def test_parse_last_weekday():
    """Test parsing 'last friday'."""
    result = parse_date("last friday")
    today = date.today()
    assert result.weekday() == 4
    assert 1 <= (today - result).days <= 7


def test_parse_this_month():
    """Test parsing 'this month'."""
    today = date.today()
    assert parse_date("this month") == date(today.year, today.month, 1)


def test_parse_this_year():
    """Test parsing 'this year'."""
    today = date.today()
    assert parse_date("this year") == date(today.year, 1, 1)


def test_parse_invalid_relative():
    """Test parsing invalid relative date."""
    with pytest.raises(ValueError):
        parse_date("last invalid")


def test_parse_standard_formats():
    """Test parsing various standard date formats."""
    assert parse_date("January 15, 2024") == date(2024, 1, 15)
    assert parse_date("15/01/2024") == date(2024, 1, 15)


def test_get_date_range_this_month():
    """Test get_date_range for this-month."""
    today = date.today()
    start, end = get_date_range("this-month")
    assert start == date(today.year, today.month, 1)
    assert end == today


def test_get_date_range_this_week():
    """Test get_date_range for this-week."""
    today = date.today()
    start, end = get_date_range("this-week")
    assert start == today - timedelta(days=today.weekday())
    assert start.weekday() == 0
    assert end == today


def test_get_date_range_last_month():
    """Test get_date_range for last-month."""
    today = date.today()
    start, end = get_date_range("last-month")
    expected_start = (today - relativedelta(months=1)).replace(day=1)
    expected_end = today.replace(day=1) - timedelta(days=1)
    assert start == expected_start
    assert end == expected_end
    assert end.month == expected_start.month


def test_get_date_range_last_year():
    """Test get_date_range for last-year."""
    today = date.today()
    start, end = get_date_range("last-year")
    assert start == date(today.year - 1, 1, 1)
    assert end == date(today.year - 1, 12, 31)


def test_get_date_range_last_week():
    """Test get_date_range for last-week."""
    start, end = get_date_range("last-week")
    assert start.weekday() == 0
    assert end.weekday() == 6
    assert (end - start).days == 6


def test_get_date_range_invalid_period():
    """Test get_date_range with invalid period."""
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("invalid-period")
