"""Unit tests for date and rounding helpers"""

import pytest
from datetime import date, datetime
from loan_eligibility.utils.date_utils import age_in_years, parse_date
from loan_eligibility.utils.rounding import format_number, format_ratio, round_currency, round_half_up


def test_parse_date_variants():
    assert parse_date(date(1990, 1, 15)) == date(1990, 1, 15)
    assert parse_date(datetime(1990, 1, 15, 10, 30)) == date(1990, 1, 15)
    assert parse_date("1990-01-15") == date(1990, 1, 15)
    assert parse_date("1990-01-15T00:00:00.000Z") == date(1990, 1, 15)


def test_parse_date_invalid():
    with pytest.raises(ValueError):
        parse_date("15/01/1990")
    with pytest.raises(TypeError):
        parse_date(19900115)


def test_age_in_years_uses_julian_year():
    assert age_in_years(date(1995, 1, 15), date(2025, 6, 1)) == 30
    # 9131 days / 365.25 = 24.999: the 25th birthday itself still counts as 24
    assert age_in_years(date(2000, 6, 1), date(2025, 6, 1)) == 24
    assert age_in_years(date(2000, 6, 1), date(2025, 6, 2)) == 25


def test_age_in_years_future_birth_date_is_negative():
    assert age_in_years(date(2030, 1, 1), date(2025, 6, 1)) < 0


def test_round_currency_half_away_from_zero():
    assert round_currency(2.675) == 2.68
    assert round_currency(1.005) == 1.01
    assert round_currency(-1.005) == -1.01
    assert round_currency(22244.4447) == 22244.44


def test_round_half_up():
    assert round_half_up(59.5) == 60
    assert round_half_up(2.5) == 3
    assert round_half_up(0.49) == 0


def test_format_ratio():
    assert format_ratio(0.25) == "0.3"
    assert format_ratio(26.65464) == "26.7"
    assert format_ratio(40) == "40.0"


def test_format_number():
    assert format_number(5) == "5"
    assert format_number(5.0) == "5"
    assert format_number(2.5) == "2.5"
    assert format_number(12.3456789) == "12.3456789"
