"""
Tests for membership term arithmetic
"""
from datetime import date, datetime
from types import SimpleNamespace

from sportcenter.services.membership import (
    TERM_PRICE,
    add_months,
    days_remaining,
    is_membership_active,
    new_term,
    pricing_info,
    renewal_start,
)


def _membership(end_date):
    return SimpleNamespace(end_date=end_date)


def test_new_term_lasts_three_calendar_months():
    assert new_term(date(2024, 1, 15)) == (date(2024, 1, 15), date(2024, 4, 15))


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)
    assert add_months(date(2023, 11, 30), 3) == date(2024, 2, 29)
    assert add_months(date(2024, 10, 31), 2) == date(2024, 12, 31)


def test_add_months_rolls_over_year():
    assert add_months(date(2024, 12, 1), 3) == date(2025, 3, 1)


def test_membership_active_until_end_date():
    membership = _membership(date(2024, 6, 1))

    assert is_membership_active(membership, datetime(2024, 5, 31, 23, 59))
    assert not is_membership_active(membership, datetime(2024, 6, 1, 0, 0))
    assert not is_membership_active(membership, datetime(2024, 7, 1))


def test_no_membership_is_not_active():
    assert is_membership_active(None, datetime(2024, 1, 1)) is False


def test_days_remaining_rounds_up():
    membership = _membership(date(2024, 3, 11))

    assert days_remaining(membership, datetime(2024, 3, 1)) == 10
    assert days_remaining(membership, datetime(2024, 3, 1, 12, 0)) == 10
    assert days_remaining(membership, datetime(2024, 3, 10, 23, 0)) == 1


def test_days_remaining_is_zero_after_expiry():
    membership = _membership(date(2024, 3, 11))

    assert days_remaining(membership, datetime(2024, 4, 1)) == 0


def test_renewal_extends_unexpired_term():
    current = _membership(date(2024, 6, 1))

    assert renewal_start(current, datetime(2024, 5, 1)) == date(2024, 6, 1)


def test_renewal_after_expiry_starts_today():
    current = _membership(date(2024, 6, 1))

    assert renewal_start(current, datetime(2024, 8, 20, 10, 0)) == date(2024, 8, 20)
    assert renewal_start(None, datetime(2024, 8, 20, 10, 0)) == date(2024, 8, 20)


def test_pricing_info():
    info = pricing_info()

    assert info["term_price"] == int(TERM_PRICE) == 600
    assert info["currency"] == "SEK"
    assert info["term_length"] == "3 months"
