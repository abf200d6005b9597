"""
Membership term arithmetic.

A membership is active while its end date lies in the future; nothing ever
writes the expiry back to the database, so every caller derives it here.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple
import calendar
import math

TERM_MONTHS = 3
TERM_PRICE = 600.0
CURRENCY = "SEK"


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the end of the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def new_term(start: date) -> Tuple[date, date]:
    return start, add_months(start, TERM_MONTHS)


def _end_of_term(membership) -> datetime:
    end_date = membership.end_date
    if isinstance(end_date, datetime):
        return end_date
    return datetime.combine(end_date, time.min)


def is_membership_active(membership, now: Optional[datetime] = None) -> bool:
    if membership is None:
        return False
    now = now or datetime.now()
    return _end_of_term(membership) > now


def days_remaining(membership, now: Optional[datetime] = None) -> int:
    now = now or datetime.now()
    if not is_membership_active(membership, now):
        return 0
    remaining = _end_of_term(membership) - now
    return math.ceil(remaining / timedelta(days=1))


def renewal_start(current, now: Optional[datetime] = None) -> date:
    """Extend an unexpired term from its end date, otherwise start today."""
    now = now or datetime.now()
    if current is not None and is_membership_active(current, now):
        end_date = current.end_date
        return end_date.date() if isinstance(end_date, datetime) else end_date
    return now.date()


def pricing_info() -> dict:
    return {
        "term_price": int(TERM_PRICE),
        "currency": CURRENCY,
        "term_length": f"{TERM_MONTHS} months",
        "description": "Access to all sports and training sessions",
    }
