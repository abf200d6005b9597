"""
Swedish personnummer, phone and time helpers shared by the request schemas.
"""

from datetime import date
from typing import Any, Optional
import json
import re

PERSONNUMMER_RE = re.compile(r"^\d{8}-\d{4}$")
PHONE_RE = re.compile(r"^[+]?[0-9\s\-()]{8,}$")
TIME_RE = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$")

MIN_PASSWORD_LENGTH = 6
ADULT_AGE = 18


def birth_date_from_personnummer(personnummer: str) -> Optional[date]:
    if not PERSONNUMMER_RE.match(personnummer or ""):
        return None
    try:
        return date(
            int(personnummer[0:4]), int(personnummer[4:6]), int(personnummer[6:8])
        )
    except ValueError:
        return None


def age_on(birth_date: date, today: date) -> int:
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def age_from_personnummer(
    personnummer: str, today: Optional[date] = None
) -> Optional[int]:
    birth_date = birth_date_from_personnummer(personnummer)
    if birth_date is None:
        return None
    return age_on(birth_date, today or date.today())


def is_valid_phone(value: Optional[str]) -> bool:
    return bool(PHONE_RE.match(value or ""))


def normalize_time(value: str) -> Optional[str]:
    """Return ``value`` as zero-padded HH:MM, or None if it is not a time."""
    match = TIME_RE.match(value or "")
    if not match:
        return None
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def parse_age_groups(value: Any):
    """Accept a list, a JSON array string or a comma-separated string."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if value.startswith("["):
            try:
                value = json.loads(value)
            except ValueError:
                raise ValueError("Age groups must be a list of labels")
        else:
            value = value.split(",")
    if not isinstance(value, list):
        raise ValueError("Age groups must be a list of labels")
    return [str(item).strip() for item in value if str(item).strip()]
