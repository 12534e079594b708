# downline/utils/months.py

import datetime
import re

# Sentinel month filter: every recruit, current vital signs
ALL_MONTHS = "ALL"

_MONTH_TOKEN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def canonical_month_filter(token):
    """Lenient form for the engine: any casing of ALL (or nothing) is the sentinel."""
    cleaned = str(token or "").strip()
    if not cleaned or cleaned.upper() == ALL_MONTHS:
        return ALL_MONTHS
    return cleaned


def validate_month_filter(token):
    """Return the cleaned filter or raise ValueError for anything but ALL / YYYY-MM."""
    cleaned = str(token or "").strip()
    if cleaned.upper() == ALL_MONTHS:
        return ALL_MONTHS
    if not _MONTH_TOKEN.match(cleaned):
        raise ValueError(f"Invalid month filter {token!r}: expected 'ALL' or 'YYYY-MM'.")
    return cleaned


def month_of(value):
    """
    Month bucket ("YYYY-MM") of a registration date.
    Accepts date/datetime objects and ISO-like strings; anything else → None.
    """
    if isinstance(value, (datetime.date, datetime.datetime)):
        return f"{value.year:04d}-{value.month:02d}"
    if isinstance(value, str):
        token = value.strip()[:7]
        if _MONTH_TOKEN.match(token):
            return token
    return None
