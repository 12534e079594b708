# downline/utils/coerce.py
# ----------------------------------------------------------
# ✅ Safe numeric reads for imported vital signs
# ----------------------------------------------------------

import math
from decimal import Decimal


def to_number(value, default=0):
    """
    Read a metric the way legacy spreadsheet imports deliver it.

    Missing, non-numeric, NaN/infinite and negative values all become
    ``default``. Whole numbers come back as ``int``.
    """
    if value is None or value == "":
        return default
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            number = float(Decimal(str(value)))
    except (ArithmeticError, ValueError, TypeError):
        return default

    if not math.isfinite(number) or number < 0:
        return default
    return int(number) if number.is_integer() else number


def to_flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "si", "sì", "yes", "y")
    return bool(value)
