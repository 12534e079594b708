# downline/utils/__init__.py
# ----------------------------------------------------------
# ✅ Utils package initializer
# ----------------------------------------------------------

from .ids import normalize_id
from .coerce import to_number, to_flag
from .months import ALL_MONTHS, canonical_month_filter, month_of, validate_month_filter
