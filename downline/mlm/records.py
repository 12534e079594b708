# ==========================================================
# downline/mlm/records.py
# Boundary between imported member data and the stats engine
# ==========================================================
#
# Members reach the engine either as Ibo rows (``as_record()``) or as
# plain dicts coming from JSON exports of the old browser app, which
# used camelCase keys (uplineId, vitalSigns, groupPV, hasCEP ...).
# Everything is read here once, so the aggregation code never has to
# deal with missing or non-numeric metrics.

from downline.utils.coerce import to_flag, to_number
from downline.utils.ids import normalize_id
from downline.utils.months import ALL_MONTHS, month_of

FIELD_ALIASES = {
    "id": ("id", "ibo_id"),
    "upline_id": ("upline_id", "uplineId"),
    "vital_signs": ("vital_signs", "vitalSigns"),
    "group_pv": ("group_pv", "groupPV"),
    "bbs_tickets": ("bbs_tickets", "bbsTickets"),
    "wes_tickets": ("wes_tickets", "wesTickets"),
    "has_cep": ("has_cep", "hasCEP"),
    "last_update": ("last_update", "lastUpdate"),
    "registration_date": ("registration_date", "registrationDate"),
}

# Only what the roll-up reads; line counts come from the tree itself.
NUMERIC_VITAL_SIGNS = (
    "group_pv",
    "bbs_tickets",
    "wes_tickets",
)


def _pick(raw, field, default=None):
    for key in FIELD_ALIASES.get(field, (field,)):
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def read_vital_signs(raw):
    """Coerce one vital-signs mapping (current or archived month) to numbers."""
    if not isinstance(raw, dict):
        raw = {}

    vital = {name: to_number(_pick(raw, name)) for name in NUMERIC_VITAL_SIGNS}
    vital["has_cep"] = to_flag(_pick(raw, "has_cep", False))
    vital["last_update"] = _pick(raw, "last_update")
    return vital


def member_record(raw):
    """
    Read one external member into the engine's record shape:

        {"id", "name", "upline_id", "vital_signs", "registration_date", "history"}

    ``id`` keeps the raw value (as a string) so callers can report it back;
    every lookup goes through ``normalize_id``. A missing id stays None.
    ``upline_id`` is None only for roots (missing or blank); "0" is an id.
    """
    if hasattr(raw, "as_record"):
        raw = raw.as_record()

    vital_raw = _pick(raw, "vital_signs") or {}
    if not isinstance(vital_raw, dict):
        vital_raw = {}

    history = vital_raw.get("history", raw.get("history"))
    registration_date = _pick(raw, "registration_date") or _pick(vital_raw, "registration_date")
    member_id = _pick(raw, "id")
    upline_id = _pick(raw, "upline_id")
    if upline_id is not None and not str(upline_id).strip():
        upline_id = None

    return {
        "id": str(member_id) if member_id is not None else None,
        "name": str(raw.get("name") or ""),
        "upline_id": str(upline_id) if upline_id is not None else None,
        "vital_signs": read_vital_signs(vital_raw),
        "registration_date": registration_date,
        "history": dict(history) if isinstance(history, dict) else {},
    }


def month_vital_signs(record, month_filter=ALL_MONTHS):
    """Vital signs to aggregate: the archived month snapshot when present, else current."""
    if month_filter != ALL_MONTHS:
        snapshot = record["history"].get(month_filter)
        if isinstance(snapshot, dict):
            return read_vital_signs(snapshot)
    return record["vital_signs"]


def counts_as_recruit(record, month_filter=ALL_MONTHS):
    """ALL counts every descendant; a month only counts members registered in it."""
    if month_filter == ALL_MONTHS:
        return True
    return month_of(record["registration_date"]) == month_filter


def record_key(record):
    return normalize_id(record["id"])
