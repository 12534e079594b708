# ==========================================================
# downline/mlm/tree.py
# Sponsor tree helpers (upline → frontline index, downline walk)
# ==========================================================

from downline.mlm.records import member_record, record_key
from downline.utils.ids import normalize_id


def index_roster(members):
    """
    Normalized id → record, in input order.

    Duplicate ids (same id after normalization) keep the FIRST record found;
    later duplicates are ignored everywhere. Only members with no id at all
    are skipped: "0" normalizes to "" and is still a valid key.
    """
    roster = {}
    for raw in members:
        record = member_record(raw)
        if record["id"] is None:
            continue
        key = record_key(record)
        if key in roster:
            continue
        roster[key] = record
    return roster


def build_children_index(members):
    """
    Group members under their normalized upline id.

    Roots (missing or blank upline) are never children of anyone. An upline
    that does not exist in the roster is still a key here; nobody walks to it.
    """
    children_index = {}
    for record in index_roster(members).values():
        if record["upline_id"] is None:
            continue
        children_index.setdefault(normalize_id(record["upline_id"]), []).append(record)
    return children_index


def collect_descendant_ids(root_id, children_index):
    """
    All downline ids of ``root_id`` (raw ids, each at most once).

    Stack based, so deep lines cannot exhaust the interpreter stack.
    The root itself is never reported, even when bad data loops back to it.
    """
    root_key = normalize_id(root_id)
    visited = {root_key}
    results = []

    stack = list(children_index.get(root_key, []))
    while stack:
        node = stack.pop()
        key = record_key(node)
        if key in visited:
            continue
        visited.add(key)
        results.append(node["id"])
        stack.extend(children_index.get(key, []))

    return results
