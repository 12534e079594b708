# ==========================================================
# downline/mlm/stats_engine.py
# NETWORK STATS ENGINE (subtree roll-up per IBO)
# ==========================================================

import logging

from downline.mlm.records import counts_as_recruit, month_vital_signs, record_key
from downline.mlm.tree import build_children_index, index_roster
from downline.ranks import is_qualified_line
from downline.utils.months import ALL_MONTHS, canonical_month_filter

logger = logging.getLogger(__name__)

ROLLED_UP_METRICS = ("bbs", "wes", "cep")


def empty_stats():
    """Default for members missing from the stats map."""
    return {
        "bbs": 0,
        "wes": 0,
        "cep": 0,
        "vpg": 0,
        "recruits": 0,
        "active_lines": 0,
        "qualified_lines": 0,
    }


def own_stats(record, month_filter=ALL_MONTHS):
    vital = month_vital_signs(record, month_filter)
    stats = empty_stats()
    stats["bbs"] = vital["bbs_tickets"]
    stats["wes"] = vital["wes_tickets"]
    stats["cep"] = 1 if vital["has_cep"] else 0
    # groupPV already covers the whole group, it is not summed again
    stats["vpg"] = vital["group_pv"]
    return stats


# ----------------------------------------------------------
# FULL NETWORK ROLL-UP
# ----------------------------------------------------------
def aggregate_network_stats(members, month_filter=ALL_MONTHS):
    """
    Normalized id → aggregated stats for EVERY member of the list.

    - bbs / wes / cep: own value + whole downline
    - vpg: own group PV
    - recruits: every downline member counts once (for a month filter,
      only those registered in that month)
    - active_lines / qualified_lines: frontlines with volume /
      at Leaders Club volume

    One memo cache is shared by the whole batch, so each IBO is rolled up
    exactly once. Cycles in upline data are cut by a separate per-walk
    path set: a frontline already on the current path adds nothing.
    """
    month_filter = canonical_month_filter(month_filter)
    roster = index_roster(members)
    children_index = build_children_index(roster.values())
    cache = {}

    for key in roster:
        if key not in cache:
            _roll_up(key, roster, children_index, cache, month_filter)

    logger.debug("Network stats computed for %s members (month=%s)", len(cache), month_filter)
    return cache


def _roll_up(root_key, roster, children_index, cache, month_filter):
    # path: members expanded on the current walk and not finished yet
    path = set()
    stack = [(root_key, False)]

    while stack:
        key, expanded = stack.pop()

        if not expanded:
            if key in cache or key in path:
                continue
            path.add(key)
            stack.append((key, True))
            for child in children_index.get(key, []):
                child_key = record_key(child)
                if child_key not in cache and child_key not in path:
                    stack.append((child_key, False))
            continue

        cache[key] = _finish(key, roster, children_index, cache, month_filter)
        path.discard(key)


def _finish(key, roster, children_index, cache, month_filter):
    stats = own_stats(roster[key], month_filter)

    for child in children_index.get(key, []):
        child_key = record_key(child)
        if child_key == key:
            logger.debug("IBO %s is registered as its own upline, ignored", key)
            continue

        child_own_vpg = month_vital_signs(child, month_filter)["group_pv"]
        if child_own_vpg > 0:
            stats["active_lines"] += 1
        if is_qualified_line(child_own_vpg):
            stats["qualified_lines"] += 1

        child_stats = cache.get(child_key)
        if child_stats is None:
            # still on the current path → upline loop
            logger.debug("Upline loop between %s and %s, downline counted once", key, child_key)
            continue

        for metric in ROLLED_UP_METRICS:
            stats[metric] += child_stats[metric]
        stats["recruits"] += child_stats["recruits"]
        if counts_as_recruit(child, month_filter):
            stats["recruits"] += 1

    return stats
