import re

from django.conf import settings

from .mlm.records import month_vital_signs, record_key
from .mlm.stats_engine import aggregate_network_stats, empty_stats
from .mlm.tree import build_children_index, collect_descendant_ids, index_roster
from .models import Ibo
from .ranks import get_auto_target, target_progress
from .utils.ids import normalize_id
from .utils.months import canonical_month_filter


def default_month_filter():
    return getattr(settings, "YESAPP_DEFAULT_MONTH_FILTER", "ALL")


def load_network():
    """Whole roster from the database, as engine records."""
    return [ibo.as_record() for ibo in Ibo.objects.all()]


def format_display_name(name):
    if not name:
        return "Leader"
    return re.sub(r"\s+", " ", str(name).replace(",", "")).strip()


def requirement_as_dict(requirement):
    return dict(requirement._asdict())


# -------------------------------------------------------------
#  DOWNLINE SCOPE
# -------------------------------------------------------------
def downline_network(members, member_id):
    """The member plus every IBO below them; empty list for an unknown member."""
    roster = index_roster(members)
    root_key = normalize_id(member_id)
    if root_key not in roster:
        return []

    children_index = build_children_index(roster.values())
    keys = {root_key}
    keys.update(normalize_id(i) for i in collect_descendant_ids(root_key, children_index))
    return [record for key, record in roster.items() if key in keys]


# -------------------------------------------------------------
#  DASHBOARD PAYLOAD (one member)
# -------------------------------------------------------------
def member_dashboard(member_id, month_filter=None, members=None):
    """
    Everything the dashboard shows for one IBO: organization totals,
    next objective with progress, and frontlines that have volume.
    Returns None when the member is not in the network.
    """
    month_filter = canonical_month_filter(month_filter or default_month_filter())
    if members is None:
        members = load_network()

    roster = index_roster(members)
    key = normalize_id(member_id)
    member = roster.get(key)
    if member is None:
        return None

    network_stats = aggregate_network_stats(roster.values(), month_filter)
    children_index = build_children_index(roster.values())

    stats = network_stats.get(key) or empty_stats()
    org_stats = {
        "total_vpg": month_vital_signs(member, month_filter)["group_pv"],
        "total_bbs": stats["bbs"],
        "total_wes": stats["wes"],
        "total_cep": stats["cep"],
        "new_recruits": stats["recruits"],
        "active_lines": stats["active_lines"],
        "qualified_lines": stats["qualified_lines"],
    }
    objective = get_auto_target(org_stats["total_vpg"], stats["active_lines"], stats["qualified_lines"])

    frontlines = []
    for child in children_index.get(key, []):
        child_key = record_key(child)
        if child_key == key:
            continue
        child_stats = network_stats.get(child_key) or empty_stats()
        if child_stats["vpg"] <= 0:
            continue
        target = get_auto_target(child_stats["vpg"], child_stats["active_lines"], child_stats["qualified_lines"])
        frontlines.append({
            "id": child["id"],
            "name": format_display_name(child["name"]),
            "has_cep": child["vital_signs"]["has_cep"],
            "stats": child_stats,
            "target": requirement_as_dict(target),
            "progress": target_progress(child_stats, target),
        })
    frontlines.sort(key=lambda line: line["stats"]["vpg"], reverse=True)

    return {
        "id": member["id"],
        "name": format_display_name(member["name"]),
        "month": month_filter,
        "org_stats": org_stats,
        "next_objective": requirement_as_dict(objective),
        "progress": target_progress(stats, objective),
        "frontlines": frontlines,
    }


# -------------------------------------------------------------
#  NETWORK REPORT (text handed to the AI coach prompt)
# -------------------------------------------------------------
def build_network_report(members):
    lines = []
    for record in index_roster(members).values():
        vital = record["vital_signs"]
        if vital["group_pv"] <= 0:
            continue
        lines.append(
            f"LEADER: {record['name']} (ID: {record['id']}) - VPG: {vital['group_pv']}, "
            f"BBS: {vital['bbs_tickets']}, WES: {vital['wes_tickets']}, "
            f"CEP: {'SI' if vital['has_cep'] else 'NO'}"
        )
    return "\n".join(lines)
