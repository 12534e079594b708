# downline/views.py ======================================================
# JSON stats endpoint + Excel export for the downline dashboard
# ========================================================================

import logging

from django.http import HttpResponse, JsonResponse
from openpyxl import Workbook
from openpyxl.styles import Border, Font, Side

from .mlm.stats_engine import aggregate_network_stats, empty_stats
from .mlm.tree import index_roster
from .ranks import get_auto_target
from .services import default_month_filter, load_network, member_dashboard
from .utils.months import validate_month_filter

logger = logging.getLogger(__name__)


def _month_from_request(request):
    return validate_month_filter(request.GET.get("month") or default_month_filter())


# ======================================================
# MEMBER STATS (JSON)
# ======================================================
def member_stats(request, member_id):
    try:
        month_filter = _month_from_request(request)
    except ValueError as exc:
        return JsonResponse({"error": str(exc)}, status=400)

    payload = member_dashboard(member_id, month_filter)
    if payload is None:
        return JsonResponse({"error": "Member not found"}, status=404)

    return JsonResponse(payload)


# ======================================================
# NETWORK STATS EXPORT (Excel)
# ======================================================
def export_network_stats(request):
    try:
        month_filter = _month_from_request(request)
    except ValueError as exc:
        return JsonResponse({"error": str(exc)}, status=400)

    roster = index_roster(load_network())
    network_stats = aggregate_network_stats(roster.values(), month_filter)

    wb = Workbook()
    ws = wb.active
    ws.title = "Network Stats"

    headers = [
        "IBO ID", "Name", "Upline", "VPG", "BBS", "WES", "CEP",
        "Recruits", "Active Lines", "Qualified Lines", "Next Target",
    ]
    ws.append(headers)

    # Bold header
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for key, record in roster.items():
        stats = network_stats.get(key) or empty_stats()
        target = get_auto_target(stats["vpg"], stats["active_lines"], stats["qualified_lines"])
        ws.append([
            record["id"],
            record["name"],
            record["upline_id"] or "",
            stats["vpg"],
            stats["bbs"],
            stats["wes"],
            stats["cep"],
            stats["recruits"],
            stats["active_lines"],
            stats["qualified_lines"],
            target.label,
        ])

    # Borders
    thin = Side(border_style="thin", color="000000")
    border = Border(top=thin, left=thin, right=thin, bottom=thin)
    for row in ws.iter_rows(min_row=1, max_row=ws.max_row):
        for cell in row:
            cell.border = border

    # Auto column width
    for col in ws.columns:
        col_letter = col[0].column_letter
        max_length = max(len(str(cell.value or "")) for cell in col)
        ws.column_dimensions[col_letter].width = max_length + 2

    # Freeze header
    ws.freeze_panes = "A2"

    logger.info("Exported network stats for %s IBO (month=%s)", len(roster), month_filter)

    response = HttpResponse(
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    response["Content-Disposition"] = f"attachment; filename=network_stats_{month_filter}.xlsx"
    wb.save(response)
    return response
