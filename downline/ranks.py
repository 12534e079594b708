# downline/ranks.py

# -----------------------------------------
# N21 Qualification Ladder
# -----------------------------------------

from collections import namedtuple

from downline.utils.coerce import to_number

Requirement = namedtuple(
    "Requirement",
    [
        "id",
        "label",
        "min_vpg",
        "cep",
        "bbs",
        "wes",
        "min_active_lines",
        "min_qualified_lines",
        "description",
    ],
)

# id, label, group PV, CEP, BBS tickets, WES tickets, active lines, qualified lines
THREE_PERCENT = Requirement("3", "3% Core", 200, 1, 1, 1, 0, 0, "Base del sistema.")
LEADERS_CLUB = Requirement("LC", "Leaders Club", 1200, 5, 5, 10, 1, 0, "La pietra miliare.")
EXECUTIVE_LC = Requirement("ELC", "Executive LC", 4000, 15, 15, 20, 2, 1, "Motore Argento.")
SILVER = Requirement("SILVER", "Argento", 10000, 30, 30, 50, 3, 2, "Leadership Massima.")
PLATINUM = Requirement("PLATINUM", "Platino", 10000, 50, 50, 80, 6, 3, "Argento consolidato su sei linee.")

# Lowest first
QUALIFICATION_LADDER = (THREE_PERCENT, LEADERS_CLUB, EXECUTIVE_LC, SILVER, PLATINUM)

# A frontline counts as a qualified line once it reaches this tier's volume
QUALIFIED_LINE_TIER = LEADERS_CLUB

# Silver and Platinum share the top band (from EXECUTIVE_LC volume up);
# Platinum becomes the target once the band's sub-threshold is reached.
TOP_BAND_SUB_THRESHOLD = SILVER.min_vpg

# (volume already reached, next target), walked from the top down
TARGET_LADDER = (
    (TOP_BAND_SUB_THRESHOLD, PLATINUM),
    (EXECUTIVE_LC.min_vpg, SILVER),
    (LEADERS_CLUB.min_vpg, EXECUTIVE_LC),
    (THREE_PERCENT.min_vpg, LEADERS_CLUB),
)


# -----------------------------------------
# Target Fetch Function
# -----------------------------------------
def get_auto_target(vpg, active_lines=0, qualified_lines=0):
    """
    Input:
        vpg             = member's group PV
        active_lines    = frontlines with volume
        qualified_lines = frontlines at Leaders Club volume

    Output:
        the NEXT Requirement to chase (never the one already reached).

    Only volume decides the target today; the line counts are accepted so
    callers can pass the full picture. Negative / NaN / missing volume is
    read as 0 and lands on the entry tier.
    """
    volume = to_number(vpg)

    for reached, target in TARGET_LADDER:
        if volume >= reached:
            return target

    return THREE_PERCENT


def is_qualified_line(vpg):
    return to_number(vpg) >= QUALIFIED_LINE_TIER.min_vpg


def target_progress(stats, requirement):
    """
    Completion percentage (0-100) of each requirement metric,
    as shown on the dashboard progress bars.
    """
    pairs = {
        "vpg": requirement.min_vpg,
        "cep": requirement.cep,
        "bbs": requirement.bbs,
        "wes": requirement.wes,
        "active_lines": requirement.min_active_lines,
        "qualified_lines": requirement.min_qualified_lines,
    }

    progress = {}
    for metric, target in pairs.items():
        current = to_number(stats.get(metric, 0))
        if target <= 0:
            progress[metric] = 100
            continue
        progress[metric] = min(100, round(current / target * 100, 1))
    return progress
