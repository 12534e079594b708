# downline/utils/ids.py

import re

_LEADING_NOISE = re.compile(r"^[\s0]+")


def normalize_id(raw) -> str:
    """
    Canonical form of an IBO id, used as the key of every identity lookup.

    Example: "007", "7" and " 7 " all become "7".
    """
    if raw is None:
        return ""
    return _LEADING_NOISE.sub("", str(raw)).strip()
