import re

from ninelayer.analytics.layers import LayerId


def is_valid_draw_number(s: str) -> bool:
    s = s or ""
    if "," in s:
        parts = [p.strip() for p in s.split(",")]
        return len(parts) >= 4 and all(re.fullmatch(r"[0-9]", p) for p in parts)
    return bool(re.fullmatch(r"[0-9]{3,}", s))

def is_valid_candidate(s: str) -> bool:
    return bool(re.fullmatch(r"[0-9]{3}", s or ""))

def parse_layer_id(s: str) -> LayerId | None:
    try:
        return LayerId[(s or "").upper()]
    except KeyError:
        return None
