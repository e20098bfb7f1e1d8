from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ninelayer.core.digits import extract_digits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Draw:
    """One historical draw as delivered by a source."""

    number: str
    id: int | None = None
    draw_date: str | None = None
    period: str | None = None

    @property
    def digits(self) -> str:
        return extract_digits(self.number)


def draw_number(draw: Any) -> str:
    # Draw objects, {"number": ...} mappings and bare strings are all accepted
    if isinstance(draw, str):
        return draw
    if isinstance(draw, Mapping):
        return str(draw.get("number") or "")
    return str(getattr(draw, "number", "") or "")


def draw_from_dict(d: Mapping[str, Any]) -> Draw | None:
    number = d.get("number")
    if number is None or number == "":
        return None
    raw_id = d.get("id")
    try:
        draw_id = int(raw_id) if raw_id is not None else None
    except (TypeError, ValueError):
        draw_id = None
    draw_date = d.get("drawDate", d.get("draw_date"))
    period = d.get("period")
    return Draw(
        number=str(number),
        id=draw_id,
        draw_date=str(draw_date) if draw_date is not None else None,
        period=str(period) if period is not None else None,
    )


def draws_from_payload(payload: Any) -> list[Draw]:
    """Build draws from a decoded JSON payload (a list or a single object)."""
    items: Iterable[Any] = payload if isinstance(payload, list) else [payload]
    out = []
    for item in items:
        if not isinstance(item, Mapping):
            logger.warning("skipping non-object draw entry: %r", item)
            continue
        draw = draw_from_dict(item)
        if draw is None:
            logger.warning("skipping draw without number: %r", item)
            continue
        out.append(draw)
    return out
