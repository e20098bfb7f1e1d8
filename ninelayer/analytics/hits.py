from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from ninelayer.analytics.scoring import ScoredCandidate
from ninelayer.core.digits import extract_digits


def test_hit(draw_raw: str, layer: Iterable[Union[ScoredCandidate, str]]) -> bool:
    """True if the draw's canonical digits are in the layer.

    The layer may hold scored candidates or bare numbers (stored snapshots).
    """
    target = extract_digits(draw_raw)
    return any(getattr(c, 'num', c) == target for c in layer)


def hit_rate(hits: int, total: int) -> float:
    return round(hits / total * 100, 2) if total else 0.0


@dataclass(frozen=True)
class HitStatistic:
    total: int = 0
    hits: int = 0

    @property
    def rate(self) -> float:
        return hit_rate(self.hits, self.total)

    def record(self, hit: bool) -> HitStatistic:
        return HitStatistic(total=self.total + 1, hits=self.hits + (1 if hit else 0))

    def as_dict(self) -> dict:
        return {'total': self.total, 'hits': self.hits, 'rate': self.rate}
