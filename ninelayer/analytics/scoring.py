from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

# (hot_count, cold_count) -> score; anything else scores DEFAULT_HOT_COLD
HOT_COLD_TABLE = {
    (2, 1): 10.0,
    (1, 2): 10.0,
    (3, 0): 4.0,
    (0, 3): 3.0,
    (2, 0): 7.0,
    (1, 0): 6.0,
}
DEFAULT_HOT_COLD = 5.0


@dataclass(frozen=True)
class ScoredCandidate:
    num: str
    digits: tuple[int, int, int]
    sum: int
    span: int
    sum_score: float
    span_score: float
    hot_cold_score: float
    hit_score: float
    total_score: float
    hot_count: int
    cold_count: int
    contains_key_code: bool
    is_edge_value: bool

    def as_record(self) -> dict:
        """Persisted/display shape: scores as 2-decimal strings, flags as 0/1."""
        return {
            'number': self.num,
            'sum': self.sum,
            'span': self.span,
            'sum_score': f"{self.sum_score:.2f}",
            'span_score': f"{self.span_score:.2f}",
            'hot_cold_score': f"{self.hot_cold_score:.2f}",
            'hit_score': f"{self.hit_score:.2f}",
            'total_score': f"{self.total_score:.2f}",
            'contains_key_code': int(self.contains_key_code),
            'is_edge_value': int(self.is_edge_value),
        }


def candidates() -> list[str]:
    return [f"{i:03d}" for i in range(1000)]


def sum_score(total: int) -> float:
    dev = abs(total - 16)
    return 10 - (dev / 6) * 5 if dev <= 6 else 2.0


def span_score(span: int) -> float:
    dev = abs(span - 5)
    return 10.0 - dev * 2 if dev <= 1 else 3.0


def hot_cold_score(hot_count: int, cold_count: int) -> float:
    return HOT_COLD_TABLE.get((hot_count, cold_count), DEFAULT_HOT_COLD)


def is_edge(total: int, span: int) -> bool:
    return (total < 10 or total > 22) or (span < 4 or span > 6)


def candidate_freq(digits: Sequence[int], freq: Mapping[int, int]) -> float:
    return sum(freq.get(d, 0) for d in digits) / 3


def score(hot: Sequence[int], cold: Sequence[int], key: Sequence[int],
          freq: Mapping[int, int]) -> dict[str, ScoredCandidate]:
    """Four-dimensional score (sum, span, hot/cold, hit rate) for 000..999."""
    hot_set, cold_set, key_set = set(hot), set(cold), set(key)
    nums = candidates()
    est = {n: candidate_freq([int(c) for c in n], freq) for n in nums}
    max_freq = max(max(est.values()), 1)

    out: dict[str, ScoredCandidate] = {}
    for n in nums:
        d = (int(n[0]), int(n[1]), int(n[2]))
        total = sum(d)
        span = max(d) - min(d)
        hc = sum(1 for x in d if x in hot_set)
        cc = sum(1 for x in d if x in cold_set)
        s1 = sum_score(total)
        s2 = span_score(span)
        s3 = hot_cold_score(hc, cc)
        s4 = est[n] / max_freq * 10
        out[n] = ScoredCandidate(
            num=n,
            digits=d,
            sum=total,
            span=span,
            sum_score=s1,
            span_score=s2,
            hot_cold_score=s3,
            hit_score=s4,
            total_score=(s1 + s2 + s3 + s4) / 4,
            hot_count=hc,
            cold_count=cc,
            contains_key_code=any(x in key_set for x in d),
            is_edge_value=is_edge(total, span),
        )
    return out
