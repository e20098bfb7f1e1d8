from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Mapping, Sequence

from ninelayer.analytics.scoring import ScoredCandidate

Layer = tuple[ScoredCandidate, ...]


class LayerId(Enum):
    # value: (target size, name, description); declared from widest to narrowest
    L9 = (900, "Original", "Top 90% by score")
    L8 = (800, "Edge", "Remove bottom 20%")
    L7 = (700, "Balance", "Hot/cold distribution")
    L6 = (600, "Fault Tolerance", "Fault tolerance")
    L5 = (500, "Standard", "Standard matrix")
    L4 = (400, "Extension", "Range coverage")
    L3 = (300, "Core", "Key code rotation")
    L2 = (200, "Selected", "Misalignment")
    L1 = (100, "Limit", "Top scores only")

    @property
    def size(self) -> int:
        return self.value[0]

    @property
    def title(self) -> str:
        return self.value[1]

    @property
    def description(self) -> str:
        return self.value[2]

    @property
    def ratio(self) -> float:
        return self.size / 1000


def _take(items: Iterable[ScoredCandidate], pred: Callable[[ScoredCandidate], bool], n: int) -> list[ScoredCandidate]:
    return [c for c in items if pred(c)][:max(n, 0)]


def rank(scored: Mapping[str, ScoredCandidate]) -> list[ScoredCandidate]:
    # stable sort; equal totals keep ascending candidate order
    ordered = [scored[k] for k in sorted(scored)]
    return sorted(ordered, key=lambda c: -c.total_score)


def balance(src: Sequence[ScoredCandidate], size: int) -> Layer:
    """70% with a hot digit, 20% with a cold digit, 10% with neither.

    The buckets overlap: a candidate holding both a hot and a cold digit may
    be picked twice.
    """
    picked = (
        _take(src, lambda c: c.hot_count > 0, size * 7 // 10)
        + _take(src, lambda c: c.cold_count > 0, size * 2 // 10)
        + _take(src, lambda c: c.hot_count == 0 and c.cold_count == 0, size // 10)
    )
    return tuple(picked[:size])


def extend(src: Sequence[ScoredCandidate], size: int) -> Layer:
    """40% edge values first, then 60% normal values."""
    picked = (
        _take(src, lambda c: c.is_edge_value, size * 4 // 10)
        + _take(src, lambda c: not c.is_edge_value, size * 6 // 10)
    )
    return tuple(picked[:size])


def core(src: Sequence[ScoredCandidate], size: int) -> Layer:
    """Key-code candidates first, topped up with the rest if short."""
    with_key = [c for c in src if c.contains_key_code]
    picked = with_key[:size] + _take(src, lambda c: not c.contains_key_code, size - len(with_key))
    return tuple(picked[:size])


def filter_layers(scored: Mapping[str, ScoredCandidate], hot: Sequence[int] = (),
                  key: Sequence[int] = ()) -> dict[LayerId, Layer]:
    """Narrow the scored universe through L9..L1, each layer cut from the previous one.

    hot and key are implied by the per-candidate hot_count and
    contains_key_code flags; they are accepted so callers can pass the
    analyzer output straight through.
    """
    L = LayerId
    out: dict[LayerId, Layer] = {}
    out[L.L9] = tuple(rank(scored)[:L.L9.size])
    out[L.L8] = out[L.L9][:L.L8.size]
    out[L.L7] = balance(out[L.L8], L.L7.size)
    out[L.L6] = out[L.L7][:L.L6.size]
    out[L.L5] = out[L.L6][:L.L5.size]
    out[L.L4] = extend(out[L.L5], L.L4.size)
    out[L.L3] = core(out[L.L4], L.L3.size)
    out[L.L2] = out[L.L3][:L.L2.size]
    out[L.L1] = out[L.L2][:L.L1.size]
    return out
