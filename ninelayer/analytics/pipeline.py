from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from ninelayer.analytics.frequency import analyze
from ninelayer.analytics.layers import Layer, LayerId, filter_layers
from ninelayer.analytics.scoring import ScoredCandidate, score


@dataclass(frozen=True)
class AnalysisResult:
    hot: tuple[int, ...]
    cold: tuple[int, ...]
    key: tuple[int, ...]
    freq: dict[int, int]
    scored: dict[str, ScoredCandidate] = field(repr=False)
    layers: dict[LayerId, Layer] = field(repr=False)


def run_analysis(draws: Iterable[Any], key_code_count: int = 3) -> AnalysisResult:
    profile = analyze(draws, key_code_count=key_code_count)
    scored = score(profile.hot, profile.cold, profile.key, profile.freq)
    layers = filter_layers(scored, profile.hot, profile.key)
    return AnalysisResult(
        hot=profile.hot,
        cold=profile.cold,
        key=profile.key,
        freq=profile.freq,
        scored=scored,
        layers=layers,
    )
