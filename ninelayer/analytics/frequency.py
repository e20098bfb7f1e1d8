from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable

from ninelayer.core.digits import extract_digits, parse_digits
from ninelayer.core.draws import draw_number


@dataclass(frozen=True)
class DigitProfile:
    hot: tuple[int, ...] = ()
    cold: tuple[int, ...] = ()
    key: tuple[int, ...] = ()
    freq: dict[int, int] = field(default_factory=dict)


def digit_counts(draws: Iterable[Any]) -> dict[int, int]:
    c: Counter[int] = Counter()
    for d in draws:
        c.update(parse_digits(extract_digits(draw_number(d))))
    return {digit: c[digit] for digit in sorted(c)}


def rank_digits(freq: dict[int, int]) -> list[int]:
    # stable: equal counts keep ascending digit order
    return sorted(sorted(freq), key=lambda digit: -freq[digit])


def analyze(draws: Iterable[Any], key_code_count: int = 3) -> DigitProfile:
    """Count digit occurrences over the draws and derive hot/cold/key digits.

    hot is the top three of the ranking, cold the last three (sliced from the
    end of the same ranking), key the top ``key_code_count``.
    """
    freq = digit_counts(draws)
    ranking = rank_digits(freq)
    return DigitProfile(
        hot=tuple(ranking[:3]),
        cold=tuple(ranking[-3:]),
        key=tuple(ranking[:max(key_code_count, 0)]),
        freq=freq,
    )
