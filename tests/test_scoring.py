import pytest
from ninelayer.analytics.scoring import score, sum_score, span_score, hot_cold_score

HOT, COLD, KEY = (0, 1, 2), (7, 8, 9), (0, 1, 2)


def test_covers_universe():
    s = score(HOT, COLD, KEY, {0: 5})
    assert len(s) == 1000
    assert list(s)[:2] == ["000", "001"] and list(s)[-1] == "999"

def test_component_ranges_and_mean():
    s = score(HOT, COLD, KEY, {d: 10 - d for d in range(10)})
    for c in s.values():
        for v in (c.sum_score, c.span_score, c.hot_cold_score, c.hit_score):
            assert 0 <= v <= 10
        assert c.total_score == pytest.approx((c.sum_score + c.span_score + c.hot_cold_score + c.hit_score) / 4)

def test_sum_and_span_scores():
    assert sum_score(16) == 10
    assert sum_score(10) == 5 and sum_score(22) == 5
    assert sum_score(9) == 2 and sum_score(27) == 2
    assert sum_score(15) == pytest.approx(10 - 5 / 6)
    assert span_score(5) == 10 and span_score(4) == 8 and span_score(6) == 8
    assert span_score(0) == 3 and span_score(9) == 3

def test_hot_cold_table():
    s = score(HOT, COLD, KEY, {})
    assert s["017"].hot_cold_score == 10   # (2, 1)
    assert s["078"].hot_cold_score == 10   # (1, 2)
    assert s["012"].hot_cold_score == 4
    assert s["789"].hot_cold_score == 3
    assert s["013"].hot_cold_score == 7
    assert s["034"].hot_cold_score == 6
    assert s["345"].hot_cold_score == 5
    assert s["347"].hot_cold_score == 5
    assert hot_cold_score(1, 3) == 5

def test_hit_score_relative_to_best():
    s = score((), (), (), {1: 3})
    assert s["111"].hit_score == 10
    assert s["000"].hit_score == 0
    assert s["100"].hit_score == pytest.approx(10 / 3)

def test_flags():
    s = score(HOT, COLD, KEY, {})
    assert s["000"].is_edge_value          # sum 0
    assert s["159"].is_edge_value          # span 8
    assert not s["258"].is_edge_value
    assert s["345"].contains_key_code is False
    assert s["305"].contains_key_code is True

def test_record_shape():
    c = score(HOT, COLD, KEY, {})["555"]
    rec = c.as_record()
    assert rec["number"] == "555" and rec["sum"] == 15 and rec["span"] == 0
    assert rec["sum_score"] == "9.17"
    assert rec["span_score"] == "3.00"
    assert rec["hit_score"] == "0.00"
    assert rec["contains_key_code"] == 0 and rec["is_edge_value"] == 1

def test_empty_frequency_table():
    s = score((), (), (), {})
    assert all(c.hit_score == 0 for c in s.values())
