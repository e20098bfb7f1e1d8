import json
from datetime import datetime

from ninelayer.db.crud import (
    save_layer, get_layer_snapshot, get_layer_numbers, save_scores, get_score,
    insert_draws, latest_draws, insert_hit, hit_statistic, hit_history,
)
from ninelayer.db.models import LotteryDraw, HitRecord


def test_layer_snapshot_count_matches(session):
    snap = save_layer(session, "L6", ["123", "456", "789"])
    assert snap.count == len(json.loads(snap.numbers)) == 3
    save_layer(session, "L6", ["001"])
    assert get_layer_numbers(session, "L6") == ["001"]
    assert get_layer_snapshot(session, "L6").count == 1

def test_missing_layer_is_empty(session):
    assert get_layer_numbers(session, "L1") == []

def test_scores_upsert(session):
    rec = {'number': '555', 'sum': 15, 'span': 0, 'sum_score': '9.17', 'span_score': '3.00',
           'hot_cold_score': '5.00', 'hit_score': '0.00', 'total_score': '4.29',
           'contains_key_code': 0, 'is_edge_value': 1}
    save_scores(session, [rec])
    save_scores(session, [dict(rec, hit_score='10.00')])
    row = get_score(session, '555')
    assert row.hit_score == '10.00' and row.sum == 15

def test_latest_draws_newest_first(session):
    insert_draws(session, [
        LotteryDraw(number="111", game_time=datetime(2024, 3, 1)),
        LotteryDraw(number="222", game_time=datetime(2024, 3, 2)),
    ])
    assert [d.number for d in latest_draws(session, limit=1)] == ["222"]

def test_hit_statistic(session):
    assert hit_statistic(session).as_dict() == {'total': 0, 'hits': 0, 'rate': 0.0}
    for n, h in (("123", 1), ("456", 0), ("789", 0)):
        insert_hit(session, HitRecord(draw_number=n, is_hit=h))
    insert_hit(session, HitRecord(layer_id="L1", draw_number="000", is_hit=1))
    st = hit_statistic(session, "L6")
    assert (st.total, st.hits, st.rate) == (3, 1, 33.33)
    assert len(hit_history(session, "L6")) == 3
