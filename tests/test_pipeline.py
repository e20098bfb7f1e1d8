from ninelayer.analytics.pipeline import run_analysis
from ninelayer.sources import sample_draws


def test_deterministic():
    draws = sample_draws(80, seed=5)
    a, b = run_analysis(draws), run_analysis(list(draws))
    assert a.scored == b.scored
    assert a.layers == b.layers
    assert (a.hot, a.cold, a.key, a.freq) == (b.hot, b.cold, b.key, b.freq)

def test_no_draws():
    res = run_analysis([])
    assert res.freq == {} and res.hot == res.cold == res.key == ()
    assert len(res.scored) == 1000
    assert all(c.as_record()['hit_score'] == "0.00" for c in res.scored.values())

def test_key_code_count_passed_through():
    res = run_analysis(sample_draws(50, seed=2), key_code_count=5)
    assert len(res.key) == 5
