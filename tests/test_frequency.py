from ninelayer.analytics.frequency import analyze, rank_digits


def _descending_history():
    # digit d appears 10 - d times
    s = "".join(str(d) * (10 - d) for d in range(10))
    return [s[i:i+3] for i in range(0, len(s), 3)]

def test_descending_frequencies():
    p = analyze(_descending_history())
    assert p.freq == {d: 10 - d for d in range(10)}
    assert p.hot == (0, 1, 2)
    assert set(p.cold) == {7, 8, 9}
    assert p.cold == (7, 8, 9)   # tail of the ranking, not re-sorted
    assert p.key == (0, 1, 2)

def test_key_count_independent_of_hot():
    p = analyze(_descending_history(), key_code_count=5)
    assert p.key == (0, 1, 2, 3, 4)
    assert p.hot == (0, 1, 2)

def test_ties_keep_digit_order():
    assert rank_digits({0: 1, 1: 1, 2: 1}) == [0, 1, 2]
    assert rank_digits({3: 1, 5: 2, 7: 2}) == [5, 7, 3]

def test_few_distinct_digits():
    p = analyze(["112"])
    assert p.freq == {1: 2, 2: 1}
    assert p.hot == (1, 2) and p.cold == (1, 2) and p.key == (1, 2)

def test_non_digits_skipped():
    p = analyze([{"number": "1,a,2,3"}])
    assert p.freq == {2: 1, 3: 1}

def test_empty_history():
    p = analyze([])
    assert p.freq == {} and p.hot == () and p.cold == () and p.key == ()
