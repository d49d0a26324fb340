from vocabforge.induction import (
    PairTable, VocabularyStore, apply_merge, count_pairs, merge_symbols, select_best_pair,
)

def test_non_overlapping_left_to_right():
    assert merge_symbols(["A", "B", "A", "B"], "A", "B") == ["AB", "AB"]
    assert merge_symbols(["a", "a", "a"], "a", "a") == ["aa", "a"]
    assert merge_symbols(["x", "A", "B", "B"], "A", "B") == ["x", "AB", "B"]
    assert merge_symbols(["A"], "A", "B") == ["A"]

def test_select_best_pair(toy_counts):
    with PairTable(10000) as t:
        count_pairs(VocabularyStore.from_counts(toy_counts), t)
        best = select_best_pair(t)
        assert (best.pair, best.count) == (("e", "s"), 9)
        assert select_best_pair(t, min_count=10) is None

def test_select_stops_below_two():
    with PairTable(8) as t:
        t.increment("a b", tag=0)
        assert select_best_pair(t) is None

def test_apply_merge_conserves_ids_and_freqs(toy_counts):
    store = VocabularyStore.from_counts(toy_counts)
    before = [(e.id, e.freq, len(e.symbols)) for e in store]
    changed = apply_merge(store, "e", "s")
    after = [(e.id, e.freq, len(e.symbols)) for e in store]

    assert changed == 2
    assert len(after) == len(before)
    for (i0, f0, n0), (i1, f1, n1), form in zip(before, after, toy_counts):
        assert (i0, f0) == (i1, f1)
        assert n0 - n1 == (1 if "e s" in form else 0)
    assert store.to_dict() == {"l o w": 5, "l o w e r": 2, "n e w es t": 6, "w i d es t": 3}

def test_apply_merge_without_occurrence_is_noop(toy_counts):
    store = VocabularyStore.from_counts(toy_counts)
    assert apply_merge(store, "q", "z") == 0
    assert store.to_dict() == toy_counts
