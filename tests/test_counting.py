from concurrent.futures import ThreadPoolExecutor
from vocabforge.induction import PairTable, VocabularyStore, count_pairs

def _count(store, **kw):
    with PairTable(97) as t:
        stats = count_pairs(store, t, **kw)
        return t.counts(), stats

def test_pairs_weighted_by_frequency(toy_counts):
    counts, stats = _count(VocabularyStore.from_counts(toy_counts))
    assert counts["e s"] == 9
    assert counts["s t"] == 9
    assert counts["w e"] == 8
    assert counts["l o"] == 7
    assert counts["e r"] == 2
    assert stats.entries == 4
    assert stats.pairs == sum(counts.values())

def test_short_and_empty_entries_contribute_nothing():
    store = VocabularyStore.from_counts({"": 3, "a": 4, "a b": 1})
    counts, stats = _count(store)
    assert counts == {"a b": 1}
    assert stats.skipped == 1

def test_counting_twice_is_identical(toy_counts):
    store = VocabularyStore.from_counts(toy_counts)
    first, _ = _count(store)
    second, _ = _count(store)
    assert first == second

def test_worker_count_does_not_change_counts():
    store = VocabularyStore()
    for i in range(200):
        word = "abcdefg"[i % 7:] + "xyz"[: i % 3]
        store.upsert(" ".join(word), count=1 + i % 5)
    sequential, _ = _count(store, workers=1)
    for workers in (2, 3, 8):
        parallel, _ = _count(store, workers=workers)
        assert parallel == sequential

def test_long_forms_truncated_to_max_symbols():
    store = VocabularyStore.from_counts({"a b c d e": 2})
    counts, stats = _count(store, max_symbols=3)
    assert counts == {"a b": 2, "b c": 2}
    assert stats.truncated == 1

def test_truncation_warns_once_per_pass(warnings_from):
    store = VocabularyStore.from_counts({"a b c d e": 2, "v w x y z": 1, "a b": 1})
    with PairTable(11) as t:
        stats, lines = warnings_from(count_pairs, store, t, max_symbols=3)
    assert stats.truncated == 2
    assert len(lines) == 1
    assert "2 entries" in lines[0]

def test_no_warning_when_nothing_truncated(warnings_from, toy_counts):
    with PairTable(11) as t:
        _, lines = warnings_from(count_pairs, VocabularyStore.from_counts(toy_counts), t)
    assert lines == []

def test_shared_pool_reused_across_passes(toy_counts):
    store = VocabularyStore.from_counts(toy_counts)
    sequential, _ = _count(store)
    with ThreadPoolExecutor(max_workers=3) as pool:
        for _ in range(3):
            with PairTable(97) as t:
                count_pairs(store, t, workers=3, pool=pool)
                assert t.counts() == sequential
