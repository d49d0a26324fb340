import pytest
from vocabforge.induction import CapacityExceeded, VocabularyStore

def test_upsert_assigns_ids_in_first_seen_order():
    s = VocabularyStore()
    for w in ["the", "cat", "the", "sat", "the"]:
        s.upsert(w)
    assert [(e.form, e.id, e.freq) for e in s] == [("the", 0, 3), ("cat", 1, 1), ("sat", 2, 1)]
    assert s.size() == len(s) == 3

def test_from_counts_keeps_given_frequencies(toy_counts):
    s = VocabularyStore.from_counts(toy_counts)
    assert s.to_dict() == toy_counts
    assert s.entry_at(2).symbols == ["n", "e", "w", "e", "s", "t"]

def test_capacity_exceeded_only_for_new_forms():
    s = VocabularyStore(max_size=2)
    s.upsert("a"); s.upsert("b")
    with pytest.raises(CapacityExceeded) as ei:
        s.upsert("c")
    assert ei.value.limit == 2
    # existing forms still count
    assert s.upsert("a").freq == 2
    assert len(s) == 2

def test_rewrite_keeps_id_and_freq():
    s = VocabularyStore.from_counts({"l o w": 5, "n e w": 2})
    s.rewrite_surface_form(0, "lo w")
    e = s[0]
    assert (e.form, e.id, e.freq) == ("lo w", 0, 5)
    assert s.find("l o w") is None
    assert s.find("lo w") is e
    assert s.upsert("lo w").freq == 6

def test_symbols_skip_empty_pieces():
    s = VocabularyStore.from_counts({"": 1, "a  b ": 1})
    assert s[0].symbols == []
    assert s[1].symbols == ["a", "b"]

def test_bad_index_and_count():
    s = VocabularyStore()
    with pytest.raises(IndexError):
        s.entry_at(0)
    with pytest.raises(ValueError):
        s.upsert("x", count=0)

def test_allocation_failure_becomes_resource_exhaustion(monkeypatch):
    from vocabforge.induction import ResourceExhaustion
    from vocabforge.induction import vocab as vocab_mod

    s = VocabularyStore()
    s.upsert("a")

    def no_memory(**kw):
        raise MemoryError

    monkeypatch.setattr(vocab_mod, "VocabEntry", no_memory)
    with pytest.raises(ResourceExhaustion):
        s.upsert("b")
    # existing forms never allocate
    assert s.upsert("a").freq == 2
    assert len(s) == 1
    assert s.find("b") is None
