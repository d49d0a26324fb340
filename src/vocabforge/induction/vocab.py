from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .errors import CapacityExceeded, ResourceExhaustion
from .pairs import SEP


@dataclass
class VocabEntry:
    form: str
    id: int
    freq: int

    @property
    def symbols(self) -> List[str]:
        # empty pieces come from stray separators; drop them like strtok would
        return [s for s in self.form.split(SEP) if s]


class VocabularyStore:
    """
    Insertion-ordered surface form -> (id, freq).

    Ids equal insertion position and never change. Merges only rewrite
    forms; entries are never removed. A form -> index map stands in for the
    linear lookup and always points at the first-seen entry.
    """

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = max_size
        self._entries: List[VocabEntry] = []
        self._index: Dict[str, int] = {}

    @classmethod
    def from_counts(cls, counts: Union[Mapping[str, int], Iterable[Tuple[str, int]]],
                    max_size: Optional[int] = None) -> "VocabularyStore":
        store = cls(max_size=max_size)
        items = counts.items() if hasattr(counts, "items") else counts
        for form, freq in items:
            store.upsert(form, count=freq)
        return store

    # ---------- Mutation ----------
    def upsert(self, form: str, count: int = 1) -> VocabEntry:
        """Bump an existing form's frequency, or append it with id = current size."""
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        idx = self._index.get(form)
        if idx is not None:
            entry = self._entries[idx]
            entry.freq += count
            return entry
        if self.max_size is not None and len(self._entries) >= self.max_size:
            raise CapacityExceeded("vocabulary", len(self._entries) + 1, self.max_size)
        try:
            entry = VocabEntry(form=form, id=len(self._entries), freq=count)
            self._entries.append(entry)
            self._index[form] = entry.id
        except MemoryError as e:
            raise ResourceExhaustion("cannot grow vocabulary") from e
        return entry

    def rewrite_surface_form(self, index: int, new_form: str) -> None:
        entry = self.entry_at(index)
        if new_form == entry.form:
            return
        if self._index.get(entry.form) == index:
            del self._index[entry.form]
        entry.form = new_form
        self._index.setdefault(new_form, index)

    # ---------- Access ----------
    def size(self) -> int:
        return len(self._entries)

    def entry_at(self, index: int) -> VocabEntry:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"vocabulary index {index} out of range (size {len(self._entries)})")
        return self._entries[index]

    def find(self, form: str) -> Optional[VocabEntry]:
        idx = self._index.get(form)
        return None if idx is None else self._entries[idx]

    def items(self) -> Iterator[Tuple[str, int]]:
        """Read-only (form, freq) view in store order."""
        for e in self._entries:
            yield e.form, e.freq

    def snapshot(self) -> List[VocabEntry]:
        return list(self._entries)

    def total_symbols(self) -> int:
        return sum(len(e.symbols) for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[VocabEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> VocabEntry:
        return self.entry_at(index)

    def to_dict(self) -> Dict[str, int]:
        return dict(self.items())
