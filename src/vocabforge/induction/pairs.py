from __future__ import annotations
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import ResourceExhaustion

SEP = " "  # symbol separator inside surface forms and pair keys


def pair_key(a: str, b: str) -> str:
    return f"{a}{SEP}{b}"


def split_pair_key(key: str) -> Tuple[str, str]:
    a, _, b = key.partition(SEP)
    return a, b


def djb2(key: str, modulo: int) -> int:
    """djb2 over code points, wrapped to 32 bits like an unsigned C int."""
    h = 5381
    for ch in key:
        h = ((h << 5) + h + ord(ch)) & 0xFFFFFFFF
    return h % modulo


@dataclass
class PairEntry:
    key: str
    count: int
    tag: int

    @property
    def pair(self) -> Tuple[str, str]:
        return split_pair_key(self.key)


class PairTable:
    """
    Sharded pair -> count map for one counting pass.

      • one lock per partition; an increment holds only its own partition's lock
      • each partition is a chain scanned linearly; first equal key wins, else append
      • find_max breaks count ties on the smaller key, so the winner never
        depends on partition layout or on which worker arrived first
    """

    def __init__(self, partition_count: int = 10000):
        if partition_count < 1:
            raise ValueError(f"partition_count must be >= 1, got {partition_count}")
        self.partition_count = partition_count
        try:
            self._chains: List[List[PairEntry]] = [[] for _ in range(partition_count)]
            self._locks = [threading.Lock() for _ in range(partition_count)]
        except MemoryError as e:
            raise ResourceExhaustion(f"cannot allocate {partition_count} partitions") from e
        self._destroyed = False

    def __enter__(self) -> "PairTable":
        return self

    def __exit__(self, *exc) -> None:
        if not self._destroyed:
            self.destroy()

    def _check(self) -> None:
        if self._destroyed:
            raise RuntimeError("PairTable already destroyed.")

    def partition_of(self, key: str) -> int:
        return djb2(key, self.partition_count)

    # ---------- Mutation ----------
    def increment(self, key: str, tag: int, by: int = 1) -> None:
        """Add `by` to key's count, inserting it with the given tag on first sight."""
        self._check()
        idx = self.partition_of(key)
        with self._locks[idx]:
            chain = self._chains[idx]
            for entry in chain:
                if entry.key == key:
                    entry.count += by
                    return
            try:
                chain.append(PairEntry(key=key, count=by, tag=tag))
            except MemoryError as e:
                raise ResourceExhaustion(f"cannot insert pair {key!r}") from e

    def destroy(self) -> None:
        self._check()
        for chain in self._chains:
            chain.clear()
        self._chains = []
        self._locks = []
        self._destroyed = True

    # ---------- Queries ----------
    def find_max(self) -> Optional[PairEntry]:
        """
        Highest-count entry, or None when the table is empty or all counts are zero.
        Ties go to the smallest key (code point order).
        """
        self._check()
        best: Optional[PairEntry] = None
        for idx, chain in enumerate(self._chains):
            if not chain:
                continue
            with self._locks[idx]:
                for entry in chain:
                    if entry.count <= 0:
                        continue
                    if (best is None or entry.count > best.count
                            or (entry.count == best.count and entry.key < best.key)):
                        best = entry
        return best

    def __iter__(self) -> Iterator[PairEntry]:
        """Entries in partition order, each chain in insertion order."""
        self._check()
        for chain in self._chains:
            yield from chain

    def __len__(self) -> int:
        self._check()
        return sum(len(c) for c in self._chains)

    def counts(self) -> Dict[str, int]:
        return {e.key: e.count for e in self}
