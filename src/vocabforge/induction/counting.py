from __future__ import annotations
from concurrent.futures import Executor, ThreadPoolExecutor
from contextlib import ExitStack
from dataclasses import dataclass
from typing import List, Optional

from .pairs import PairTable, pair_key
from .vocab import VocabEntry, VocabularyStore
from ..utils.logging import warn


@dataclass
class CountStats:
    entries: int = 0
    skipped: int = 0     # empty forms
    truncated: int = 0   # forms cut to max_symbols
    pairs: int = 0       # weighted pair occurrences

    def add(self, other: "CountStats") -> None:
        self.entries += other.entries
        self.skipped += other.skipped
        self.truncated += other.truncated
        self.pairs += other.pairs


def _count_entries(table: PairTable, entries: List[VocabEntry],
                   max_symbols: Optional[int]) -> CountStats:
    stats = CountStats()
    for entry in entries:
        stats.entries += 1
        symbols = entry.symbols
        if not symbols:
            stats.skipped += 1
            continue
        if max_symbols is not None and len(symbols) > max_symbols:
            symbols = symbols[:max_symbols]
            stats.truncated += 1
        for a, b in zip(symbols, symbols[1:]):
            table.increment(pair_key(a, b), tag=entry.id, by=entry.freq)
            stats.pairs += entry.freq
    return stats


def count_pairs(store: VocabularyStore, table: PairTable, workers: int = 1,
                max_symbols: Optional[int] = None,
                pool: Optional[Executor] = None) -> CountStats:
    """
    Emit every adjacent symbol pair of every entry into `table`, weighted by
    the entry's frequency. With workers > 1 the entries are split into
    contiguous slices counted on a thread pool; each entry is handled whole
    by a single worker. Pass `pool` to reuse one executor across passes.
    """
    entries = store.snapshot()
    workers = max(1, min(workers, len(entries) or 1))

    if workers == 1:
        stats = _count_entries(table, entries, max_symbols)
    else:
        step = -(-len(entries) // workers)
        slices = [entries[i:i + step] for i in range(0, len(entries), step)]
        stats = CountStats()
        with ExitStack() as stack:
            if pool is None:
                pool = stack.enter_context(ThreadPoolExecutor(max_workers=workers, thread_name_prefix="pair"))
            futures = [pool.submit(_count_entries, table, s, max_symbols) for s in slices]
            for f in futures:
                stats.add(f.result())

    if stats.truncated:
        warn(f"{stats.truncated} entries longer than {max_symbols} symbols were truncated for pair counting")
    return stats
