from __future__ import annotations
from typing import List, Optional

from .pairs import SEP, PairEntry, PairTable
from .vocab import VocabularyStore


def select_best_pair(table: PairTable, min_count: int = 2) -> Optional[PairEntry]:
    """Most frequent pair, or None once nothing reaches `min_count`."""
    best = table.find_max()
    if best is None or best.count < min_count:
        return None
    return best


def merge_symbols(symbols: List[str], a: str, b: str) -> List[str]:
    # We scan and replace A B -> AB greedily left-to-right
    out: List[str] = []
    j = 0
    while j < len(symbols):
        if j < len(symbols) - 1 and symbols[j] == a and symbols[j + 1] == b:
            out.append(a + b)
            j += 2
        else:
            out.append(symbols[j])
            j += 1
    return out


def apply_merge(store: VocabularyStore, a: str, b: str) -> int:
    """Fuse every non-overlapping (a, b) in every entry. Returns how many entries changed."""
    changed = 0
    for i, entry in enumerate(store.snapshot()):
        symbols = entry.symbols
        if len(symbols) < 2:
            continue
        merged = merge_symbols(symbols, a, b)
        if len(merged) != len(symbols):
            store.rewrite_surface_form(i, SEP.join(merged))
            changed += 1
    return changed
