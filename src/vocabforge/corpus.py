from __future__ import annotations
import re
from typing import Iterable, List, Optional

from .config import InductionConfig
from .induction.errors import CapacityExceeded
from .induction.pairs import SEP
from .induction.vocab import VocabularyStore
from .utils.logging import warn

DEFAULT_DELIMITERS = " .,!?;:()\n"


def split_words(text: str, delimiters: str = DEFAULT_DELIMITERS, lowercase: bool = True) -> List[str]:
    """Split on any delimiter character, dropping empty pieces."""
    if lowercase:
        text = text.lower()
    return [w for w in re.split(f"[{re.escape(delimiters)}]+", text) if w]


def build_vocabulary(texts: Iterable[str], cfg: Optional[InductionConfig] = None) -> VocabularyStore:
    """One entry per distinct word in first-seen order; frequency counts occurrences."""
    cfg = cfg or InductionConfig()

    store = VocabularyStore(max_size=cfg.max_vocab_size)
    dropped = 0
    truncated = 0
    for text in texts:
        for word in split_words(text, cfg.delimiters, cfg.lowercase):
            if len(word) > cfg.max_word_len:
                word = word[:cfg.max_word_len]
                truncated += 1
            try:
                store.upsert(word)
            except CapacityExceeded:
                dropped += 1
    if truncated:
        warn(f"{truncated} words longer than {cfg.max_word_len} characters were truncated")
    if dropped:
        warn(f"vocabulary full at {cfg.max_vocab_size} entries; dropped {dropped} new word occurrences")
    return store


def seed_symbols(store: VocabularyStore) -> None:
    """Rewrite each bare word as space-separated single-character symbols."""
    for i, entry in enumerate(store.snapshot()):
        store.rewrite_surface_form(i, SEP.join(entry.form))
