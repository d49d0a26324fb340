from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional

from .config import InductionConfig
from .corpus import build_vocabulary, seed_symbols
from .induction.loop import InductionResult, SubwordInducer
from .induction.vocab import VocabularyStore
from .utils.io import ensure_dir, write_json, write_vocab_tsv
from .utils.logging import info, ok


def populate(texts: Iterable[str], cfg: Optional[InductionConfig] = None) -> VocabularyStore:
    store = build_vocabulary(texts, cfg or InductionConfig())
    info(f"Initial vocabulary size: {len(store)}")
    return store


def induce_store(store: VocabularyStore, cfg: Optional[InductionConfig] = None) -> InductionResult:
    """Seed single-character symbols in place, then run the merge loop over `store`."""
    cfg = cfg or InductionConfig()
    seed_symbols(store)
    result = SubwordInducer.from_config(cfg).run(store)
    ok(f"{len(result.merges)} merges applied ({result.stop_reason.value})")
    return result


def induce(texts: Iterable[str], cfg: Optional[InductionConfig] = None) -> InductionResult:
    """Populate from raw text, seed single-character symbols, run the merge loop."""
    cfg = cfg or InductionConfig()
    return induce_store(populate(texts, cfg), cfg)


def save_result(result: InductionResult, out_dir: str | Path) -> Path:
    out = ensure_dir(out_dir)
    write_vocab_tsv(result.vocab, out / "vocab.txt")
    write_json(result.to_dict(), out / "induction.json")
    return out
