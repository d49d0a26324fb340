from .config import InductionConfig
from .corpus import build_vocabulary, seed_symbols, split_words
from .induction import (
    CapacityExceeded, InductionError, InductionResult, LoopState, MergeRecord,
    PairEntry, PairTable, ResourceExhaustion, StopReason, SubwordInducer,
    VocabEntry, VocabularyStore,
)
from .pipeline import induce, induce_store, populate, save_result
