from .errors import CapacityExceeded, InductionError, ResourceExhaustion
from .pairs import PairEntry, PairTable, djb2, pair_key, split_pair_key
from .vocab import VocabEntry, VocabularyStore
from .counting import CountStats, count_pairs
from .merge import apply_merge, merge_symbols, select_best_pair
from .loop import InductionResult, LoopState, MergeRecord, StopReason, SubwordInducer
