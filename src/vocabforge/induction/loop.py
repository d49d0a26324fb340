from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from contextlib import ExitStack
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .counting import count_pairs
from .merge import apply_merge, select_best_pair
from .pairs import PairEntry, PairTable
from .vocab import VocabularyStore
from ..utils import logging as log


class LoopState(str, Enum):
    COUNTING = "counting"
    SELECTING = "selecting"
    MERGING = "merging"
    DONE = "done"


class StopReason(str, Enum):
    BUDGET = "budget"            # max_merges reached
    NO_PROGRESS = "no_progress"  # best pair below min_pair_count


@dataclass
class MergeRecord:
    iteration: int
    pair: Tuple[str, str]
    count: int

    def to_dict(self):
        return {"iteration": self.iteration, "pair": list(self.pair), "count": self.count}

    @staticmethod
    def from_dict(d: dict) -> "MergeRecord":
        return MergeRecord(iteration=d["iteration"], pair=tuple(d["pair"]), count=d["count"])


@dataclass
class InductionResult:
    vocab: List[Tuple[str, int]]
    merges: List[MergeRecord]
    stop_reason: StopReason
    iterations: int

    def to_dict(self):
        return {
            "vocab": [list(v) for v in self.vocab],
            "merges": [m.to_dict() for m in self.merges],
            "stop_reason": self.stop_reason.value,
            "iterations": self.iterations,
        }

    @staticmethod
    def from_dict(d: dict) -> "InductionResult":
        return InductionResult(
            vocab=[(form, int(freq)) for form, freq in d["vocab"]],
            merges=[MergeRecord.from_dict(m) for m in d["merges"]],
            stop_reason=StopReason(d["stop_reason"]),
            iterations=d["iterations"],
        )


@dataclass
class SubwordInducer:
    """
    Greedy pair-merge loop over a seeded VocabularyStore.

      • each iteration builds a fresh PairTable, counts, selects, merges, then drops the table
      • the store is only rewritten in MERGING, never while a count is running
      • stops after `max_merges` merges (checked before a table is built) or when
        the best pair is below `min_pair_count`
      • counting workers share one thread pool for the whole run
    """
    max_merges: int = 50
    partition_count: int = 10000
    worker_count: int = 1
    min_pair_count: int = 2
    max_symbols: Optional[int] = 256
    log_merges: bool = True

    state: LoopState = field(default=LoopState.DONE, init=False)
    merges: List[MergeRecord] = field(default_factory=list, init=False)

    @classmethod
    def from_config(cls, cfg) -> "SubwordInducer":
        return cls(
            max_merges=cfg.max_merges,
            partition_count=cfg.partition_count,
            worker_count=cfg.worker_count,
            min_pair_count=cfg.min_pair_count,
            max_symbols=cfg.max_symbols,
            log_merges=cfg.log_merges,
        )

    def run(self, store: VocabularyStore) -> InductionResult:
        self.state = LoopState.COUNTING
        self.merges = []
        iteration = 0
        table: Optional[PairTable] = None
        best: Optional[PairEntry] = None
        reason = StopReason.NO_PROGRESS

        with ExitStack() as stack:
            pool = None
            if self.worker_count > 1:
                pool = stack.enter_context(
                    ThreadPoolExecutor(max_workers=self.worker_count, thread_name_prefix="pair"))
            try:
                while self.state is not LoopState.DONE:
                    if self.state is LoopState.COUNTING:
                        if iteration >= self.max_merges:
                            reason = StopReason.BUDGET
                            self.state = LoopState.DONE
                            continue
                        table = PairTable(self.partition_count)
                        count_pairs(store, table, workers=self.worker_count,
                                    max_symbols=self.max_symbols, pool=pool)
                        self.state = LoopState.SELECTING

                    elif self.state is LoopState.SELECTING:
                        best = select_best_pair(table, self.min_pair_count)
                        if best is None:
                            if self.log_merges:
                                log.info("No more pairs to merge. Stopping merges.")
                            self.state = LoopState.DONE
                        else:
                            record = MergeRecord(iteration=iteration, pair=best.pair, count=best.count)
                            self.merges.append(record)
                            if self.log_merges:
                                log.merge(iteration + 1, record.pair, record.count)
                            self.state = LoopState.MERGING

                    elif self.state is LoopState.MERGING:
                        a, b = best.pair
                        apply_merge(store, a, b)
                        table.destroy()
                        table = None
                        iteration += 1
                        self.state = LoopState.COUNTING
            finally:
                if table is not None:
                    table.destroy()

        return InductionResult(
            vocab=list(store.items()),
            merges=list(self.merges),
            stop_reason=reason,
            iterations=iteration,
        )
