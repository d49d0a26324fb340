from __future__ import annotations
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, model_validator


class InductionConfig(BaseModel):
    # merge loop
    max_merges: int = Field(50, ge=0)
    min_pair_count: int = Field(2, ge=1)

    # pair table / counting pool
    partition_count: int = Field(10000, ge=1)
    worker_count: int = Field(1, ge=1)
    max_workers: int = Field(8, ge=1)

    # capacities
    max_vocab_size: int = Field(50000, ge=1)
    max_symbols: int = Field(256, ge=2)
    max_word_len: int = Field(127, ge=1)

    # segmentation
    lowercase: bool = True
    delimiters: str = " .,!?;:()\n"

    # output
    log_merges: bool = True
    output_dir: str = "artifacts/vocab"

    @model_validator(mode="after")
    def _check_workers(self) -> "InductionConfig":
        if self.worker_count > self.max_workers:
            raise ValueError(f"worker_count ({self.worker_count}) exceeds max_workers ({self.max_workers})")
        if " " not in self.delimiters:
            raise ValueError("delimiters must include the space character")
        return self

    @classmethod
    def from_yaml(cls, path: Union[str, Path], **overrides) -> "InductionConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
