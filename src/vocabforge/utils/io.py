from __future__ import annotations
import json
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

PathLike = Union[str, Path]
NULL_FORM = "[NULL]"

def ensure_dir(p: PathLike) -> Path:
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p

def read_text_files(paths: Iterable[PathLike], encoding: str = "utf-8") -> Iterator[str]:
    for p in paths:
        with open(p, "r", encoding=encoding, errors="ignore") as f:
            for line in f:
                yield line.rstrip("\n")

def write_vocab_tsv(entries: Iterable[Tuple[Optional[str], int]], path: PathLike) -> int:
    """One "form<TAB>freq" line per entry, in the order given. Returns lines written."""
    n = 0
    with open(path, "w", encoding="utf-8") as f:
        for form, freq in entries:
            f.write(f"{form if form is not None else NULL_FORM}\t{freq}\n")
            n += 1
    return n

def read_vocab_tsv(path: PathLike) -> List[Tuple[str, int]]:
    out: List[Tuple[str, int]] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.rstrip("\n")
            if not line:
                continue
            form, sep, freq = line.rpartition("\t")
            if not sep:
                raise ValueError(f"{path}:{lineno}: expected 'form<TAB>freq', got {line!r}")
            out.append((form, int(freq)))
    return out

def write_json(obj, path: PathLike) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)

def read_json(path: PathLike):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
