from __future__ import annotations
import argparse
from pathlib import Path
from rich.table import Table

from vocabforge.config import InductionConfig
from vocabforge.pipeline import induce_store, populate, save_result
from vocabforge.utils.io import ensure_dir, read_text_files, write_vocab_tsv
from vocabforge.utils.logging import console, info, ok, render_vocab

SAMPLE_TEXT = (
    "Although post-structuralist critiques have problematized the notion of objective epistemology, "
    "especially within the context of late modernity’s fragmented narratives, the intertextual "
    "entanglement of discourse, power, and subjectivity remains a locus of theoretical contestation. "
    "Consequently, any hermeneutic attempt at deconstructing the meta-narratives embedded within "
    "institutionalized knowledge systems necessitates a nuanced understanding of semiotic multiplicity "
    "and ontological ambiguity."
)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default="")
    ap.add_argument("--input", nargs="*", default=[], help="text files; built-in sample paragraph if omitted")
    ap.add_argument("--max_merges", type=int)
    ap.add_argument("--workers", type=int)
    ap.add_argument("--partitions", type=int)
    ap.add_argument("--out_dir")
    args = ap.parse_args()

    overrides = dict(max_merges=args.max_merges, worker_count=args.workers,
                     partition_count=args.partitions, output_dir=args.out_dir)
    if args.config:
        cfg = InductionConfig.from_yaml(args.config, **overrides)
    else:
        cfg = InductionConfig(**{k: v for k, v in overrides.items() if v is not None})

    texts = list(read_text_files(args.input)) if args.input else [SAMPLE_TEXT]
    info(f"Original text length: {sum(len(t) for t in texts)}")

    table = Table(title="Induction")
    for k in ["max_merges", "partition_count", "worker_count", "min_pair_count", "max_vocab_size"]:
        table.add_row(k, str(getattr(cfg, k)))
    console.print(table)

    out = ensure_dir(cfg.output_dir)
    store = populate(texts, cfg)
    render_vocab(store.items(), title="Initial vocabulary")
    write_vocab_tsv(store.items(), out / "init_vocab.txt")

    result = induce_store(store, cfg)
    render_vocab(result.vocab, title="Final vocabulary (after subword merges)")
    save_result(result, out)
    ok(f"Vocabulary saved to {Path(out) / 'vocab.txt'} ({len(result.merges)} merges, {result.stop_reason.value})")

if __name__ == "__main__":
    main()
