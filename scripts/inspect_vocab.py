from __future__ import annotations
import argparse
from rich.markup import escape
from vocabforge.induction import InductionResult
from vocabforge.utils.io import read_json
from vocabforge.utils.logging import info, ok, render_vocab

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--result", default="artifacts/vocab/induction.json")
    ap.add_argument("--top", type=int, default=20, help="merges to list")
    args = ap.parse_args()

    result = InductionResult.from_dict(read_json(args.result))
    info(f"stop reason: {result.stop_reason.value}, iterations: {result.iterations}")
    for m in result.merges[:args.top]:
        a, b = (escape(s) for s in m.pair)
        info(f"merge {m.iteration + 1}: {a} + {b} -> {a}{b} ({m.count})")
    render_vocab(result.vocab, title="Induced vocabulary")
    ok(f"{len(result.vocab)} entries")

if __name__ == "__main__":
    main()
