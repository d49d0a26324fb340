from __future__ import annotations
from typing import Iterable, Optional, Tuple
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

_theme = Theme({
    "ok": "bold cyan",
    "warn": "bold yellow",
    "err": "bold red",
    "info": "bold magenta",
    "pair": "bold green",
})

console = Console(theme=_theme)

def set_quiet(quiet: bool = True) -> None:
    console.quiet = quiet

def info(msg: str) -> None:
    console.print(f"[info]•[/] {msg}")

def ok(msg: str) -> None:
    console.print(f"[ok]✓[/] {msg}")

def warn(msg: str) -> None:
    console.print(f"[warn]![/] {msg}")

def err(msg: str) -> None:
    console.print(f"[err]×[/] {msg}")

def merge(iteration: int, pair: Tuple[str, str], count: int) -> None:
    a, b = pair
    info(f"Subword merge {iteration}: pair [pair]\"{escape(a)} {escape(b)}\"[/] with frequency {count}")

def render_vocab(entries: Iterable[Tuple[Optional[str], int]], title: str = "Vocabulary") -> None:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("form")
    table.add_column("freq", justify="right")
    for i, (form, freq) in enumerate(entries):
        table.add_row(str(i), escape(form if form is not None else "[NULL]"), str(freq))
    console.print(table)
