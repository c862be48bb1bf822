"""Komenda: descnorm render — plain text → strukturalny HTML opisu."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from data_model.descriptions import BulletList, DescriptionDomain, HeadingLevelMode
from descnorm._config import (
    get_default_domain,
    get_default_level_mode,
    parse_domain,
    parse_level_mode,
)
from descnorm._io import read_input
from normalizer import classify_paragraph, match_pattern, render_blocks, split_paragraphs

console = Console(stderr=True)

RULE_STYLE: dict[str, str] = {
    "heading":       "bold cyan",
    "caps-heading":  "cyan",
    "section-label": "yellow",
    "bullet-list":   "green",
    "paragraph":     "",
}


# ---------------------------------------------------------------------------
# Podgląd klasyfikacji w terminalu
# ---------------------------------------------------------------------------

def _show_table(paragraphs: list[str], level_mode: HeadingLevelMode) -> None:
    if not paragraphs:
        console.print("[yellow]Brak akapitów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("REGUŁA",  no_wrap=True)
    table.add_column("BLOK",    no_wrap=True, style="bold")
    table.add_column("LEN",     justify="right", no_wrap=True)
    table.add_column("TREŚĆ",   no_wrap=False, max_width=60)

    for i, paragraph in enumerate(paragraphs, start=1):
        pattern = match_pattern(paragraph)
        rule = pattern.name if pattern else "paragraph"
        block = classify_paragraph(paragraph, level_mode)
        if isinstance(block, BulletList):
            preview = " | ".join(block.items)
        else:
            preview = paragraph.replace("\n", " ⏎ ")
        table.add_row(
            str(i),
            Text(rule, style=RULE_STYLE.get(rule, "")),
            type(block).__name__,
            str(len(paragraph)),
            preview[:120],
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(paragraphs)} akapitów[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    try:
        domain: DescriptionDomain = (
            parse_domain(args.domain) if args.domain else get_default_domain()
        )
        level_mode: HeadingLevelMode = (
            parse_level_mode(args.levels) if args.levels else get_default_level_mode()
        )
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    try:
        text = read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu wejścia:[/red] {e}")
        raise SystemExit(1)

    paragraphs = split_paragraphs(text)
    blocks = [classify_paragraph(p, level_mode) for p in paragraphs]
    html = render_blocks(blocks, domain)

    if args.out:
        out_path = pathlib.Path(args.out)
        out_path.write_text(html, encoding="utf-8")
        console.print(f"[green]HTML:[/green] {out_path}  ({len(blocks)} bloków)")
    else:
        print(html)

    if args.show:
        _show_table(paragraphs, level_mode)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "render",
        help="Zamienia tekst opisu (plain text) na strukturalny HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dzieli tekst na akapity, klasyfikuje je (nagłówek, etykieta sekcji, lista,
akapit) i wypisuje HTML opisu. Tekst NIE jest escapowany.

Przykłady:
  descnorm render oferta.txt
  descnorm render kurs.txt --domain product --out kurs.html
  cat oferta.txt | descnorm render --show
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        nargs="?",
        default=None,
        help="Plik tekstowy (domyślnie / '-': stdin).",
    )
    p.add_argument(
        "--domain",
        choices=[d.value for d in DescriptionDomain],
        default=None,
        help="Rodzaj opisu (domyślnie: $DESCNORM_DOMAIN albo job).",
    )
    p.add_argument(
        "--levels",
        choices=[m.value for m in HeadingLevelMode],
        default=None,
        help="Liczenie poziomu nagłówków '#' (domyślnie: $DESCNORM_HEADING_LEVELS albo leading).",
    )
    p.add_argument(
        "--out",
        metavar="PLIK.html",
        default=None,
        help="Zapisz HTML do pliku zamiast na stdout.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę klasyfikacji akapitów.",
    )
    p.set_defaults(func=run)
