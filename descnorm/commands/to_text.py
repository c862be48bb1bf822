"""Komenda: descnorm to-text — HTML opisu → postać tekstowa."""

from __future__ import annotations

import argparse

from rich.console import Console

from descnorm._io import read_input
from html_parser.parser import html_to_plain_text

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    try:
        html = read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu wejścia:[/red] {e}")
        raise SystemExit(1)

    print(html_to_plain_text(html))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "to-text",
        help="Zamienia HTML opisu na tekst (nagłówki '#', listy '- ').",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Odczytuje HTML opisu i wypisuje jego postać tekstową, którą można
ponownie przepuścić przez 'descnorm render'.

Przykłady:
  descnorm to-text opis.html
  descnorm render oferta.txt | descnorm to-text
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK.html",
        nargs="?",
        default=None,
        help="Plik HTML (domyślnie / '-': stdin).",
    )
    p.set_defaults(func=run)
