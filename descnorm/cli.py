"""
descnorm — narzędzie CLI normalizatora opisów ofert pracy i produktów.

Użycie:
  descnorm <komenda> [opcje]

Komendy:
  render     Zamienia tekst opisu (plain text) na strukturalny HTML.
  template   Składa opis z pól formularza (o roli, wymagania, benefity).
  to-text    Zamienia HTML opisu z powrotem na tekst.

Zmienne środowiskowe:
  DESCNORM_DOMAIN          job | product (domyślnie: job)
  DESCNORM_HEADING_LEVELS  leading | count (domyślnie: leading)
"""

from __future__ import annotations

import argparse
import sys

from descnorm.commands import render as cmd_render
from descnorm.commands import template as cmd_template
from descnorm.commands import to_text as cmd_to_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="descnorm",
        description="descnorm — normalizacja opisów ofert pracy i produktów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="descnorm 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_render.add_parser(subparsers)
    cmd_template.add_parser(subparsers)
    cmd_to_text.add_parser(subparsers)

    return parser


def _force_utf8() -> None:
    # Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby znaki
    # spoza ASCII (np. '•') były wypisywane poprawnie.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> None:
    _force_utf8()
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
