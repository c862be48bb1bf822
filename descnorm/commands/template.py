"""Komenda: descnorm template — opis z pól formularza albo szkielet produktu."""

from __future__ import annotations

import argparse

from rich.console import Console

from data_model.descriptions import DescriptionDomain
from descnorm._config import get_default_domain, parse_domain
from descnorm._io import read_field
from normalizer import create_default_template, create_product_placeholder

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    if args.placeholder:
        print(create_product_placeholder())
        return

    try:
        domain = parse_domain(args.domain) if args.domain else get_default_domain()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    try:
        about_role   = read_field(args.about)
        requirements = read_field(args.requirements)
        benefits     = read_field(args.benefits)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu pola:[/red] {e}")
        raise SystemExit(1)

    if not (about_role or requirements or benefits):
        console.print("[yellow]Wszystkie pola puste — pusty kontener.[/yellow]")

    print(create_default_template(about_role, requirements, benefits, domain))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "template",
        help="Składa opis z pól: o roli, wymagania, benefity (z escapowaniem).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Buduje opis o stałym kształcie. Każda linia jest escapowana.
Wartość zaczynająca się od '@' jest ścieżką do pliku z treścią pola.

Przykłady:
  descnorm template --about "Backend developer" --requirements @wymagania.txt
  descnorm template --placeholder
        """,
    )
    p.add_argument("--about", metavar="TEKST", default=None, help="Opis roli (akapit).")
    p.add_argument("--requirements", metavar="TEKST", default=None, help="Wymagania, jedno na linię.")
    p.add_argument("--benefits", metavar="TEKST", default=None, help="Benefity, jeden na linię.")
    p.add_argument(
        "--domain",
        choices=[d.value for d in DescriptionDomain],
        default=None,
        help="Rodzaj opisu (domyślnie: $DESCNORM_DOMAIN albo job).",
    )
    p.add_argument(
        "--placeholder",
        action="store_true",
        help="Wypisz szkielet opisu produktu (ignoruje pozostałe opcje).",
    )
    p.set_defaults(func=run)
