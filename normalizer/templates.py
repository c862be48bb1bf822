"""
normalizer/templates.py — szablony opisu o stałym kształcie.

create_default_template() składa opis z trzech pól formularza (o roli,
wymagania, benefity). W odróżnieniu od generate_from_plain_text() każda
linia jest escapowana przed wstawieniem do HTML.
"""

from __future__ import annotations

import html
import re

from data_model.descriptions import DescriptionDomain
from normalizer.block_patterns import strip_bullet_marker
from normalizer.renderer import CLOSE_CONTAINER, open_container
from normalizer.splitter import split_lines

# Każdy rodzaj końca linii (jak nl2br): \r\n, \n\r, \n, \r.
_LINE_BREAK_RE = re.compile(r"(\r\n|\n\r|\n|\r)")

_ABOUT_ROLE_HEADING = "Job Description"
_REQUIREMENTS_LABEL = "Requirements:"
_BENEFITS_LABEL     = "Benefits:"

_PRODUCT_PLACEHOLDER: list[tuple[str, list[str]]] = [
    ("What You'll Learn:", ["Key concept 1", "Key concept 2", "Key concept 3"]),
    ("Requirements:", ["Basic understanding required", "Access to necessary tools/software"]),
]
_PRODUCT_OVERVIEW = "This course/book provides comprehensive training on the subject..."


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def nl2br(text: str) -> str:
    """Wstawia <br /> przed każdym końcem linii (sam koniec linii zostaje)."""
    return _LINE_BREAK_RE.sub(r"<br />\1", text)


def _escaped_list(text: str) -> str:
    items = (_escape(strip_bullet_marker(line)) for line in split_lines(text))
    return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"


def create_default_template(
    about_role: str = "",
    requirements: str = "",
    benefits: str = "",
    domain: DescriptionDomain = DescriptionDomain.JOB,
) -> str:
    """
    Opis z trzech pól; puste pole → brak całej sekcji.

    Kolejność sekcji jest stała:
      h2 "Job Description" + <p> (escape + nl2br)
      h3 "Requirements:"   + <ul> (escape, bez markerów listy)
      h3 "Benefits:"       + <ul>
    """
    parts = [open_container(domain)]

    if about_role:
        parts.append(f"<h2>{_ABOUT_ROLE_HEADING}</h2>")
        parts.append(f"<p>{nl2br(_escape(about_role))}</p>")

    if requirements:
        parts.append(f"<h3>{_REQUIREMENTS_LABEL}</h3>")
        parts.append(_escaped_list(requirements))

    if benefits:
        parts.append(f"<h3>{_BENEFITS_LABEL}</h3>")
        parts.append(_escaped_list(benefits))

    parts.append(CLOSE_CONTAINER)
    return "".join(parts)


def create_product_placeholder() -> str:
    """Szkielet opisu produktu (kurs / e-book) do uzupełnienia w edytorze."""
    parts = [
        open_container(DescriptionDomain.PRODUCT),
        "<h2>Overview</h2>",
        f"<p>{_PRODUCT_OVERVIEW}</p>",
    ]
    for label, items in _PRODUCT_PLACEHOLDER:
        parts.append(f"<h3>{label}</h3>")
        parts.append("<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>")
    parts.append(CLOSE_CONTAINER)
    return "".join(parts)
