"""
normalizer/renderer.py — renderowanie bloków opisu do HTML.

Ścieżka heurystyczna (generate_from_plain_text) NIE escapuje tekstu:
użytkownik może wkleić gotowe fragmenty HTML i mają one przejść bez zmian.
To oznacza ryzyko XSS — wynik trzeba przepuścić przez sanitizer przed
wyświetleniem jako zaufany HTML. Ścieżka szablonu (templates.py) escapuje.
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model.descriptions import (
    BulletList,
    ClassifiedBlock,
    DescriptionDomain,
    Heading,
    HeadingLevelMode,
    Paragraph,
    SectionLabel,
)
from normalizer.classifier import classify_text


def open_container(domain: DescriptionDomain) -> str:
    return f'<div class="{domain.css_class}">'


CLOSE_CONTAINER = "</div>"


def render_block(block: ClassifiedBlock) -> str:
    match block:
        case Heading(level=level, text=text):
            return f"<h{level}>{text}</h{level}>"
        case SectionLabel(text=text):
            return f"<h3>{text}</h3>"
        case BulletList(items=items):
            return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"
        case Paragraph(text=text):
            return f"<p>{text}</p>"
    raise TypeError(f"Nieznany typ bloku: {type(block).__name__}")


def render_blocks(
    blocks: Iterable[ClassifiedBlock],
    domain: DescriptionDomain = DescriptionDomain.JOB,
) -> str:
    """Skleja fragmenty bloków (bez zmiany kolejności) w jednym kontenerze."""
    body = "".join(render_block(b) for b in blocks)
    return open_container(domain) + body + CLOSE_CONTAINER


def generate_from_plain_text(
    plain_text: str,
    domain: DescriptionDomain = DescriptionDomain.JOB,
    level_mode: HeadingLevelMode = HeadingLevelMode.LEADING,
) -> str:
    """
    Zamienia wklejony tekst na strukturalny HTML.

    Nie rzuca wyjątków dla żadnego napisu; pusty tekst → pusty kontener.
    """
    return render_blocks(classify_text(plain_text, level_mode), domain)


def resolve_description_html(
    description: str | None,
    description_html: str | None,
    domain: DescriptionDomain = DescriptionDomain.JOB,
    level_mode: HeadingLevelMode = HeadingLevelMode.LEADING,
) -> str | None:
    """
    HTML opisu do zapisania przy tworzeniu/edycji ogłoszenia.

    - description_html z edytora rich-text ma pierwszeństwo
    - w przeciwnym razie HTML generowany z description (plain text)
    - brak obu → description_html bez zmian (może być None)
    """
    if description_html:
        return description_html
    if description:
        return generate_from_plain_text(description, domain, level_mode)
    return description_html
