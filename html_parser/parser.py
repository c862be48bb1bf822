"""html_parser/parser.py — odczyt wygenerowanego opisu HTML z powrotem do bloków."""

from __future__ import annotations

import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, PageElement, ProcessingInstruction

from data_model.descriptions import (
    BlockList,
    BulletList,
    ClassifiedBlock,
    Heading,
    Paragraph,
    SectionLabel,
)

# h1, h2, … bez górnej granicy (renderer nie przycina poziomu do 6)
_HEADING_TAG_RE = re.compile(r"h([1-9]\d*)")
_LIST_TAGS = {"ul", "ol"}

# Tagi blokowe (determinują granice bloków treści)
_BLOCK_TAGS: set[str] = {
    "div", "p", "article", "section", "main", "aside", "nav",
    "header", "footer", "blockquote",
    "li", "ul", "ol",
    "td", "th", "tr", "table",
    "form", "fieldset", "details", "summary",
}

# Tagi zawierające szum (nie treść)
_NOISE_TAGS = {"script", "style", "noscript"}


def _heading_level(name: str | None) -> int | None:
    m = _HEADING_TAG_RE.fullmatch(name or "")
    return int(m.group(1)) if m else None


def _is_block(node: PageElement) -> bool:
    return isinstance(node, Tag) and (
        node.name in _BLOCK_TAGS or _heading_level(node.name) is not None
    )


def _collect_text(node: PageElement, parts: list[str]) -> None:
    if isinstance(node, (Comment, Declaration, Doctype, ProcessingInstruction)):
        return
    if isinstance(node, NavigableString):
        parts.append(str(node).replace("\n", " "))
    elif isinstance(node, Tag):
        if node.name == "br":
            parts.append("\n")
            return
        for child in node.children:
            _collect_text(child, parts)


def _text_with_breaks(nodes: Iterable[PageElement]) -> str:
    """
    Tekst węzłów; <br> → \n, pozostałe tagi spłaszczone.

    Znaki nowej linii w samym źródle HTML to zwykłe białe znaki. Puste linie
    są usuwane, żeby akapit nie rozpadł się przy ponownej normalizacji.
    """
    parts: list[str] = []
    for node in nodes:
        _collect_text(node, parts)
    lines = "".join(parts).split("\n")
    return "\n".join(line.strip() for line in lines if line.strip())


def _extract_blocks(root: Tag) -> BlockList:
    """
    Przechodzi drzewo DOM i zwraca bloki opisu w kolejności dokumentu.

    - h1, h2, …: Heading; h3 zakończony dwukropkiem → SectionLabel
    - ul/ol:     BulletList z tekstów <li> (bez rekurencji w zagnieżdżone listy)
    - p:         Paragraph
    - kontener (div, section itp.): rekurencja w blokowe dzieci; ciągi
      tekstu i tagów inline między nimi → Paragraph
    """
    blocks: BlockList = []

    def add_paragraph(nodes: list[PageElement]) -> None:
        text = _text_with_breaks(nodes)
        if text:
            blocks.append(Paragraph(text=text))

    def walk(el: Tag) -> None:
        name = el.name
        if name in _NOISE_TAGS:
            return
        level = _heading_level(name)
        if level is not None:
            text = el.get_text(" ", strip=True)
            if not text:
                return
            if level == 3 and text.endswith(":"):
                blocks.append(SectionLabel(text=text))
            else:
                blocks.append(Heading(level=level, text=text))
            return
        if name in _LIST_TAGS:
            items = tuple(
                li.get_text(" ", strip=True)
                for li in el.find_all("li", recursive=False)
            )
            if items:
                blocks.append(BulletList(items=items))
            return
        if name == "p":
            add_paragraph([el])
            return

        inline: list[PageElement] = []
        for child in el.children:
            if _is_block(child):
                add_paragraph(inline)
                inline = []
                walk(child)  # type: ignore[arg-type]
            else:
                inline.append(child)
        add_paragraph(inline)

    walk(root)
    return blocks


def _block_to_text(block: ClassifiedBlock) -> str:
    match block:
        case Heading(level=level, text=text):
            return "#" * level + " " + text
        case SectionLabel(text=text):
            return text
        case BulletList(items=items):
            return "\n".join(f"- {item}" for item in items)
        case Paragraph(text=text):
            return text
    raise TypeError(f"Nieznany typ bloku: {type(block).__name__}")


def parse_description_html(html: str) -> BlockList:
    """Parsuje HTML opisu (np. description_html z bazy) do listy bloków."""
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all(sorted(_NOISE_TAGS)):
        tag.decompose()

    return _extract_blocks(soup)


def blocks_to_plain_text(blocks: BlockList) -> str:
    """
    Postać tekstowa bloków, zgodna z regułami klasyfikatora:
      Heading(2, "X")   → "## X"
      BulletList(a, b)  → "- a\n- b"
    Bloki rozdzielone pustą linią.
    """
    return "\n\n".join(_block_to_text(b) for b in blocks)


def html_to_plain_text(html: str) -> str:
    return blocks_to_plain_text(parse_description_html(html))
