"""
normalizer/block_patterns.py — reguły rozpoznawania roli akapitu.

Każdy BlockPattern zawiera:
  - name    : nazwa reguły (do podglądu w CLI i testów)
  - matches : predykat na przyciętym, niepustym akapicie
  - build   : konstruktor bloku dla dopasowanego akapitu

Reguły są testowane w kolejności; pierwsza pasująca wygrywa.
Akapit, który nie pasuje do żadnej, staje się Paragraph.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Callable

from data_model.descriptions import (
    BulletList,
    ClassifiedBlock,
    Heading,
    HeadingLevelMode,
    SectionLabel,
)
from normalizer.splitter import split_lines

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# "## Tytuł" — znaczniki, opcjonalne białe znaki, reszta akapitu jako tekst.
_HEADING_RE = re.compile(r"^(#+)\s*(.+)$", re.DOTALL)

# Nagłówek pisany wersalikami musi być krótszy niż tyle znaków.
_CAPS_HEADING_MAX_LEN = 100

# Ogon etykiety sekcji ("equirements:") — brak dwukropka aż do ostatniego znaku.
_LABEL_TAIL_RE = re.compile(r"[^:]+:")

# Dowolna linia zaczynająca się markerem listy (-, •, *).
_BULLET_LINE_RE = re.compile(r"^[-•*]\s*(.+)$", re.MULTILINE)

# Pojedynczy marker listy z białymi znakami na początku linii.
_BULLET_MARKER_RE = re.compile(r"^[-•*]\s*")


@dataclass(frozen=True, slots=True)
class BlockPattern:
    name: str
    matches: Callable[[str], bool]
    build: Callable[[str, HeadingLevelMode], ClassifiedBlock]


# ---------------------------------------------------------------------------
# Reguły
# ---------------------------------------------------------------------------

def _build_heading(paragraph: str, level_mode: HeadingLevelMode) -> ClassifiedBlock:
    m = _HEADING_RE.match(paragraph)
    text = m.group(2).strip() if m is not None else ""
    if level_mode == HeadingLevelMode.COUNT:
        level = paragraph.count("#")
    else:
        # Długość początkowego ciągu '#' ("###" → 3, nawet gdy tekst to "#").
        level = len(paragraph) - len(paragraph.lstrip("#"))
    return Heading(level=level, text=text)


def _is_upper_letter(ch: str) -> bool:
    return unicodedata.category(ch) == "Lu"


def _is_section_label(paragraph: str) -> bool:
    """Wielka litera (także spoza ASCII), brak dwukropka aż do ostatniego znaku."""
    return _is_upper_letter(paragraph[0]) and _LABEL_TAIL_RE.fullmatch(paragraph[1:]) is not None


def _is_caps_heading(paragraph: str) -> bool:
    """Wielka litera, potem co najmniej jedna wielka litera lub biały znak."""
    if not 2 <= len(paragraph) < _CAPS_HEADING_MAX_LEN:
        return False
    if not _is_upper_letter(paragraph[0]):
        return False
    return all(ch.isspace() or _is_upper_letter(ch) for ch in paragraph[1:])


def strip_bullet_marker(line: str) -> str:
    """Usuwa jeden początkowy marker listy; linie bez markera bez zmian."""
    return _BULLET_MARKER_RE.sub("", line, count=1)


def _build_bullet_list(paragraph: str, _level_mode: HeadingLevelMode) -> ClassifiedBlock:
    return BulletList(items=tuple(strip_bullet_marker(line) for line in split_lines(paragraph)))


PATTERNS: list[BlockPattern] = [
    # -------------------------------------------------------------------------
    # Nagłówek markdown: "# Tytuł", "### Tytuł"
    # -------------------------------------------------------------------------
    BlockPattern(
        name="heading",
        matches=lambda p: _HEADING_RE.match(p) is not None,
        build=_build_heading,
    ),

    # -------------------------------------------------------------------------
    # Krótki akapit wersalikami: "REQUIREMENTS" → h2
    # -------------------------------------------------------------------------
    BlockPattern(
        name="caps-heading",
        matches=_is_caps_heading,
        build=lambda p, _mode: Heading(level=2, text=p),
    ),

    # -------------------------------------------------------------------------
    # Etykieta sekcji: "Requirements:" → h3 (dwukropek zostaje)
    # -------------------------------------------------------------------------
    BlockPattern(
        name="section-label",
        matches=_is_section_label,
        build=lambda p, _mode: SectionLabel(text=p),
    ),

    # -------------------------------------------------------------------------
    # Lista: choć jedna linia z markerem; każda linia to element
    # -------------------------------------------------------------------------
    BlockPattern(
        name="bullet-list",
        matches=lambda p: _BULLET_LINE_RE.search(p) is not None,
        build=_build_bullet_list,
    ),
]
