"""
normalizer/splitter.py — podział surowego tekstu na akapity.

Co robimy:
  - trim całego wejścia
  - podział na pustych liniach (dwa \n, między nimi tylko białe znaki)
  - trim każdego segmentu, puste segmenty odrzucamy

Co zachowujemy:
  - pojedyncze \n wewnątrz akapitu (potrzebne do wykrywania list)
  - kolejność akapitów
"""

from __future__ import annotations

import re

# Pusta linia: \n, dowolne białe znaki (także kolejne \n), \n.
_BLANK_LINE_RE = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> list[str]:
    """Zwraca niepuste, przycięte akapity w kolejności wystąpienia."""
    paragraphs: list[str] = []
    for segment in _BLANK_LINE_RE.split(text.strip()):
        segment = segment.strip()
        if segment:
            paragraphs.append(segment)
    return paragraphs


def split_lines(paragraph: str) -> list[str]:
    """Linie akapitu po trim, bez pustych."""
    return [line.strip() for line in paragraph.split("\n") if line.strip()]
