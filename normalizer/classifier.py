"""
normalizer/classifier.py — klasyfikacja akapitów do bloków opisu.

Architektura:
  tekst → split_paragraphs() → akapity
  → classify_paragraph() → pierwsza pasująca reguła z PATTERNS albo Paragraph
  → BlockList (kolejność jak w tekście)
"""

from __future__ import annotations

from data_model.descriptions import (
    BlockList,
    ClassifiedBlock,
    HeadingLevelMode,
    Paragraph,
)
from normalizer.block_patterns import PATTERNS, BlockPattern
from normalizer.splitter import split_paragraphs


def match_pattern(paragraph: str) -> BlockPattern | None:
    """Pierwsza reguła pasująca do akapitu albo None (zwykły akapit)."""
    for pattern in PATTERNS:
        if pattern.matches(paragraph):
            return pattern
    return None


def classify_paragraph(
    paragraph: str,
    level_mode: HeadingLevelMode = HeadingLevelMode.LEADING,
) -> ClassifiedBlock:
    """
    Zwraca dokładnie jeden blok dla przyciętego, niepustego akapitu.

    Kolejność reguł ma znaczenie: "# Benefits\n- Remote" pasuje do nagłówka
    i do listy, wygrywa nagłówek.
    """
    pattern = match_pattern(paragraph)
    if pattern is None:
        return Paragraph(text=paragraph)
    return pattern.build(paragraph, level_mode)


def classify_text(
    text: str,
    level_mode: HeadingLevelMode = HeadingLevelMode.LEADING,
) -> BlockList:
    return [classify_paragraph(p, level_mode) for p in split_paragraphs(text)]
