"""
data_model — struktury danych normalizatora opisów.

Użycie:
  from data_model import DescriptionDomain, Heading, BulletList, ...

Moduły:
  descriptions — DescriptionDomain, HeadingLevelMode, Heading, SectionLabel,
                 BulletList, Paragraph, ClassifiedBlock, BlockList

Mapowanie na HTML:
  Heading(level, text) → <h{level}>text</h{level}>
  SectionLabel(text)   → <h3>text</h3>
  BulletList(items)    → <ul><li>item</li>…</ul>
  Paragraph(text)      → <p>text</p>
"""

from .descriptions import (
    DescriptionDomain,
    HeadingLevelMode,
    Heading,
    SectionLabel,
    BulletList,
    Paragraph,
    ClassifiedBlock,
    BlockList,
)

__all__ = [
    "DescriptionDomain",
    "HeadingLevelMode",
    "Heading",
    "SectionLabel",
    "BulletList",
    "Paragraph",
    "ClassifiedBlock",
    "BlockList",
]
