"""
data_model/descriptions.py — model bloków opisu (oferty pracy / produktu).

Każdy akapit tekstu wejściowego jest klasyfikowany do dokładnie jednego
bloku: Heading, SectionLabel, BulletList albo Paragraph. Sekwencja bloków
(BlockList) jest renderowana do HTML w tej samej kolejności.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class DescriptionDomain(StrEnum):
    """Rodzaj opisu — zmienia wyłącznie klasę kontenera HTML."""

    JOB     = "job"
    PRODUCT = "product"

    @property
    def css_class(self) -> str:
        return f"{self.value}-description"


class HeadingLevelMode(StrEnum):
    """
    Sposób liczenia poziomu nagłówka markdown ("## Tytuł").

    - LEADING: długość początkowego ciągu znaków '#'
    - COUNT:   liczba wszystkich '#' w akapicie (zachowanie historyczne)
    """

    LEADING = "leading"
    COUNT   = "count"


@dataclass(frozen=True, slots=True)
class Heading:
    level: int           # 1..n, bez przycinania do 6
    text: str


@dataclass(frozen=True, slots=True)
class SectionLabel:
    text: str            # razem z końcowym dwukropkiem, np. "Requirements:"


@dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str            # może zawierać pojedyncze \n


ClassifiedBlock: TypeAlias = Heading | SectionLabel | BulletList | Paragraph

# Bloki w kolejności akapitów wejściowych.
BlockList: TypeAlias = list[ClassifiedBlock]
