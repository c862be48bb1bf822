"""
normalizer — zamiana wklejonego tekstu opisu na strukturalny HTML.

Publiczne API:
  split_paragraphs(text)                                   → list[str]
  classify_paragraph(paragraph, level_mode)                → ClassifiedBlock
  classify_text(text, level_mode)                          → BlockList
  render_blocks(blocks, domain)                            → str
  generate_from_plain_text(text, domain, level_mode)       → str
  resolve_description_html(description, html, domain, ...) → str | None
  create_default_template(about, requirements, benefits)   → str
  create_product_placeholder()                             → str
  PATTERNS                                                 reguły klasyfikacji

Typowe użycie:
    from normalizer import generate_from_plain_text
    from data_model import DescriptionDomain

    html = generate_from_plain_text(text, DescriptionDomain.PRODUCT)
"""

from .splitter      import split_paragraphs
from .block_patterns import PATTERNS, BlockPattern
from .classifier    import classify_paragraph, classify_text, match_pattern
from .renderer      import (
    render_blocks,
    generate_from_plain_text,
    resolve_description_html,
)
from .templates     import create_default_template, create_product_placeholder

__all__ = [
    "split_paragraphs",
    "PATTERNS",
    "BlockPattern",
    "classify_paragraph",
    "classify_text",
    "match_pattern",
    "render_blocks",
    "generate_from_plain_text",
    "resolve_description_html",
    "create_default_template",
    "create_product_placeholder",
]
