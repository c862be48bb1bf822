import pytest
from bs4 import BeautifulSoup

from data_model.descriptions import (
    BulletList,
    DescriptionDomain,
    Heading,
    HeadingLevelMode,
    Paragraph,
    SectionLabel,
)
from html_parser.parser import blocks_to_plain_text
from normalizer import generate_from_plain_text, render_blocks, resolve_description_html

JOB_OPEN = '<div class="job-description">'
PRODUCT_OPEN = '<div class="product-description">'


def _job(body: str) -> str:
    return JOB_OPEN + body + "</div>"


@pytest.mark.parametrize("text", ["", "   ", "\n\n \t\n"])
def test_empty_or_blank_input_yields_empty_container(text: str) -> None:
    assert generate_from_plain_text(text) == _job("")


def test_heading_and_paragraph() -> None:
    assert generate_from_plain_text("# Title\n\nSome body text.") == _job(
        "<h1>Title</h1><p>Some body text.</p>"
    )


def test_caps_heading_and_section_label() -> None:
    assert generate_from_plain_text("REQUIREMENTS") == _job("<h2>REQUIREMENTS</h2>")
    assert generate_from_plain_text("Requirements:") == _job("<h3>Requirements:</h3>")


def test_bullet_list_renders_one_li_per_line() -> None:
    html = generate_from_plain_text("- Item one\n- Item two\n* Item three")

    assert html == _job("<ul><li>Item one</li><li>Item two</li><li>Item three</li></ul>")


def test_plain_sentence_renders_single_paragraph() -> None:
    text = "Just a normal sentence without special formatting."
    assert generate_from_plain_text(text) == _job(f"<p>{text}</p>")


def test_adjacent_lists_are_not_merged() -> None:
    assert generate_from_plain_text("- a\n\n- b") == _job(
        "<ul><li>a</li></ul><ul><li>b</li></ul>"
    )


def test_multiline_paragraph_is_kept_verbatim() -> None:
    assert generate_from_plain_text("Line one\nLine two") == _job(
        "<p>Line one\nLine two</p>"
    )


def test_heading_level_is_not_clamped() -> None:
    assert generate_from_plain_text("######## Deep") == _job("<h8>Deep</h8>")


def test_level_mode_is_passed_to_classifier() -> None:
    text = "# Intro #2"
    assert generate_from_plain_text(text) == _job("<h1>Intro #2</h1>")
    assert generate_from_plain_text(
        text, level_mode=HeadingLevelMode.COUNT
    ) == _job("<h2>Intro #2</h2>")


def test_product_domain_changes_only_container_class() -> None:
    text = "ABOUT\n\nCourse Content:\n\n- Module 1\n- Module 2"

    job = generate_from_plain_text(text, DescriptionDomain.JOB)
    product = generate_from_plain_text(text, DescriptionDomain.PRODUCT)

    assert product.startswith(PRODUCT_OPEN)
    assert product.removeprefix(PRODUCT_OPEN) == job.removeprefix(JOB_OPEN)


def test_output_has_exactly_one_container_bounding_everything() -> None:
    text = "# A\n\nB C\n\nLabel:\n\n- x\n* y\n\nSome text\nmore text"
    html = generate_from_plain_text(text)

    assert html.startswith(JOB_OPEN)
    assert html.endswith("</div>")
    assert html.count("<div") == 1
    assert html.count("</div>") == 1

    soup = BeautifulSoup(html, "html.parser")
    top = [el for el in soup.children]
    assert len(top) == 1
    assert [c.name for c in top[0].children] == ["h1", "h2", "h3", "ul", "p"]


def test_classifier_path_passes_html_through_unescaped() -> None:
    # Znane ryzyko XSS: wynik musi przejść przez sanitizer przed wyświetleniem.
    assert generate_from_plain_text("<script>alert(1)</script>") == _job(
        "<p><script>alert(1)</script></p>"
    )
    assert generate_from_plain_text("<b>bold</b>") == _job("<p><b>bold</b></p>")
    assert generate_from_plain_text("- <i>x</i>") == _job("<ul><li><i>x</i></li></ul>")


def test_renormalizing_plain_text_form_of_list_keeps_items() -> None:
    original = BulletList(items=("Python", "SQL", "Docker"))
    text = blocks_to_plain_text([original])

    assert generate_from_plain_text(text) == render_blocks([original])


def test_render_blocks_maps_each_block_kind() -> None:
    blocks = [
        Heading(level=4, text="Four"),
        SectionLabel(text="Label:"),
        BulletList(items=()),
        Paragraph(text="p"),
    ]

    assert render_blocks(blocks, DescriptionDomain.PRODUCT) == (
        PRODUCT_OPEN + "<h4>Four</h4><h3>Label:</h3><ul></ul><p>p</p></div>"
    )


# ---------------------------------------------------------------------------
# resolve_description_html
# ---------------------------------------------------------------------------

def test_resolve_prefers_rich_text_html() -> None:
    assert resolve_description_html("# Ignored", "<p>From editor</p>") == "<p>From editor</p>"


def test_resolve_generates_from_plain_text_when_html_missing() -> None:
    assert resolve_description_html("Hello", None) == _job("<p>Hello</p>")
    assert resolve_description_html("Hello", "", DescriptionDomain.PRODUCT) == (
        PRODUCT_OPEN + "<p>Hello</p></div>"
    )


def test_resolve_returns_html_unchanged_when_both_missing() -> None:
    assert resolve_description_html("", None) is None
    assert resolve_description_html(None, "") == ""
