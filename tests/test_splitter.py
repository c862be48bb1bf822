from normalizer.splitter import split_lines, split_paragraphs


def test_split_paragraphs_returns_empty_for_empty_and_blank_input() -> None:
    assert split_paragraphs("") == []
    assert split_paragraphs("   \n\n \t \n ") == []


def test_split_paragraphs_splits_on_blank_lines_with_whitespace() -> None:
    assert split_paragraphs("first\n\nsecond\n  \t\nthird\n\n\n\nfourth") == [
        "first",
        "second",
        "third",
        "fourth",
    ]


def test_split_paragraphs_keeps_single_newlines_inside_paragraph() -> None:
    assert split_paragraphs("line one\nline two\n\nnext") == [
        "line one\nline two",
        "next",
    ]


def test_split_paragraphs_trims_segments_and_outer_text() -> None:
    assert split_paragraphs("\n\n   Hello there  \n\n   - item\n") == [
        "Hello there",
        "- item",
    ]


def test_split_paragraphs_handles_windows_line_endings() -> None:
    assert split_paragraphs("first\r\n\r\nsecond") == ["first", "second"]


def test_split_lines_trims_and_drops_blank_lines() -> None:
    assert split_lines("  a \n\n   \n b\n") == ["a", "b"]
