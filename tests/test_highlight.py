from fzmatch.highlight import MATCH_STYLE, highlight, map_positions
from fzmatch.matcher import match


def test_highlight_marks_positions():
    fragments = highlight("abc", [0, 2])

    assert list(fragments) == [
        (MATCH_STYLE, "a"),
        ("", "b"),
        (MATCH_STYLE, "c"),
    ]


def test_highlight_custom_style():
    fragments = highlight("ab", [1], style="bold")

    assert list(fragments) == [("", "a"), ("bold", "b")]


def test_highlight_ignores_out_of_range_positions():
    fragments = highlight("ab", [1, 5])

    assert len(fragments) == 2
    assert fragments[1] == (MATCH_STYLE, "b")


def test_map_positions_follows_lowercase_expansion():
    line = "İstanbul"
    result = match(line, "stan")

    positions = map_positions(line, result.positions)
    fragments = highlight(line, positions)

    assert positions == [1, 2, 3, 4]
    assert "".join(text for style, text in fragments if style == MATCH_STYLE) == "stan"


def test_map_positions_identity_without_expansion():
    assert map_positions("abc", [0, 2], True, False) == [0, 2]
    assert map_positions("Café", [3], False, True) == [3]
