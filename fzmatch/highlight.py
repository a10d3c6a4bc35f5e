from prompt_toolkit.formatted_text import FormattedText

from fzmatch.matcher import normalize_text


MATCH_STYLE = "fg:ansigreen"


def map_positions(line, positions, case_sensitive=False, normalize=True):
    """
    Translate positions in the normalized text back to indexes into line.

    Lowercasing can expand one character into several ("İ" becomes two
    code points), so each normalized index is owned by the original
    character that produced it.
    """
    owner = []
    for i, char in enumerate(line):
        owner.extend([i] * len(normalize_text(char, case_sensitive, normalize)))
    return sorted({owner[p] for p in positions if 0 <= p < len(owner)})


def highlight(line, positions, style=MATCH_STYLE):
    """
    Split line into one fragment per character and apply style to the
    matched positions. Positions past the end of line are ignored.
    """
    positions = set(positions)
    fragments = []
    for i, char in enumerate(line):
        if i in positions:
            fragments.append((style, char))
        else:
            fragments.append(("", char))
    return FormattedText(fragments)
