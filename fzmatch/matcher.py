import unicodedata
from collections import namedtuple
from enum import Enum
from functools import lru_cache

from fzmatch.util import initialize_matrix


SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1
BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_FIRST_CHAR_MULTIPLIER = 2


Match = namedtuple("Match", ["start", "end", "score", "positions"])


def no_match():
    return Match(-1, -1, 0, [])


class CharClass(Enum):
    WHITE = 1
    ALNUM = 2
    PUNCT = 3


@lru_cache(maxsize=1024)
def normalize_rune(char):
    """Strip diacritics by keeping the first code point of the NFD form."""
    decomposed = unicodedata.normalize("NFD", char)
    return decomposed[0] if decomposed else char


def normalize_text(text, case_sensitive, normalize):
    if not case_sensitive:
        text = text.lower()
    if normalize:
        text = "".join(normalize_rune(c) for c in text)
    return text


@lru_cache(maxsize=1024)
def char_class(char):
    if char.isspace():
        return CharClass.WHITE
    elif char.isalnum():
        return CharClass.ALNUM
    else:
        return CharClass.PUNCT


def bonus_for(prev_class, curr_class):
    if curr_class is CharClass.ALNUM:
        if prev_class is CharClass.WHITE:
            return BONUS_BOUNDARY + 2
        elif prev_class is CharClass.PUNCT:
            return BONUS_BOUNDARY + 1
    return 0


def calc_bonus(text):
    """
    Boundary bonus for every character of the text. The character before
    the start of the text counts as whitespace.
    """
    bonus = []
    prev_class = CharClass.WHITE
    for c in text:
        curr_class = char_class(c)
        bonus.append(bonus_for(prev_class, curr_class))
        prev_class = curr_class
    return bonus


def score_matrix(text, pattern, bonus):
    """
    Fill the local alignment matrix H, (m + 1) rows by (n + 1) columns.

    Returns the matrix with the value and coordinates of its first maximum
    in row-major order.
    """
    m = len(pattern)
    n = len(text)

    # +1 for gap row and gap column
    H = initialize_matrix(m + 1, n + 1)
    for i in range(1, m + 1):
        H[i, 0] = SCORE_GAP_START + (i - 1) * SCORE_GAP_EXTENSION

    max_score, max_i, max_j = 0, 0, 0

    for i in range(1, m + 1):
        p = pattern[i - 1]
        for j in range(1, n + 1):
            if p == text[j - 1]:
                score = H[i - 1, j - 1] + SCORE_MATCH
                if i == 1:
                    score += bonus[j - 1] * BONUS_FIRST_CHAR_MULTIPLIER
                else:
                    score += bonus[j - 1]
            else:
                score = max(
                    H[i, j - 1] + SCORE_GAP_EXTENSION,
                    H[i - 1, j] + SCORE_GAP_START,
                )

            score = max(0, int(score))
            H[i, j] = score

            if score > max_score:
                max_score, max_i, max_j = score, i, j

    return H, max_score, max_i, max_j


def backtrack(H, text, pattern, max_i, max_j):
    """Walk back from the maximum cell and collect the matched text positions."""
    positions = []
    i, j = max_i, max_j
    while i > 0 and j > 0:
        if pattern[i - 1] == text[j - 1]:
            positions.append(j - 1)
            i -= 1
            j -= 1
        elif H[i, j - 1] + SCORE_GAP_EXTENSION == H[i, j]:
            j -= 1
        else:
            i -= 1
    positions.reverse()
    return positions


def match(text, pattern, case_sensitive=False, normalize=True):
    """
    Fuzzy match pattern against text.

    Returns a Match of (start, end, score, positions) where positions index
    into the normalized text. (-1, -1, 0, []) signals no match and an empty
    pattern always yields (0, 0, 0, []).
    """
    if not pattern:
        return Match(0, 0, 0, [])

    text = normalize_text(text, case_sensitive, normalize)
    pattern = normalize_text(pattern, case_sensitive, normalize)

    if len(pattern) > len(text):
        return no_match()

    bonus = calc_bonus(text)
    H, max_score, max_i, max_j = score_matrix(text, pattern, bonus)
    if max_score == 0:
        return no_match()

    positions = backtrack(H, text, pattern, max_i, max_j)

    # the best local alignment did not consume every pattern character
    if len(positions) != len(pattern):
        return no_match()

    return Match(positions[0], positions[-1] + 1, max_score, positions)


def match_score(text, pattern, case_sensitive=False, normalize=True):
    return match(text, pattern, case_sensitive, normalize).score
