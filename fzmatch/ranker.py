import logging
import concurrent.futures
from collections import namedtuple
from functools import partial

from fzmatch.helpers import timeit
from fzmatch.matcher import match


Ranked = namedtuple("Ranked", ["line", "score", "positions"])


def _score_line(line, pattern, case_sensitive, normalize):
    result = match(line, pattern, case_sensitive, normalize)
    return Ranked(line, result.score, result.positions)


def compute_scores(lines, pattern, case_sensitive=False, normalize=True, workers=None):
    """
    Score every line against the pattern, preserving input order.

    With more than one worker the lines are scored in a process pool.
    """
    score_line = partial(
        _score_line,
        pattern=pattern,
        case_sensitive=case_sensitive,
        normalize=normalize,
    )
    if not workers or workers <= 1 or len(lines) < 2:
        return [score_line(line) for line in lines]

    chunksize = max(1, len(lines) // (workers * 8))
    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(score_line, lines, chunksize=chunksize))


@timeit
def rank(lines, pattern, case_sensitive=False, normalize=True, workers=None):
    """
    Return the lines matching pattern, best first.

    Ties on score go to the shorter line, then to the earlier one. An empty
    pattern matches every line and keeps the input order.
    """
    lines = list(lines)
    logging.debug("rank: %d candidates, pattern=%r", len(lines), pattern)

    scored = compute_scores(lines, pattern, case_sensitive, normalize, workers)
    if pattern:
        scored = [item for item in scored if item.score > 0]
        # sort by score, line length
        scored.sort(key=lambda item: (-item.score, len(item.line)))

    logging.debug("rank: %d matches", len(scored))
    return scored
