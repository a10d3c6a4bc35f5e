#!/usr/bin/env python3

import sys
import argparse
import contextlib
import logging

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from fzmatch.helpers import profile
from fzmatch.highlight import highlight, map_positions
from fzmatch.matcher import calc_bonus, normalize_text, score_matrix
from fzmatch.ranker import rank
from fzmatch.util import format_matrix, read_lines


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1: {}".format(value))
    return number


def create_parser():
    parser = argparse.ArgumentParser(
        prog="fzmatch",
        description="Rank lines by how well they fuzzy match a pattern.",
    )
    parser.add_argument("pattern", help="Pattern to match.")
    parser.add_argument("infile", nargs="?", type=argparse.FileType("r", encoding="utf-8"), default=sys.stdin, help="Input file.")
    case = parser.add_mutually_exclusive_group()
    case.add_argument("-i", "--ignore-case", dest="case_sensitive", action="store_false", help="Perform case-insensitive matching (default).")
    case.add_argument("-s", "--case-sensitive", dest="case_sensitive", action="store_true", help="Perform case-sensitive matching.")
    parser.add_argument("--no-normalize", dest="normalize", action="store_false", help="Do not strip diacritics before matching.")
    parser.add_argument("-n", "--limit", type=positive_int, default=None, help="Print at most N results.")
    parser.add_argument("-j", "--workers", type=int, default=None, help="Number of processes used for scoring.")
    parser.add_argument("--show-score", action="store_true", help="Prefix each line with its score.")
    parser.add_argument("--no-color", dest="color", action="store_false", help="Do not highlight matched characters.")
    parser.add_argument("--debug", nargs="?", const="debug.log", default=None, metavar="FILE", help="Write debug log to FILE (default: debug.log).")
    parser.add_argument("--profile", action="store_true", help="Profile the run, stats go to the debug log or stderr.")
    parser.set_defaults(case_sensitive=False)
    return parser


def print_result(item, show_score=False, color=True, case_sensitive=False, normalize=True):
    prefix = "{}\t".format(item.score) if show_score else ""
    if color:
        positions = map_positions(item.line, item.positions, case_sensitive, normalize)
        fragments = highlight(item.line, positions)
        print_formatted_text(FormattedText([("", prefix)] + list(fragments)))
    else:
        print(prefix + item.line)


def log_score_matrix(line, pattern, case_sensitive, normalize):
    text = normalize_text(line, case_sensitive, normalize)
    pattern = normalize_text(pattern, case_sensitive, normalize)
    H, _, _, _ = score_matrix(text, pattern, calc_bonus(text))
    logging.debug("score matrix for %r:\n%s", line, format_matrix(H))


def run(args):
    lines = read_lines(args.infile)
    logging.debug("read %d lines from %s", len(lines), getattr(args.infile, "name", "?"))

    results = rank(
        lines,
        args.pattern,
        case_sensitive=args.case_sensitive,
        normalize=args.normalize,
        workers=args.workers,
    )
    if args.limit is not None:
        results = results[:args.limit]

    if results and args.pattern and logging.getLogger().isEnabledFor(logging.DEBUG):
        log_score_matrix(results[0].line, args.pattern, args.case_sensitive, args.normalize)

    for item in results:
        print_result(
            item,
            show_score=args.show_score,
            color=args.color,
            case_sensitive=args.case_sensitive,
            normalize=args.normalize,
        )

    return 0 if results else 1


def main(argv=None):
    args = create_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(filename=args.debug, level=logging.DEBUG)

    context = profile() if args.profile else contextlib.nullcontext()
    try:
        with context:
            return run(args)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
