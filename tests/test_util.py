import io
import logging

import numpy as np

from fzmatch.helpers import profile, timeit
from fzmatch.util import format_matrix, initialize_matrix, read_lines


def test_initialize_matrix():
    matrix = initialize_matrix(2, 3)

    assert matrix.shape == (2, 3)
    assert not matrix.any()


def test_format_matrix():
    table = format_matrix(np.array([[0, 0], [-3, 36]]))

    assert table.split("\n") == ["   0   0", "  -3  36"]


def test_read_lines():
    infile = io.StringIO("alpha\n\nbeta\r\ngamma")

    assert read_lines(infile) == ["alpha", "beta", "gamma"]


def test_timeit(caplog):
    caplog.set_level(logging.DEBUG)

    @timeit
    def add(a, b):
        return a + b

    assert add(1, 2) == 3
    assert "func: add" in caplog.text


def test_profile(caplog):
    caplog.set_level(logging.DEBUG)

    with profile():
        sum(range(100))

    assert "function calls" in caplog.text
