import numpy as np


def initialize_matrix(rows, cols):
    return np.zeros((rows, cols), int)


def format_matrix(matrix):
    """Render a score matrix with aligned columns.

    ex:
      0  0  0  0  0  0
     -3  0 36 35 34 33
     -4  0 33 32 51 50
    """
    s = [[("  " + str(e)) for e in row] for row in matrix.tolist()]
    lens = [max(map(len, col)) for col in zip(*s)]
    fmt = "".join("{{:>{}}}".format(x) for x in lens)
    table = [fmt.format(*row) for row in s]
    return "\n".join(table)


def read_lines(infile):
    """
    Read candidate lines from an open text file. Trailing newlines are
    stripped and empty lines are skipped.
    """
    lines = []
    for line in infile:
        line = line.rstrip("\r\n")
        if line:
            lines.append(line)
    return lines
