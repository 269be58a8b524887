"""
Plain-text rendering.

Each row renders as ``|v0, v1, ..., vk|``; rows are newline-separated and
consecutive matrices are separated by a blank line.
"""

from pymatrix.matrix.storage import Matrix


def format_matrix(m: Matrix) -> str:
    lines = []
    for r in range(m.rows):
        cells = ", ".join(str(m[r, c]) for c in range(m.cols))
        lines.append(f"|{cells}|")
    return "\n".join(lines)


def format_matrices(*matrices: Matrix) -> str:
    return "\n\n".join(format_matrix(m) for m in matrices)
