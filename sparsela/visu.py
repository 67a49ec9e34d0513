"""Text and image renderings of the non-zero pattern of a sparse matrix."""

from __future__ import annotations

from sparsela.triplet import CompressedMatrix


def nnz_pattern(mat: CompressedMatrix) -> str:
    """One line per row, ``x`` for a stored entry and a space otherwise."""
    csr = mat if mat.is_csr() else mat.to_other_storage()
    lines = []
    for row in csr.outer_iterator():
        cells = [" "] * csr.cols()
        for col, _ in row:
            cells[col] = "x"
        lines.append("|" + "".join(cells) + "|\n")
    return "".join(lines)


def print_nnz_pattern(mat: CompressedMatrix) -> None:
    """Print the non-zero pattern of the matrix."""
    print(nnz_pattern(mat), end="")


def nnz_image(mat: CompressedMatrix) -> list[list[int]]:
    """A black and white image of the pattern: 0 for non-zeros, 255 elsewhere."""
    image = [[255] * mat.cols() for _ in range(mat.rows())]
    for outer, vec in enumerate(mat.outer_iterator()):
        for inner, _ in vec:
            i, j = (outer, inner) if mat.is_csr() else (inner, outer)
            image[i][j] = 0
    return image