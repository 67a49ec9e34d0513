"""Norms, normalization and approximate comparison of sparse vectors."""

from __future__ import annotations

import math
import sys
from typing import Any

from sparsela.sparse_iter import Both, Left, nnz_or_zip
from sparsela.vector import CsVec


def _values(vec: CsVec) -> list[Any]:
    return [value for _, value in vec]


def squared_l2_norm(vec: CsVec) -> Any:
    """The sum of the squares of the stored values."""
    return sum((value * value for value in _values(vec)), 0)


def l2_norm(vec: CsVec) -> float:
    """The Euclidean norm of the vector."""
    return math.sqrt(squared_l2_norm(vec))


def l1_norm(vec: CsVec) -> Any:
    """The sum of the absolute values of the stored values."""
    return sum((abs(value) for value in _values(vec)), 0)


def norm(vec: CsVec, p: float) -> float:
    """The vector norm of order ``p``.

    For p = inf this is the largest absolute value, for p = -inf the
    smallest, for p = 0 the count of non-zero values, and otherwise the
    p-th root of the sum of the absolute values raised to the power p.
    An empty vector has every infinite norm equal to zero.
    """
    magnitudes = [abs(value) for value in _values(vec)]
    if math.isinf(p):
        if not magnitudes:
            return 0.0
        return float(max(magnitudes) if p > 0 else min(magnitudes))
    if p == 0:
        return float(sum(1 for value in magnitudes if value != 0))
    total = sum((value**p for value in magnitudes), 0.0)
    return total ** (1.0 / p)


def unit_normalize(vec: CsVec) -> None:
    """Divide the vector by its L2 norm in place; a zero vector is left as is."""
    norm_sq = squared_l2_norm(vec)
    if norm_sq > 0:
        length = math.sqrt(norm_sq)
        vec.map_inplace(lambda value: value / length)


def abs_diff_eq(
    left: CsVec, right: CsVec, epsilon: float = sys.float_info.epsilon
) -> bool:
    """True when both vectors agree within ``epsilon`` entry by entry.

    Dimensions must match unless one of them is zero. Entries missing on
    one side are compared against zero.
    """
    if left.dim() != 0 and right.dim() != 0 and left.dim() != right.dim():
        return False
    for item in nnz_or_zip(left, right):
        if isinstance(item, Both):
            a, b = item.left, item.right
        elif isinstance(item, Left):
            a, b = item.value, 0
        else:
            a, b = 0, item.value
        if abs(a - b) > epsilon:
            return False
    return True