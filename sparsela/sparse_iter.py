"""Merged iteration over the non-zero entries of sorted sparse vectors.

Every sparse operand here is an iterable of ``(index, value)`` pairs whose
indices are strictly increasing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Union

_DONE = object()


@dataclass(frozen=True)
class Both:
    """A non-zero present in both operands at the same index."""

    index: int
    left: Any
    right: Any


@dataclass(frozen=True)
class _Single:
    index: int
    value: Any


class Left(_Single):
    """A non-zero present only in the left operand."""


class Right(_Single):
    """A non-zero present only in the right operand."""


NnzEither = Union[Both, Left, Right]


def nnz_or_zip(
    left: Iterable[tuple[int, Any]], right: Iterable[tuple[int, Any]]
) -> Iterator[NnzEither]:
    """Yield the non-zeros of either operand in index order.

    Entries sharing an index are yielded together as ``Both``; the others
    are tagged ``Left`` or ``Right`` depending on where they come from.
    """
    left_it, right_it = iter(left), iter(right)
    lnext, rnext = next(left_it, _DONE), next(right_it, _DONE)
    while lnext is not _DONE or rnext is not _DONE:
        take_left = lnext is not _DONE and (rnext is _DONE or lnext[0] <= rnext[0])
        take_right = rnext is not _DONE and (lnext is _DONE or rnext[0] <= lnext[0])
        if take_left and take_right:
            yield Both(lnext[0], lnext[1], rnext[1])
        elif take_left:
            yield Left(*lnext)
        else:
            yield Right(*rnext)
        if take_left:
            lnext = next(left_it, _DONE)
        if take_right:
            rnext = next(right_it, _DONE)


def nnz_zip(
    left: Iterable[tuple[int, Any]], right: Iterable[tuple[int, Any]]
) -> Iterator[tuple[int, Any, Any]]:
    """Yield ``(index, left, right)`` for indices non-zero in both operands."""
    for item in nnz_or_zip(left, right):
        if isinstance(item, Both):
            yield item.index, item.left, item.right


def sparse_dot(
    left: Iterable[tuple[int, Any]], right: Iterable[tuple[int, Any]]
) -> Any:
    """Dot product of two sparse operands given as sorted index/value pairs."""
    total: Any = 0
    for _, lval, rval in nnz_zip(left, right):
        total = total + lval * rval
    return total


def merge_binop(
    left: Iterable[tuple[int, Any]],
    right: Iterable[tuple[int, Any]],
    op: Callable[[Any, Any], Any],
    zero_left: Any = 0,
    zero_right: Any = 0,
) -> Iterator[tuple[int, Any]]:
    """Apply ``op`` element-wise over the union of both sparsity patterns.

    A missing entry on one side is replaced by that side's zero.
    """
    for item in nnz_or_zip(left, right):
        if isinstance(item, Both):
            yield item.index, op(item.left, item.right)
        elif isinstance(item, Left):
            yield item.index, op(item.value, zero_right)
        else:
            yield item.index, op(zero_left, item.value)