"""Sparse vectors stored as sorted index and value lists."""

from __future__ import annotations

import operator
from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from sparsela.sparse_iter import merge_binop, sparse_dot

_OUT_OF_RANGE = "out_of_range"
_SIZE_MISMATCH = "size_mismatch"
_UNSORTED = "unsorted"


class StructureError(ValueError):
    """Raised when indices and data do not describe a valid sparse structure.

    ``kind`` is one of ``"out_of_range"``, ``"size_mismatch"`` or
    ``"unsorted"``.
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class NnzIndex:
    """Position of a non-zero inside the compressed storage.

    It gives constant time access to the stored value.
    """

    position: int


def _is_strictly_sorted(indices: Sequence[int]) -> bool:
    return all(a < b for a, b in zip(indices, indices[1:]))


def _divide(value: Any, scalar: Any) -> Any:
    if isinstance(value, int) and isinstance(scalar, int):
        quotient = abs(value) // abs(scalar)
        return quotient if (value >= 0) == (scalar >= 0) else -quotient
    return value / scalar


class CsVec:
    """A sparse vector of dimension ``dim``.

    Only the non-zero entries are stored, as strictly increasing indices
    paired with their values. Iterating yields ``(index, value)`` pairs and
    ``len()`` gives the number of stored entries.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, dim: int, indices: Iterable[int], data: Iterable[Any]) -> None:
        index_list = list(indices)
        data_list = list(data)
        if not isinstance(dim, int) or dim < 0:
            raise StructureError(_OUT_OF_RANGE, "Index size is too small")
        if len(index_list) != len(data_list):
            raise StructureError(
                _SIZE_MISMATCH, "indices and data do not have compatible lengths"
            )
        try:
            index_list = [operator.index(i) for i in index_list]
        except TypeError as exc:
            raise StructureError(
                _OUT_OF_RANGE, "index can not be converted to an integer"
            ) from exc
        if any(i < 0 for i in index_list):
            raise StructureError(_OUT_OF_RANGE, "index can not be negative")
        if not _is_strictly_sorted(index_list):
            raise StructureError(_UNSORTED, "Unsorted indices")
        if index_list and index_list[-1] >= dim:
            raise StructureError(_SIZE_MISMATCH, "indices larger than vector size")
        self._dim = dim
        self._indices = index_list
        self._data = data_list

    @classmethod
    def _trusted(cls, dim: int, indices: list[int], data: list[Any]) -> CsVec:
        vec = cls.__new__(cls)
        vec._dim = dim
        vec._indices = indices
        vec._data = data
        return vec

    @classmethod
    def from_unsorted(
        cls, dim: int, indices: Iterable[int], data: Iterable[Any]
    ) -> CsVec:
        """Build a vector, sorting the indices together with their values."""
        index_list = list(indices)
        data_list = list(data)
        try:
            return cls(dim, index_list, data_list)
        except StructureError as exc:
            if exc.kind != _UNSORTED:
                raise
        pairs = sorted(zip(index_list, data_list), key=operator.itemgetter(0))
        return cls(dim, [i for i, _ in pairs], [v for _, v in pairs])

    @classmethod
    def empty(cls, dim: int) -> CsVec:
        """An empty vector of the given dimension, for incremental building."""
        return cls(dim, [], [])

    @classmethod
    def zero(cls) -> CsVec:
        """The additive identity: a vector of dimension zero."""
        return cls(0, [], [])

    def is_zero(self) -> bool:
        """True when every stored value equals zero."""
        return all(value == 0 for value in self._data)

    def append(self, ind: int, val: Any) -> None:
        """Append an entry whose index is above every stored index."""
        if self._indices and ind <= self._indices[-1]:
            raise ValueError("unsorted append")
        if ind > self._dim:
            raise IndexError("out of bounds index")
        self._indices.append(ind)
        self._data.append(val)

    def clear(self) -> None:
        """Drop every stored entry."""
        self._indices.clear()
        self._data.clear()

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return zip(self._indices, self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CsVec({self._dim}, {self._indices!r}, {self._data!r})"

    def indices(self) -> list[int]:
        """A copy of the stored indices."""
        return list(self._indices)

    def data(self) -> list[Any]:
        """A copy of the stored values."""
        return list(self._data)

    def dim(self) -> int:
        """The dimension of the vector."""
        return self._dim

    def nnz(self) -> int:
        """The number of stored entries."""
        return len(self._data)

    def check_structure(self) -> None:
        """Raise StructureError unless indices are sorted and within bounds."""
        for i in self._indices:
            operator.index(i)
        if not _is_strictly_sorted(self._indices):
            raise StructureError(_UNSORTED, "Unsorted indices")
        if self._dim == 0 and not self._indices and not self._data:
            return
        max_ind = max(self._indices, default=0)
        if max_ind >= self._dim:
            raise StructureError(_OUT_OF_RANGE, "Out of bounds index")

    def copy(self) -> CsVec:
        """An independent copy of this vector."""
        return self._trusted(self._dim, list(self._indices), list(self._data))

    def to_dense(self) -> list[Any]:
        """The vector as a dense list, absent entries being zero."""
        dense: list[Any] = [0] * self._dim
        self.scatter(dense)
        return dense

    def nnz_index(self, index: int) -> Optional[NnzIndex]:
        """The storage position of ``index``, or None if nothing is stored there."""
        pos = bisect_left(self._indices, index)
        if pos < len(self._indices) and self._indices[pos] == index:
            return NnzIndex(pos)
        return None

    def get(self, index: int) -> Any:
        """The value stored at ``index``, or None if nothing is stored there."""
        found = self.nnz_index(index)
        return None if found is None else self._data[found.position]

    def _position(self, index: Any) -> int:
        if isinstance(index, NnzIndex):
            if not 0 <= index.position < len(self._data):
                raise IndexError(f"no stored entry at position {index.position}")
            return index.position
        found = self.nnz_index(operator.index(index))
        if found is None:
            raise IndexError(f"no non-zero stored at index {index}")
        return found.position

    def __getitem__(self, index: Any) -> Any:
        return self._data[self._position(index)]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[self._position(index)] = value

    def dot(self, rhs: Any) -> Any:
        """Dot product with a sparse vector or a dense sequence."""
        rhs_dim = rhs.dim() if isinstance(rhs, CsVec) else len(rhs)
        if self._dim != rhs_dim:
            raise ValueError(
                f"dimension mismatch: {self._dim} and {rhs_dim}"
            )
        if isinstance(rhs, CsVec):
            return sparse_dot(self, rhs)
        return self.dot_dense(rhs)

    def dot_dense(self, rhs: Sequence[Any]) -> Any:
        """Dot product with a dense sequence."""
        if self._dim != len(rhs):
            raise ValueError(f"dimension mismatch: {self._dim} and {len(rhs)}")
        total: Any = 0
        for idx, val in self:
            total = total + val * rhs[idx]
        return total

    def scatter(self, out: MutableSequence[Any]) -> None:
        """Write the stored values into a dense sequence."""
        for idx, val in self:
            out[idx] = val

    def to_set(self) -> set[tuple[int, Any]]:
        """The stored entries as a set of ``(index, value)`` pairs."""
        return set(self)

    def map(self, f: Callable[[Any], Any]) -> CsVec:
        """A new vector with ``f`` applied to every stored value."""
        res = self.copy()
        res.map_inplace(f)
        return res

    def map_inplace(self, f: Callable[[Any], Any]) -> None:
        """Replace every stored value by ``f`` applied to it."""
        self._data = [f(value) for value in self._data]

    def _binop(self, other: Any, op: Callable[[Any, Any], Any]) -> CsVec:
        if not isinstance(other, CsVec):
            return NotImplemented
        if self._dim != other._dim and self._dim != 0 and other._dim != 0:
            raise ValueError(f"dimension mismatch: {self._dim} and {other._dim}")
        pairs = list(merge_binop(self, other, op))
        return self._trusted(
            max(self._dim, other._dim),
            [i for i, _ in pairs],
            [v for _, v in pairs],
        )

    def __add__(self, other: Any) -> CsVec:
        return self._binop(other, operator.add)

    def __sub__(self, other: Any) -> CsVec:
        return self._binop(other, operator.sub)

    def __neg__(self) -> CsVec:
        return self._trusted(
            self._dim, list(self._indices), [-value for value in self._data]
        )

    def __imul__(self, scalar: Any) -> CsVec:
        self._data = [value * scalar for value in self._data]
        return self

    def __itruediv__(self, scalar: Any) -> CsVec:
        self._data = [_divide(value, scalar) for value in self._data]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CsVec):
            return NotImplemented
        return (
            self._dim == other._dim
            and self._indices == other._indices
            and self._data == other._data
        )