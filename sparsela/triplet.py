"""Compressed sparse matrices and their construction from triplets."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from enum import Enum
from itertools import accumulate, pairwise
from typing import Any

from sparsela.vector import CsVec, StructureError


class CompressedStorage(Enum):
    """Whether the outer dimension of a compressed matrix is rows or columns."""

    CSR = "csr"
    CSC = "csc"

    def other(self) -> CompressedStorage:
        """The opposite storage order."""
        return CompressedStorage.CSC if self is CompressedStorage.CSR else CompressedStorage.CSR


class CompressedMatrix:
    """A sparse matrix in compressed row (CSR) or column (CSC) form.

    ``indptr`` has one entry more than the outer dimension; the inner
    indices of outer slice ``k`` are ``indices[indptr[k]:indptr[k + 1]]``,
    strictly increasing, with their values at the same positions of ``data``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        shape: tuple[int, int],
        indptr: Iterable[int],
        indices: Iterable[int],
        data: Iterable[Any],
        storage: CompressedStorage = CompressedStorage.CSR,
    ) -> None:
        rows, cols = shape
        storage = CompressedStorage(storage)
        if rows < 0 or cols < 0:
            raise StructureError("out_of_range", "negative matrix dimension")
        indptr_list = [operator.index(i) for i in indptr]
        index_list = [operator.index(i) for i in indices]
        data_list = list(data)
        outer, inner = (rows, cols) if storage is CompressedStorage.CSR else (cols, rows)
        if len(indptr_list) != outer + 1:
            raise StructureError(
                "size_mismatch", "indptr length does not match the outer dimension"
            )
        if len(index_list) != len(data_list):
            raise StructureError(
                "size_mismatch", "indices and data do not have compatible lengths"
            )
        if indptr_list[0] != 0 or indptr_list[-1] != len(index_list):
            raise StructureError(
                "size_mismatch", "indptr bounds do not match the number of non-zeros"
            )
        for start, stop in pairwise(indptr_list):
            if start > stop:
                raise StructureError("unsorted", "indptr is not non-decreasing")
            segment = index_list[start:stop]
            if any(a >= b for a, b in pairwise(segment)):
                raise StructureError("unsorted", "Unsorted indices")
            if any(i < 0 or i >= inner for i in segment):
                raise StructureError("out_of_range", "Out of bounds index")
        self._rows = rows
        self._cols = cols
        self._storage = storage
        self._indptr = indptr_list
        self._indices = index_list
        self._data = data_list

    @classmethod
    def new_csr(
        cls,
        shape: tuple[int, int],
        indptr: Iterable[int],
        indices: Iterable[int],
        data: Iterable[Any],
    ) -> CompressedMatrix:
        """Build a matrix in compressed row form."""
        return cls(shape, indptr, indices, data, CompressedStorage.CSR)

    @classmethod
    def new_csc(
        cls,
        shape: tuple[int, int],
        indptr: Iterable[int],
        indices: Iterable[int],
        data: Iterable[Any],
    ) -> CompressedMatrix:
        """Build a matrix in compressed column form."""
        return cls(shape, indptr, indices, data, CompressedStorage.CSC)

    def __repr__(self) -> str:
        return (
            f"CompressedMatrix({self.shape()!r}, {self._indptr!r}, "
            f"{self._indices!r}, {self._data!r}, {self._storage})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompressedMatrix):
            return NotImplemented
        return (
            self.shape() == other.shape()
            and self._storage is other._storage
            and self._indptr == other._indptr
            and self._indices == other._indices
            and self._data == other._data
        )

    @property
    def storage(self) -> CompressedStorage:
        """The storage order of the matrix."""
        return self._storage

    @property
    def indptr(self) -> list[int]:
        """A copy of the index pointer array."""
        return list(self._indptr)

    @property
    def indices(self) -> list[int]:
        """A copy of the inner indices."""
        return list(self._indices)

    @property
    def data(self) -> list[Any]:
        """A copy of the stored values."""
        return list(self._data)

    def rows(self) -> int:
        """The number of rows."""
        return self._rows

    def cols(self) -> int:
        """The number of columns."""
        return self._cols

    def shape(self) -> tuple[int, int]:
        """The shape as ``(rows, cols)``."""
        return (self._rows, self._cols)

    def nnz(self) -> int:
        """The number of stored entries."""
        return len(self._data)

    def is_csr(self) -> bool:
        """True when the matrix is stored row by row."""
        return self._storage is CompressedStorage.CSR

    def _inner_dim(self) -> int:
        return self._cols if self.is_csr() else self._rows

    def outer_iterator(self) -> Iterator[CsVec]:
        """Yield each outer slice (a row for CSR, a column for CSC) as a CsVec."""
        inner = self._inner_dim()
        for start, stop in pairwise(self._indptr):
            yield CsVec(inner, self._indices[start:stop], self._data[start:stop])

    def triplets(self) -> TripletIter:
        """The stored entries as a TripletIter, in storage order."""
        row_inds: list[int] = []
        col_inds: list[int] = []
        for outer, vec in enumerate(self.outer_iterator()):
            for inner, _ in vec:
                if self.is_csr():
                    row_inds.append(outer)
                    col_inds.append(inner)
                else:
                    row_inds.append(inner)
                    col_inds.append(outer)
        return TripletIter(self.shape(), row_inds, col_inds, list(self._data))

    def to_other_storage(self) -> CompressedMatrix:
        """The same matrix in the opposite storage order."""
        return self.triplets().to_cs(self._storage.other())


class TripletIter:
    """Sparse matrix entries given as parallel row, column and value lists.

    Iterating yields ``(value, (row, col))``. Duplicate coordinates are
    allowed and are summed when compressing.
    """

    def __init__(
        self,
        shape: tuple[int, int],
        row_inds: Iterable[int],
        col_inds: Iterable[int],
        data: Iterable[Any],
    ) -> None:
        rows, cols = shape
        self._rows = rows
        self._cols = cols
        self._row_inds = [operator.index(i) for i in row_inds]
        self._col_inds = [operator.index(i) for i in col_inds]
        self._data = list(data)
        if not len(self._row_inds) == len(self._col_inds) == len(self._data):
            raise ValueError("row indices, column indices and data differ in length")
        if any(r < 0 or r >= rows for r in self._row_inds):
            raise IndexError("row index out of bounds")
        if any(c < 0 or c >= cols for c in self._col_inds):
            raise IndexError("column index out of bounds")

    def __iter__(self) -> Iterator[tuple[Any, tuple[int, int]]]:
        for row, col, value in zip(self._row_inds, self._col_inds, self._data):
            yield value, (row, col)

    def rows(self) -> int:
        """The number of rows."""
        return self._rows

    def cols(self) -> int:
        """The number of columns."""
        return self._cols

    def shape(self) -> tuple[int, int]:
        """The shape as ``(rows, cols)``."""
        return (self._rows, self._cols)

    def nnz(self) -> int:
        """The number of triplets, duplicates included."""
        return len(self._data)

    def transpose(self) -> TripletIter:
        """The triplets of the transposed matrix."""
        return TripletIter(
            (self._cols, self._rows), self._col_inds, self._row_inds, self._data
        )

    def to_cs(self, storage: CompressedStorage) -> CompressedMatrix:
        """Compress into the given storage order, summing duplicate entries."""
        storage = CompressedStorage(storage)
        csr = storage is CompressedStorage.CSR
        if csr:
            key = operator.itemgetter(0, 1)
        else:
            key = operator.itemgetter(1, 0)
        entries = sorted(zip(self._row_inds, self._col_inds, self._data), key=key)

        merged: list[list[Any]] = []
        for row, col, value in entries:
            if merged and merged[-1][0] == row and merged[-1][1] == col:
                merged[-1][2] = merged[-1][2] + value
            else:
                merged.append([row, col, value])

        outer_dims = self._rows if csr else self._cols
        counts = [0] * outer_dims
        for row, col, _ in merged:
            counts[row if csr else col] += 1
        indptr = [0, *accumulate(counts)]
        indices = [col if csr else row for row, col, _ in merged]
        data = [value for _, _, value in merged]
        return CompressedMatrix(self.shape(), indptr, indices, data, storage)

    def to_csr(self) -> CompressedMatrix:
        """Compress into row storage."""
        return self.to_cs(CompressedStorage.CSR)

    def to_csc(self) -> CompressedMatrix:
        """Compress into column storage."""
        return self.to_cs(CompressedStorage.CSC)