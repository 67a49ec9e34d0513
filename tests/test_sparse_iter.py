import operator

import pytest

from sparsela.sparse_iter import (
    Both,
    Left,
    Right,
    merge_binop,
    nnz_or_zip,
    nnz_zip,
    sparse_dot,
)


def vec1():
    return list(zip([0, 1, 4, 5, 7], [0.0, 1.0, 4.0, 5.0, 7.0]))


def vec2():
    return list(zip([0, 2, 4, 6, 7], [0.5, 2.5, 4.5, 6.5, 7.5]))


def pairs(indices, data):
    return list(zip(indices, data))


def test_nnz_zip_iter():
    result = list(nnz_zip(vec1(), vec2()))
    assert result == [(0, 0.0, 0.5), (4, 4.0, 4.5), (7, 7.0, 7.5)]


def test_nnz_or_zip_iter():
    result = list(nnz_or_zip(vec1(), vec2()))
    assert result == [
        Both(0, 0.0, 0.5),
        Left(1, 1.0),
        Right(2, 2.5),
        Both(4, 4.0, 4.5),
        Left(5, 5.0),
        Right(6, 6.5),
        Both(7, 7.0, 7.5),
    ]


def test_nnz_or_zip_example():
    v0 = pairs([0, 2, 4], [1.0, 2.0, 3.0])
    v1 = pairs([1, 2, 3], [-1.0, -2.0, -3.0])
    assert list(nnz_or_zip(v0, v1)) == [
        Left(0, 1.0),
        Right(1, -1.0),
        Both(2, 2.0, -2.0),
        Right(3, -3.0),
        Left(4, 3.0),
    ]


def test_nnz_zip_example():
    v0 = pairs([0, 2, 4], [1.0, 2.0, 3.0])
    v1 = pairs([1, 2, 3], [-1.0, -2.0, -3.0])
    assert list(nnz_zip(v0, v1)) == [(2, 2.0, -2.0)]


def test_nnz_or_zip_empty_operands():
    assert list(nnz_or_zip([], [])) == []
    assert list(nnz_or_zip([(3, 1)], [])) == [Left(3, 1)]
    assert list(nnz_or_zip([], [(3, 1)])) == [Right(3, 1)]


def test_nnz_or_zip_is_lazy():
    it = nnz_or_zip(iter(vec1()), iter(vec2()))
    assert next(it) == Both(0, 0.0, 0.5)
    assert next(it) == Left(1, 1.0)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (pairs([0, 2, 4, 6], [1.0] * 4), pairs([1, 3, 5, 7], [2.0] * 4), 0.0),
        (pairs([0, 2, 4, 6], [1.0] * 4), pairs([0, 2, 4, 6], [1.0] * 4), 4.0),
        (pairs([1, 3, 5, 7], [2.0] * 4), pairs([1, 3, 5, 7], [2.0] * 4), 16.0),
        (pairs([0, 2, 4, 6], [1.0] * 4), pairs([1, 2, 5, 6], [3.0] * 4), 6.0),
        (pairs([1, 3, 5, 7], [2.0] * 4), pairs([1, 2, 5, 6], [3.0] * 4), 12.0),
    ],
)
def test_sparse_dot(a, b, expected):
    assert sparse_dot(a, b) == expected


def test_sparse_dot_doc_example():
    v1 = pairs([1, 2, 4, 6], [1.0] * 4)
    v2 = pairs([1, 3, 5, 7], [2.0] * 4)
    assert sparse_dot(v1, v2) == 2.0
    assert sparse_dot(v1, v1) == 4.0
    assert sparse_dot(v2, v2) == 16.0


def test_sparse_dot_empty_is_zero():
    assert sparse_dot([], pairs([1], [5])) == 0


def test_merge_binop_addition_sample():
    a = pairs([0, 3, 5, 7], [2.0, -3.0, 7.0, -1.0])
    b = pairs([1, 3, 4, 5], [4.0, 2.0, -3.0, 1.0])
    result = list(merge_binop(a, b, operator.add, 0.0, 0.0))
    assert result == pairs([0, 1, 3, 4, 5, 7], [2.0, 4.0, -1.0, -3.0, 8.0, -1.0])


def test_merge_binop_doc_addition():
    a = pairs([0, 2, 5, 6], [1.0] * 4)
    b = pairs([1, 3, 5], [2.0] * 3)
    result = list(merge_binop(a, b, operator.add))
    assert result == pairs([0, 1, 2, 3, 5, 6], [1.0, 2.0, 1.0, 2.0, 3.0, 1.0])


def test_merge_binop_asymmetric_subtraction():
    a = pairs([0, 2], [1, 1])
    b = pairs([0, 1, 2], [1, 1, 1])
    result = list(merge_binop(a, b, operator.sub))
    assert result == pairs([0, 1, 2], [0, -1, 0])


def test_merge_binop_uses_side_zeros():
    a = pairs([0], ["x"])
    b = pairs([1], ["y"])
    result = list(merge_binop(a, b, operator.add, "L", "R"))
    assert result == [(0, "xR"), (1, "Ly")]


def test_merge_binop_complex():
    v = pairs([1, 2, 3], [0 + 1j, 3 + 1j, 4 + 0j])
    doubled = list(merge_binop(v, v, operator.add))
    assert doubled == pairs([1, 2, 3], [0 + 2j, 6 + 2j, 8 + 0j])
    assert list(merge_binop(doubled, v, operator.sub)) == v