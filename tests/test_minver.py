import math

import pytest

from kernelbench.minver import (
    A_REF,
    B_REF,
    SingularMatrixError,
    minver,
    mmul,
    run_benchmark,
    verify_benchmark,
)


@pytest.fixture(scope="module")
def result():
    return run_benchmark(1)


def test_benchmark_verifies(result):
    assert verify_benchmark(result) is True


def test_product_matches_source(result):
    product = result[0]
    assert product == [
        [-27.0, 26.0, -15.0],
        [-27.0, -10.0, 33.0],
        [-39.0, 28.0, -8.0],
    ]


def test_inverse_matches_source(result):
    inverse = result[1]
    expected = [
        [0.133333325, -0.199999958, 0.2666665910],
        [-0.519999862, 0.113333330, 0.5266665220],
        [0.479999840, -0.359999895, 0.0399999917],
    ]
    for got_row, exp_row in zip(inverse, expected):
        for got, exp in zip(got_row, exp_row):
            assert math.isclose(got, exp, rel_tol=1e-5)


def test_det_matches_source(result):
    assert math.isclose(result[2], -16.6666718, rel_tol=1e-6)


def test_tampered_det_fails(result):
    product, inverse, det = result
    assert verify_benchmark((product, inverse, det + 1.0)) is False


def test_run_benchmark_rejects_zero_repeat():
    with pytest.raises(ValueError):
        run_benchmark(0)


def test_identity_inverts_to_itself():
    identity = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    inverse, det = minver(identity)
    assert inverse == identity
    assert det == 1.0


def test_diagonal_inverse():
    inverse, det = minver([[2.0, 0.0], [0.0, 4.0]])
    assert inverse == [[0.5, 0.0], [0.0, 0.25]]
    assert det == 8.0


def test_minver_does_not_mutate_input():
    a = [list(row) for row in A_REF]
    minver(a)
    assert a == [list(row) for row in A_REF]


def test_singular_matrix_raises():
    with pytest.raises(SingularMatrixError):
        minver([[1.0, 2.0], [2.0, 4.0]])


def test_zero_matrix_raises_with_det():
    with pytest.raises(SingularMatrixError) as info:
        minver([[0.0, 0.0], [0.0, 0.0]])
    assert info.value.det == 1.0


@pytest.mark.parametrize(
    "matrix, eps",
    [
        ([[1.0]], 1e-6),
        ([[1.0, 0.0], [0.0, 1.0]], 0.0),
        ([[1.0, 0.0], [0.0, 1.0]], -1.0),
        ([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], 1e-6),
    ],
)
def test_minver_rejects_bad_arguments(matrix, eps):
    with pytest.raises(ValueError):
        minver(matrix, eps)


def test_mmul_identity():
    identity = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    assert mmul(A_REF, identity) == [list(row) for row in A_REF]
    assert mmul(identity, B_REF) == [list(row) for row in B_REF]


def test_mmul_shape():
    product = mmul([[1.0, 2.0, 3.0]], [[1.0], [1.0], [1.0]])
    assert len(product) == 1 and len(product[0]) == 1


def test_mmul_dimension_mismatch():
    with pytest.raises(ValueError):
        mmul([[1.0, 2.0]], [[1.0, 2.0]])


def test_mmul_empty():
    with pytest.raises(ValueError):
        mmul([], B_REF)