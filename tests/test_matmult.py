from itertools import islice

import pytest

from kernelbench.matmult import (
    multiply,
    random_integers,
    reference_matrices,
    run_benchmark,
    verify_benchmark,
)


def test_random_integers_in_range_and_reproducible():
    first = list(islice(random_integers(0), 1000))
    assert first == list(islice(random_integers(0), 1000))
    assert all(0 <= value < 8095 for value in first)


def test_random_integers_first_value():
    assert next(random_integers(0)) == 81


def test_reference_matrices_follow_stream():
    a, b = reference_matrices()
    stream = list(islice(random_integers(0), 800))
    assert len(a) == 20 and all(len(row) == 20 for row in a)
    assert [v for row in a for v in row] == stream[:400]
    assert [v for row in b for v in row] == stream[400:]


def test_multiply_by_identity():
    a, _ = reference_matrices()
    identity = [[int(i == j) for j in range(20)] for i in range(20)]
    assert multiply(a, identity) == a
    assert multiply(identity, a) == a


def test_multiply_rectangular_shape():
    a = [[1, 2, 3]]
    b = [[1], [1], [1]]
    assert multiply(a, b) == [[6]]
    assert multiply(b, a) == [[1, 2, 3], [1, 2, 3], [1, 2, 3]]


def test_multiply_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_multiply_rejects_empty():
    with pytest.raises(ValueError):
        multiply([], [[1]])


def test_benchmark_result_verifies():
    result = run_benchmark(2)
    assert result[0][0] == 291018000
    assert result[19][19] == 289753485
    assert verify_benchmark(result)


def test_altered_result_fails_verification():
    result = run_benchmark(1)
    result[5][7] += 1
    assert not verify_benchmark(result)


def test_repeat_must_be_positive():
    with pytest.raises(ValueError):
        run_benchmark(0)