import pytest

from kernelbench.edn import (
    IN_A,
    IN_B,
    codebook,
    fir,
    fir_no_red_ld,
    iir1,
    jpegdct,
    latsynth,
    mac,
    run_benchmark,
    vec_mpy1,
    verify_benchmark,
)


@pytest.fixture(scope="module")
def result():
    return run_benchmark(1)


def test_benchmark_verifies(result):
    assert verify_benchmark(result) is True


def test_benchmark_scalars(result):
    _, c, d, e = result
    assert c == 10243
    assert d == -441886230
    assert e == -441886230


def test_benchmark_output_values(result):
    output = result[0]
    assert len(output) == 200
    assert output[:4] == [3760, 4269, 3126, 1030]
    assert output[100] == 1968
    assert all(v == 0 for v in output[101:])


def test_repeated_runs_are_identical(result):
    assert run_benchmark(2) == result


def test_tampered_result_fails(result):
    output, c, d, e = result
    changed = list(output)
    changed[0] += 1
    assert verify_benchmark((changed, c, d, e)) is False
    assert verify_benchmark((output, c + 1, d, e)) is False


def test_run_benchmark_rejects_zero_repeat():
    with pytest.raises(ValueError):
        run_benchmark(0)


def test_vec_mpy1_on_reference_inputs_stays_short():
    out = vec_mpy1(IN_A, IN_B, 3)
    assert len(out) == 200
    assert all(-32768 <= v <= 32767 for v in out)
    assert list(out[150:]) == list(IN_A[150:])


def test_vec_mpy1_zero_scaler_leaves_y():
    y = list(range(200))
    assert vec_mpy1(y, IN_B, 0) == y


def test_vec_mpy1_wraps_to_short():
    y = [-32768] * 150 + [7] * 10
    x = [-1] * 150
    out = vec_mpy1(y, x, 1)
    assert out[:150] == [32767] * 150
    assert out[150:] == [7] * 10


def test_vec_mpy1_does_not_mutate_input():
    y = list(IN_A)
    vec_mpy1(y, IN_B, 3)
    assert y == list(IN_A)


def test_mac_with_zero_b_returns_inputs():
    sqr, total = mac(IN_A, [0] * 150, 5, 9)
    assert (sqr, total) == (5, 9)


def test_mac_sum_of_squares_is_not_below_start():
    sqr, _ = mac(IN_A, IN_B, 3, 0)
    assert sqr >= 3


def test_fir_identity_tap():
    data = [v % 1000 - 500 for v in range(120)]
    coeff = [1 << 15] + [0] * 49
    assert fir(data, coeff) == data[:50]


def test_fir_no_red_ld_identity_tap():
    data = [(v * 7) % 301 - 150 for v in range(140)]
    taps = [1 << 15] + [0] * 31
    assert fir_no_red_ld(data, taps) == data[:100]


def test_latsynth_zero_coefficients_shift():
    b = list(range(100))
    out, f = latsynth(b, [0] * 100, 100, 0)
    assert f == 0
    assert out == [0] + list(range(99))
    assert b == list(range(100))


def test_latsynth_rejects_bad_length():
    with pytest.raises(ValueError):
        latsynth([1, 2], [1, 2], 0, 0)


def test_iir1_zero_coefficients_passes_sample():
    x, state = iir1([0] * 200, [42], [0] * 100 + [5] * 100)
    assert x == 42
    assert state[0:100:2] == [42] * 50
    assert state[1:100:2] == [0] * 50
    assert state[100:] == [5] * 100


def test_codebook_returns_g():
    assert codebook(1, 1, 17, 9, -123456, IN_A, 3, 1) == -123456


def test_jpegdct_zero_block_stays_zero():
    d = [0] * 64 + [11] * 8
    out = jpegdct(d, IN_B)
    assert out == d


def test_jpegdct_leaves_tail_untouched():
    out = jpegdct(list(IN_A), IN_B)
    assert out[64:] == list(IN_A[64:])
    assert len(out) == len(IN_A)


@pytest.mark.parametrize(
    "call",
    [
        lambda: vec_mpy1([0] * 10, [0] * 150, 1),
        lambda: mac([0] * 150, [0] * 3, 0, 0),
        lambda: fir([0] * 50, [0] * 50),
        lambda: fir_no_red_ld([0] * 100, [0] * 32),
        lambda: iir1([0] * 100, [0], [0] * 100),
        lambda: jpegdct([0] * 63, [0] * 12),
    ],
)
def test_short_inputs_rejected(call):
    with pytest.raises(ValueError):
        call()