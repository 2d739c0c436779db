import math

import pytest

from kernelbench.nbody import (
    EXPECTED_TOTAL_ENERGY,
    SOLAR_MASS,
    Body,
    bodies_energy,
    offset_momentum,
    run_benchmark,
    solar_bodies,
    verify_benchmark,
)


def test_benchmark_verifies():
    assert verify_benchmark(run_benchmark(1))


def test_repeated_runs_give_same_result():
    total, _ = run_benchmark(3)
    assert math.isclose(total, EXPECTED_TOTAL_ENERGY, rel_tol=1e-9)
    assert verify_benchmark(run_benchmark(3))


def test_verify_rejects_wrong_energy():
    _, bodies = run_benchmark(1)
    assert not verify_benchmark((-16.0, bodies))


def test_verify_rejects_without_offset():
    bodies = solar_bodies()
    assert not verify_benchmark((EXPECTED_TOTAL_ENERGY, bodies))


def test_run_benchmark_rejects_zero():
    with pytest.raises(ValueError):
        run_benchmark(0)


def test_sun_mass():
    assert solar_bodies()[0].mass == SOLAR_MASS


def test_offset_momentum_sun_velocity():
    bodies = solar_bodies()
    offset_momentum(bodies)
    assert math.isclose(bodies[0].v[0], -0.000387663407198742665776131088862, rel_tol=1e-9)


def test_offset_momentum_zeroes_total_momentum():
    bodies = solar_bodies()
    offset_momentum(bodies)
    for k in range(3):
        momentum = sum(b.v[k] * b.mass for b in bodies)
        assert abs(momentum) < 1e-12


def test_offset_momentum_is_idempotent():
    bodies = solar_bodies()
    offset_momentum(bodies)
    first = list(bodies[0].v)
    offset_momentum(bodies)
    assert all(math.isclose(a, b, rel_tol=1e-12, abs_tol=1e-18) for a, b in zip(first, bodies[0].v))


def test_solar_bodies_are_fresh_copies():
    first = solar_bodies()
    first[1].v[0] = 123.0
    assert solar_bodies()[1].v[0] != 123.0
    assert len(solar_bodies()) == 5


def test_energy_single_body_is_kinetic():
    body = Body([0.0, 0.0, 0.0], [3.0, 0.0, 0.0], 2.0)
    assert bodies_energy([body]) == 9.0


def test_energy_two_bodies_at_rest():
    a = Body([0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0)
    b = Body([2.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0)
    assert bodies_energy([a, b]) == -0.5


def test_energy_of_offset_system_matches_total():
    bodies = solar_bodies()
    offset_momentum(bodies)
    assert math.isclose(bodies_energy(bodies) * 100, EXPECTED_TOTAL_ENERGY, rel_tol=1e-9)


def test_offset_momentum_on_empty_list():
    bodies = []
    offset_momentum(bodies)
    assert bodies == []
    assert bodies_energy(bodies) == 0.0