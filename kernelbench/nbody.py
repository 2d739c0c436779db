"""Energy of the Jovian planets and the sun, as in the classic n-body kernel."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

PI = 3.141592653589793
SOLAR_MASS = 4 * PI * PI
DAYS_PER_YEAR = 365.24
ENERGY_SAMPLES = 100
EXPECTED_TOTAL_ENERGY = -16.907516382852478


@dataclass
class Body:
    """A point mass with position x and velocity v."""

    x: list[float]
    v: list[float]
    mass: float


def solar_bodies() -> list[Body]:
    """Fresh copies of the sun, Jupiter, Saturn, Uranus and Neptune."""
    return [
        Body([0.0, 0.0, 0.0], [0.0, 0.0, 0.0], SOLAR_MASS),
        Body(
            [4.84143144246472090e00, -1.16032004402742839e00, -1.03622044471123109e-01],
            [
                1.66007664274403694e-03 * DAYS_PER_YEAR,
                7.69901118419740425e-03 * DAYS_PER_YEAR,
                -6.90460016972063023e-05 * DAYS_PER_YEAR,
            ],
            9.54791938424326609e-04 * SOLAR_MASS,
        ),
        Body(
            [8.34336671824457987e00, 4.12479856412430479e00, -4.03523417114321381e-01],
            [
                -2.76742510726862411e-03 * DAYS_PER_YEAR,
                4.99852801234917238e-03 * DAYS_PER_YEAR,
                2.30417297573763929e-05 * DAYS_PER_YEAR,
            ],
            2.85885980666130812e-04 * SOLAR_MASS,
        ),
        Body(
            [1.28943695621391310e01, -1.51111514016986312e01, -2.23307578892655734e-01],
            [
                2.96460137564761618e-03 * DAYS_PER_YEAR,
                2.37847173959480950e-03 * DAYS_PER_YEAR,
                -2.96589568540237556e-05 * DAYS_PER_YEAR,
            ],
            4.36624404335156298e-05 * SOLAR_MASS,
        ),
        Body(
            [1.53796971148509165e01, -2.59193146099879641e01, 1.79258772950371181e-01],
            [
                2.68067772490389322e-03 * DAYS_PER_YEAR,
                1.62824170038242295e-03 * DAYS_PER_YEAR,
                -9.51592254519715870e-05 * DAYS_PER_YEAR,
            ],
            5.15138902046611451e-05 * SOLAR_MASS,
        ),
    ]


_EXPECTED = (
    (
        (0.0, 0.0, 0.0),
        (-0.000387663407198742665776131088862, -0.0032753590371765706722173572274,
         2.39357340800030020670947916717e-05),
        39.4784176043574319692197605036,
    ),
    (
        (4.84143144246472090230781759601, -1.16032004402742838777840006514,
         -0.103622044471123109232735259866),
        (0.606326392995832019749968821998, 2.81198684491626016423992950877,
         -0.0252183616598876288172892401462),
        0.0376936748703894930478952574049,
    ),
    (
        (8.34336671824457987156620220048, 4.1247985641243047894022311084,
         -0.403523417114321381049535375496),
        (-1.01077434617879236000703713216, 1.82566237123041186229954746523,
         0.00841576137658415351916474378413),
        0.0112863261319687668143840753032,
    ),
    (
        (12.8943695621391309913406075793, -15.1111514016986312469725817209,
         -0.223307578892655733682204299839),
        (1.08279100644153536414648897335, 0.868713018169608219842814378353,
         -0.0108326374013636358983880825235),
        0.0017237240570597111687795033319,
    ),
    (
        (15.3796971148509165061568637611, -25.9193146099879641042207367718,
         0.179258772950371181309492385481),
        (0.979090732243897976516677772452, 0.594698998647676169149178804219,
         -0.0347559555040781037460462243871),
        0.00203368686992463042206846779436,
    ),
)


def offset_momentum(bodies: Sequence[Body]) -> None:
    """Adjust the first body's velocity so the system's total momentum is zero."""
    if not bodies:
        return
    anchor = bodies[0]
    for body in bodies:
        for k in range(3):
            anchor.v[k] -= body.v[k] * body.mass / SOLAR_MASS


def bodies_energy(bodies: Sequence[Body]) -> float:
    """Total kinetic plus pairwise gravitational potential energy."""
    e = 0.0
    for i, body in enumerate(bodies):
        e += body.mass * (body.v[0] * body.v[0] + body.v[1] * body.v[1]
                          + body.v[2] * body.v[2]) / 2.0
        for other in bodies[i + 1:]:
            dx = [a - b for a, b in zip(body.x, other.x)]
            distance = math.sqrt(dx[0] * dx[0] + dx[1] * dx[1] + dx[2] * dx[2])
            e -= (body.mass * other.mass) / distance
    return e


def run_benchmark(repeat: int) -> tuple[float, list[Body]]:
    """Offset momentum and sum the energy 100 times, `repeat` times over.

    Returns the summed energy of the last run and the bodies.
    """
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    bodies = solar_bodies()
    total = 0.0
    for _ in range(repeat):
        offset_momentum(bodies)
        total = 0.0
        for _ in range(ENERGY_SAMPLES):
            total += bodies_energy(bodies)
    return total, bodies


def _close(x: float, y: float) -> bool:
    return math.isclose(x, y, rel_tol=1e-9, abs_tol=1e-12)


def verify_benchmark(result: tuple[float, Sequence[Body]]) -> bool:
    """A run is correct when the total energy and the bodies match known values."""
    total, bodies = result
    if not _close(total, EXPECTED_TOTAL_ENERGY):
        return False
    if len(bodies) != len(_EXPECTED):
        return False
    for body, (x, v, mass) in zip(bodies, _EXPECTED):
        if not all(_close(a, b) for a, b in zip(body.x, x)):
            return False
        if not all(_close(a, b) for a, b in zip(body.v, v)):
            return False
        if not _close(body.mass, mass):
            return False
    return True