"""Real roots of cubic polynomials."""

from __future__ import annotations

import math

PI = 4 * math.atan(1)


def solve_cubic(a: float, b: float, c: float, d: float) -> tuple[float, ...]:
    """Return the real roots of a*x**3 + b*x**2 + c*x + d.

    Three roots are returned when the discriminant allows, otherwise one.
    A zero leading coefficient raises ZeroDivisionError.
    """
    a1 = b / a
    a2 = c / a
    a3 = d / a
    q = (a1 * a1 - 3.0 * a2) / 9.0
    r = (2.0 * a1 * a1 * a1 - 9.0 * a1 * a2 + 27.0 * a3) / 54.0
    r2_q3 = r * r - q * q * q

    if r2_q3 <= 0:
        q3 = q * q * q
        ratio = r / math.sqrt(q3) if q3 > 0 else 0.0
        theta = math.acos(max(-1.0, min(1.0, ratio)))
        scale = -2.0 * math.sqrt(q)
        return tuple(
            scale * math.cos((theta + k * PI) / 3.0) - a1 / 3.0 for k in (0.0, 2.0, 4.0)
        )

    x = (math.sqrt(r2_q3) + abs(r)) ** (1 / 3.0)
    x += q / x
    if r >= 0.0:
        x = -x
    return (x - a1 / 3.0,)


def _steps(start: float, stop: float, step: float):
    value = start
    while (value < stop) if step > 0 else (value > stop):
        yield value
        value += step


def run_benchmark(repeat: int) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Solve the reference cubics `repeat` times.

    Returns the roots of the two checked equations from the last run.
    """
    first: tuple[float, ...] = ()
    second: tuple[float, ...] = ()
    for _ in range(repeat):
        first = solve_cubic(1.0, -10.5, 32.0, -30.0)
        second = solve_cubic(1.0, -4.5, 17.0, -30.0)
        solve_cubic(1.0, -3.5, 22.0, -31.0)
        solve_cubic(1.0, -13.7, 1.0, -35.0)
        for a1 in _steps(1.0, 3.0, 1.0):
            for b1 in _steps(10.0, 8.0, -1.0):
                for c1 in _steps(5.0, 6.0, 0.5):
                    for d1 in _steps(-1.0, -3.0, -1.0):
                        solve_cubic(a1, b1, c1, d1)
    return first, second


def _close(x: float, y: float) -> bool:
    return math.isclose(x, y, rel_tol=1e-9, abs_tol=1e-12)


def verify_benchmark(result: tuple[tuple[float, ...], tuple[float, ...]]) -> bool:
    """Check the roots of the two reference equations."""
    first, second = result
    expected_first = (2.0, 6.0, 2.5)
    return (
        len(first) == 3
        and all(_close(x, y) for x, y in zip(first, expected_first))
        and len(second) == 1
        and _close(second[0], 2.5)
    )