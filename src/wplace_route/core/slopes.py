"""Allowed line slopes and bracketing of an arbitrary slope between two of them."""
from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Sequence, Tuple, Union

EXACT_EPS = 1e-9

SlopeLike = Union[str, int, float, Fraction]


def _reciprocal_set(n: int) -> Tuple[float, ...]:
    """1/n .. 1/2, 1, 2 .. n"""
    small = [float(Fraction(1, k)) for k in range(n, 1, -1)]
    big = [float(k) for k in range(2, n + 1)]
    return tuple(small + [1.0] + big)


SLOPES_9: Tuple[float, ...] = _reciprocal_set(5)
SLOPES_19: Tuple[float, ...] = _reciprocal_set(10)


def parse_slope(value: SlopeLike) -> float:
    """Parse ``"1/5"``, ``"0.25"``, ``3`` or a ``Fraction`` into a positive float."""
    if isinstance(value, str):
        try:
            s = float(Fraction(value.strip()))
        except (ValueError, ZeroDivisionError) as exc:
            raise ValueError(f"not a slope: {value!r}") from exc
    else:
        s = float(value)
    if not s > 0:
        raise ValueError(f"slopes must be strictly positive, got {value!r}")
    return s


def normalize_slope_set(values: Iterable[SlopeLike]) -> Tuple[float, ...]:
    """Sorted, de-duplicated tuple of positive slopes."""
    out = tuple(sorted({parse_slope(v) for v in values}))
    if not out:
        raise ValueError("slope set must not be empty")
    return out


def bracket(target: float, slope_set: Sequence[float]) -> Tuple[float, float]:
    """
    Tightest pair ``(a, b)`` of allowed slopes around *target*, with ``a <= b``.

    An element within ``EXACT_EPS`` of the target is returned twice: a single
    slope covers the whole run. Targets outside the set's range clamp to the
    nearest extreme. The order of *slope_set* does not matter.
    """
    closest = slope_set[0]
    for s in slope_set:
        if abs(s - target) < abs(closest - target):
            closest = s
    if abs(closest - target) < EXACT_EPS:
        return closest, closest

    below = [s for s in slope_set if s <= target]
    above = [s for s in slope_set if s >= target]
    a = max(below) if below else min(slope_set)
    b = min(above) if above else max(slope_set)
    return (a, b) if a <= b else (b, a)
