# tests/core/test_slopes.py
from fractions import Fraction

import pytest

from wplace_route.core.slopes import SLOPES_9, SLOPES_19, bracket, normalize_slope_set, parse_slope


def test_presets_are_reciprocal_and_sorted():
    for slopes in (SLOPES_9, SLOPES_19):
        assert list(slopes) == sorted(slopes)
        for s in slopes:
            assert any(abs(1 / s - t) < 1e-12 for t in slopes)
    assert len(SLOPES_9) == 9
    assert len(SLOPES_19) == 19
    assert SLOPES_9[0] == pytest.approx(0.2)
    assert SLOPES_19[-1] == 10.0


@pytest.mark.parametrize("target", [0.21, 0.3, 0.5000001, 0.75, 1.5, 2.2, 4.99])
def test_bracket_contains_target_in_range(target):
    a, b = bracket(target, SLOPES_9)
    assert a <= target <= b
    assert a <= b
    # tightest: no allowed slope sits strictly between a and b
    assert not [s for s in SLOPES_9 if a < s < b]


def test_bracket_worked_example():
    a, b = bracket(0.3, SLOPES_9)
    assert a == 0.25
    assert b == pytest.approx(1 / 3)


def test_bracket_exact_match_is_degenerate():
    assert bracket(2.0, SLOPES_9) == (2.0, 2.0)
    assert bracket(1 / 3 + 1e-12, SLOPES_9) == (SLOPES_9[2], SLOPES_9[2])


def test_bracket_clamps_out_of_range():
    assert bracket(0.0, SLOPES_9) == (SLOPES_9[0], SLOPES_9[0])
    assert bracket(0.05, SLOPES_9) == (SLOPES_9[0], SLOPES_9[0])
    assert bracket(100.0, SLOPES_9) == (5.0, 5.0)


def test_finer_set_gives_tighter_bracket():
    a9, b9 = bracket(0.15, SLOPES_9)
    a19, b19 = bracket(0.15, SLOPES_19)
    assert (a9, b9) == (SLOPES_9[0], SLOPES_9[0])
    assert a19 == pytest.approx(1 / 7)
    assert b19 == pytest.approx(1 / 6)


def test_parse_slope_forms():
    assert parse_slope("1/5") == pytest.approx(0.2)
    assert parse_slope(" 3 ") == 3.0
    assert parse_slope(Fraction(1, 4)) == 0.25
    assert parse_slope(0.5) == 0.5
    for bad in ("0", "-1/2", "abc", "1/0", 0, -2.0):
        with pytest.raises(ValueError):
            parse_slope(bad)


def test_normalize_slope_set_sorts_and_dedupes():
    assert normalize_slope_set(["2", "1/2", 2, "1"]) == (0.5, 1.0, 2.0)
    with pytest.raises(ValueError):
        normalize_slope_set([])


def test_bracket_ignores_set_order():
    shuffled = (5.0, 0.25, 1.0, 0.2, 1 / 3, 3.0, 0.5, 4.0, 2.0)
    assert bracket(0.05, (0.5, 0.2)) == (0.2, 0.2)
    assert bracket(9.0, (0.5, 3.0, 1.0)) == (3.0, 3.0)
    for target in (0.05, 0.3, 0.7, 2.5, 50.0):
        assert bracket(target, shuffled) == bracket(target, SLOPES_9)
