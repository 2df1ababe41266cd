"""Two-segment polyline planning under a fixed set of allowed slopes."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from wplace_route.config import PlannerConfig
from wplace_route.core.blocks import chunk_address, tile_address
from wplace_route.core.models import PixelDelta, PlanOptions, RoutePlan, WorldPoint
from wplace_route.core.slopes import EXACT_EPS, bracket, normalize_slope_set

log = logging.getLogger(__name__)


def _round_half_up(v: float) -> int:
    return math.floor(v + 0.5)


@dataclass(frozen=True)
class _Candidate:
    order: str
    bend: WorldPoint
    end: WorldPoint


def solve_runs(dx: int, dy: float, a: float, b: float) -> tuple[int, int]:
    """
    Integer split ``(run_a, run_b)`` with ``run_a + run_b == dx`` such that
    ``a * run_a + b * run_b`` is as close to *dy* as rounding allows.
    """
    if abs(b - a) < EXACT_EPS:
        run_b = 0
    else:
        run_b = _round_half_up((dy - a * dx) / (b - a))
    run_b = max(0, min(dx, run_b))
    return dx - run_b, run_b


def _vertices(points: Sequence[WorldPoint], config: PlannerConfig):
    return (
        [chunk_address(p, config) for p in points],
        [tile_address(p, config) for p in points],
    )


def plan_polyline(
    start: WorldPoint,
    end: WorldPoint,
    config: PlannerConfig,
    options: Optional[PlanOptions] = None,
    slope_set: Optional[Sequence[float]] = None,
) -> RoutePlan:
    """
    Approximate the straight move *start* -> *end* with at most two segments,
    each running along one slope of the configured set.

    The target slope ``dy/dx`` is bracketed by two allowed slopes ``a <= b``;
    ``run_a`` horizontal steps are taken along ``a`` and ``run_b`` along ``b``.
    Both orderings are built and, unless ``options.order`` forces one, the one
    whose end lands closer to the requested end wins (ties go to a-first).
    The leftover offset is reported in ``residual_error``, never corrected.
    """
    options = options or PlanOptions()
    slopes = normalize_slope_set(slope_set) if slope_set is not None else config.slope_set

    if options.round_to_int:
        x0, y0 = _round_half_up(start.x), _round_half_up(start.y)
        x1, y1 = _round_half_up(end.x), _round_half_up(end.y)
    else:
        x0, y0, x1, y1 = start.x, start.y, end.x, end.y

    # Work left-to-right; mirror x back on output only.
    flipped = x1 < x0
    if flipped:
        x0, x1 = -x0, -x1

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = -1 if flipped else 1
    start_w = WorldPoint(x=sx * x0, y=y0)

    if dx == 0:
        end_w = WorldPoint(x=sx * x1, y=y1)
        poly = [start_w, end_w]
        blocks, tiles = _vertices(poly, config)
        return RoutePlan(
            start=start_w,
            end=end_w,
            target=end,
            polyline_world=poly,
            polyline_blocks=blocks,
            polyline_tiles=tiles,
            residual_error=PixelDelta(dx=end_w.x - end.x, dy=end_w.y - end.y),
        )

    a, b = bracket(dy / dx, slopes)
    run_a, run_b = solve_runs(dx, dy, a, b)
    sy = 1 if y1 >= y0 else -1

    def build(order: str, first_slope: float, first_run: int) -> _Candidate:
        rise = a * run_a + b * run_b
        return _Candidate(
            order=order,
            bend=WorldPoint(x=start_w.x + sx * first_run, y=y0 + sy * first_slope * first_run),
            end=WorldPoint(x=start_w.x + sx * dx, y=y0 + sy * rise),
        )

    cand_a = build("a-first", a, run_a)
    cand_b = build("b-first", b, run_b)

    if options.order == "a-first":
        chosen = cand_a
    elif options.order == "b-first":
        chosen = cand_b
    else:
        err_a = math.hypot(cand_a.end.x - end.x, cand_a.end.y - end.y)
        err_b = math.hypot(cand_b.end.x - end.x, cand_b.end.y - end.y)
        chosen = cand_a if err_a <= err_b else cand_b

    log.debug(
        "plan dx=%s dy=%s bracket=(%.4f, %.4f) runs=(%d, %d) order=%s flipped=%s",
        dx, dy, a, b, run_a, run_b, chosen.order, flipped,
    )

    poly: List[WorldPoint] = [start_w, chosen.bend, chosen.end]
    blocks, tiles = _vertices(poly, config)
    return RoutePlan(
        start=start_w,
        bend=chosen.bend,
        end=chosen.end,
        target=end,
        slope_a=a,
        slope_b=b,
        run_a=run_a,
        run_b=run_b,
        order_used=chosen.order,
        polyline_world=poly,
        polyline_blocks=blocks,
        polyline_tiles=tiles,
        residual_error=PixelDelta(dx=chosen.end.x - end.x, dy=chosen.end.y - end.y),
    )
