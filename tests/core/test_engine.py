# tests/core/test_engine.py
import pytest

from wplace_route.config import REFERENCE_CONFIGS
from wplace_route.core.engine import plan_from_geo, plan_from_urls
from wplace_route.core.models import GeoPoint, PlanOptions
from wplace_route.core.projection import to_world
from wplace_route.viewer import UrlErrorKind, ViewerUrlError

CFG = REFERENCE_CONFIGS["slopes9"]

TOKYO = GeoPoint(lat=35.681236, lng=139.767125)
SHIBUYA = GeoPoint(lat=35.658034, lng=139.701636)


def test_plan_from_geo_carries_projected_inputs():
    plan = plan_from_geo(TOKYO, SHIBUYA, CFG)
    assert plan.inputs.p1.geo == TOKYO
    assert plan.inputs.p2.world == to_world(SHIBUYA.lat, SHIBUYA.lng, CFG)
    assert plan.target == plan.inputs.p2.world
    assert plan.inputs.p1.chunk.modulus == 4000
    assert plan.inputs.p1.tile.modulus == 1000


def test_plan_from_geo_splits_runs_exactly():
    plan = plan_from_geo(TOKYO, SHIBUYA, CFG)
    dx = abs(round(plan.inputs.p2.world.x) - round(plan.inputs.p1.world.x))
    assert plan.run_a + plan.run_b == dx
    assert len(plan.polyline_geo) == len(plan.polyline_world) == 3
    # Shibuya is west of Tokyo station
    assert plan.end.x < plan.start.x
    assert plan.polyline_geo[0].lat == pytest.approx(TOKYO.lat, abs=1e-3)
    assert plan.polyline_geo[-1].lng == pytest.approx(SHIBUYA.lng, abs=1e-2)


def test_plan_from_geo_honours_options():
    plan = plan_from_geo(TOKYO, SHIBUYA, CFG, PlanOptions(order="b-first"))
    assert plan.order_used == "b-first"


def test_plan_from_urls():
    u1 = f"https://wplace.live/?lat={TOKYO.lat}&lng={TOKYO.lng}&zoom=18"
    u2 = f"https://wplace.live/?lat={SHIBUYA.lat}&lng={SHIBUYA.lng}&zoom=18"
    assert plan_from_urls(u1, u2, CFG) == plan_from_geo(TOKYO, SHIBUYA, CFG)


def test_plan_from_urls_reports_bad_link():
    with pytest.raises(ViewerUrlError) as exc:
        plan_from_urls("https://wplace.live/?lat=1", "https://wplace.live/?lat=1&lng=2", CFG)
    assert exc.value.kind is UrlErrorKind.MISSING_COORDINATE
