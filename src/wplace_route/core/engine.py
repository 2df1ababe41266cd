from __future__ import annotations

from typing import Optional

from wplace_route.config import PlannerConfig
from wplace_route.core.models import GeoPoint, GeoRoutePlan, PlanInputs, PlanOptions
from wplace_route.core.planner import plan_polyline
from wplace_route.core.projection import project, to_geo
from wplace_route.viewer import require_viewer_point


def plan_from_geo(
    geo1: GeoPoint,
    geo2: GeoPoint,
    config: PlannerConfig,
    options: Optional[PlanOptions] = None,
) -> GeoRoutePlan:
    p1 = project(geo1.lat, geo1.lng, config)
    p2 = project(geo2.lat, geo2.lng, config)
    plan = plan_polyline(p1.world, p2.world, config, options or PlanOptions())

    # Back-projected vertices are for display only.
    return GeoRoutePlan(
        **dict(plan),
        inputs=PlanInputs(p1=p1, p2=p2),
        polyline_geo=[to_geo(p.x, p.y, config) for p in plan.polyline_world],
    )


def plan_from_urls(
    url1: str,
    url2: str,
    config: PlannerConfig,
    options: Optional[PlanOptions] = None,
) -> GeoRoutePlan:
    """Plan between two viewer links. Raises ``ViewerUrlError`` on a bad link."""
    return plan_from_geo(require_viewer_point(url1), require_viewer_point(url2), config, options)
