"""Planning endpoints."""
from __future__ import annotations

import logging
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from wplace_route.config import settings
from wplace_route.core.engine import plan_from_geo, plan_from_urls
from wplace_route.core.models import GeoPoint, GeoRoutePlan, PlanOptions, RoutePlan, WorldPoint
from wplace_route.core.planner import plan_polyline
from wplace_route.viewer import ViewerUrlError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["plans"])


class LatLngIn(BaseModel):
    # the projection diverges at the poles
    lat: float = Field(..., gt=-90.0, lt=90.0)
    lng: float


class _PlanRequest(BaseModel):
    order: Optional[Literal["auto", "a-first", "b-first"]] = None
    round_to_int: Optional[bool] = None
    slope_preset: Optional[Literal["slopes9", "slopes19"]] = None

    def options(self) -> PlanOptions:
        return PlanOptions(
            order=self.order or settings.order,
            round_to_int=settings.round_to_int if self.round_to_int is None else self.round_to_int,
        )


class GeoPlanRequest(_PlanRequest):
    start: LatLngIn
    end: LatLngIn


class WorldPlanRequest(_PlanRequest):
    start: WorldPoint
    end: WorldPoint


class UrlPlanRequest(_PlanRequest):
    start_url: str
    end_url: str


@router.post("/geo", response_model=GeoRoutePlan)
def plan_geo(req: GeoPlanRequest):
    cfg = settings.planner_config(req.slope_preset)
    log.info("Planning geo (%.6f, %.6f) -> (%.6f, %.6f)",
             req.start.lat, req.start.lng, req.end.lat, req.end.lng)
    return plan_from_geo(
        GeoPoint(lat=req.start.lat, lng=req.start.lng),
        GeoPoint(lat=req.end.lat, lng=req.end.lng),
        cfg,
        req.options(),
    )


@router.post("/world", response_model=RoutePlan)
def plan_world(req: WorldPlanRequest):
    cfg = settings.planner_config(req.slope_preset)
    return plan_polyline(req.start, req.end, cfg, req.options())


@router.post("/urls", response_model=GeoRoutePlan)
def plan_urls(req: UrlPlanRequest):
    cfg = settings.planner_config(req.slope_preset)
    try:
        return plan_from_urls(req.start_url, req.end_url, cfg, req.options())
    except ViewerUrlError as e:
        raise HTTPException(status_code=422, detail={"kind": e.kind.value, "message": str(e)})
