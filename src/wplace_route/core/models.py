from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class GeoPoint(_Frozen):
    lat: float
    lng: float


class WorldPoint(_Frozen):
    """Real-valued pixel coordinate in the global raster."""

    x: float
    y: float


class PixelDelta(_Frozen):
    dx: float
    dy: float


class BlockAddress(_Frozen):
    """A pixel expressed as block index plus whole-pixel offset inside the block."""

    block_x: int
    block_y: int
    local_x: int = Field(ge=0)
    local_y: int = Field(ge=0)
    modulus: int = Field(gt=0)


class ProjectedPoint(_Frozen):
    geo: GeoPoint
    world: WorldPoint
    chunk: BlockAddress
    tile: BlockAddress


class PlanOptions(_Frozen):
    order: Literal["auto", "a-first", "b-first"] = "auto"
    round_to_int: bool = True


class RoutePlan(_Frozen):
    start: WorldPoint
    bend: Optional[WorldPoint] = None  # None for a straight vertical plan
    end: WorldPoint
    target: WorldPoint  # requested end, before rounding

    slope_a: Optional[float] = None
    slope_b: Optional[float] = None
    # whole pixels unless rounding was disabled for the plan
    run_a: Union[int, float] = 0
    run_b: Union[int, float] = 0
    order_used: Optional[Literal["a-first", "b-first"]] = None

    polyline_world: List[WorldPoint]
    polyline_blocks: List[BlockAddress]  # chunk modulus
    polyline_tiles: List[BlockAddress]   # tile modulus
    residual_error: PixelDelta


class PlanInputs(_Frozen):
    p1: ProjectedPoint
    p2: ProjectedPoint


class GeoRoutePlan(RoutePlan):
    inputs: PlanInputs
    polyline_geo: List[GeoPoint]
