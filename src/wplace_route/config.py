"""Centralized settings for the wplace-route planner."""
from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from wplace_route.core.slopes import SLOPES_9, SLOPES_19, normalize_slope_set

SlopePreset = Literal["slopes9", "slopes19"]
Order = Literal["auto", "a-first", "b-first"]

SLOPE_PRESETS: Dict[str, Tuple[float, ...]] = {
    "slopes9": SLOPES_9,
    "slopes19": SLOPES_19,
}


class PlannerConfig(BaseModel):
    """Immutable configuration threaded through every planning call."""

    model_config = ConfigDict(frozen=True)

    chunk_modulus: int = Field(default=4000, gt=0)
    tile_modulus: int = Field(default=1000, gt=0)
    zoom: int = Field(default=9, ge=0)
    slope_set: Tuple[float, ...] = SLOPES_9

    @field_validator("slope_set", mode="before")
    @classmethod
    def _normalize_slopes(cls, v):
        return normalize_slope_set(v)

    @model_validator(mode="after")
    def _tiles_subdivide_chunks(self) -> "PlannerConfig":
        if self.chunk_modulus % self.tile_modulus != 0:
            raise ValueError(
                f"tile_modulus {self.tile_modulus} must divide chunk_modulus {self.chunk_modulus}"
            )
        return self

    @property
    def scale(self) -> int:
        """Total raster extent in pixels along each axis."""
        return self.chunk_modulus * 2 ** self.zoom


# The two slope granularities seen in the field; neither is canonical.
REFERENCE_CONFIGS: Dict[str, PlannerConfig] = {
    name: PlannerConfig(slope_set=slopes) for name, slopes in SLOPE_PRESETS.items()
}


class Settings(BaseSettings):
    model_config = {"env_prefix": "WPLACE_ROUTE_"}

    # Raster geometry
    chunk_modulus: int = 4000         # px per chunk, also the projection scale base
    tile_modulus: int = 1000          # px per tile, must divide chunk_modulus
    zoom: int = 9                     # internal raster zoom, fixed by the map surface

    # Slopes: an explicit list wins over the preset, e.g. '["1/2", "1", "2"]'
    slope_preset: SlopePreset = "slopes9"
    slope_set: Optional[List[Union[str, float]]] = None

    # Planner defaults
    order: Order = "auto"
    round_to_int: bool = True

    # Viewer links
    viewer_host: str = "wplace.live"
    viewer_zoom: int = 18

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    def planner_config(self, slope_preset: Optional[str] = None) -> PlannerConfig:
        if self.slope_set is not None and slope_preset is None:
            slopes = self.slope_set
        else:
            slopes = SLOPE_PRESETS[slope_preset or self.slope_preset]
        return PlannerConfig(
            chunk_modulus=self.chunk_modulus,
            tile_modulus=self.tile_modulus,
            zoom=self.zoom,
            slope_set=slopes,
        )


settings = Settings()
