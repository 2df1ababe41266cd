"""Spherical-Mercator projection onto the map surface's fixed-zoom pixel raster."""
from __future__ import annotations

from math import atan, degrees, log, pi, radians, sin, sinh

from wplace_route.config import PlannerConfig
from wplace_route.core.blocks import chunk_address, tile_address
from wplace_route.core.models import GeoPoint, ProjectedPoint, WorldPoint


def to_world(lat: float, lng: float, config: PlannerConfig) -> WorldPoint:
    """
    Forward transform. *lat* must lie strictly inside (-90, 90); the
    vertical term diverges at the poles and callers are expected to reject
    such input first.
    """
    scale = config.scale
    x = (lng + 180.0) / 360.0 * scale
    sin_lat = sin(radians(lat))
    y = (0.5 - log((1 + sin_lat) / (1 - sin_lat)) / (4 * pi)) * scale
    return WorldPoint(x=x, y=y)


def to_geo(x: float, y: float, config: PlannerConfig) -> GeoPoint:
    """Inverse of :func:`to_world`."""
    scale = config.scale
    lng = x / scale * 360.0 - 180.0
    lat = degrees(atan(sinh(pi - 2 * pi * y / scale)))
    return GeoPoint(lat=lat, lng=lng)


def project(lat: float, lng: float, config: PlannerConfig) -> ProjectedPoint:
    """World pixel plus chunk and tile addresses for one geographic point."""
    world = to_world(lat, lng, config)
    return ProjectedPoint(
        geo=GeoPoint(lat=lat, lng=lng),
        world=world,
        chunk=chunk_address(world, config),
        tile=tile_address(world, config),
    )
