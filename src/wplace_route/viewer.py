"""Links to and from the wplace.live map viewer.

Viewer URLs look like ``https://wplace.live/?lat=35.68&lng=139.76&zoom=18``.
Parsing returns an explicit :class:`ViewerUrlResult`; outer layers that prefer
exceptions use :func:`require_viewer_point`.
"""
from __future__ import annotations

import math
import re
from enum import Enum
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel

from wplace_route.config import PlannerConfig
from wplace_route.core.models import GeoPoint
from wplace_route.core.projection import to_geo

DEFAULT_HOST = "wplace.live"
DEFAULT_ZOOM = 18
MAX_LATITUDE = 90.0

# Leading decimal number, the way browsers' parseFloat reads it.
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class UrlErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    MISSING_COORDINATE = "missing_coordinate"
    LATITUDE_OUT_OF_RANGE = "latitude_out_of_range"


class ViewerUrlResult(BaseModel):
    point: Optional[GeoPoint] = None
    error: Optional[UrlErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class ViewerUrlError(ValueError):
    def __init__(self, kind: UrlErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


def _parse_float_prefix(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    m = _FLOAT_PREFIX.match(raw)
    if not m:
        return None
    try:
        v = float(m.group(1))
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def parse_viewer_url(url: str) -> ViewerUrlResult:
    try:
        parts = urlsplit(url.strip())
    except (ValueError, AttributeError):
        return ViewerUrlResult(error=UrlErrorKind.INVALID_URL, message=f"malformed URL: {url!r}")
    if not parts.scheme or not parts.netloc:
        return ViewerUrlResult(error=UrlErrorKind.INVALID_URL, message=f"malformed URL: {url!r}")

    query = parse_qs(parts.query, keep_blank_values=True)
    lat = _parse_float_prefix(query.get("lat", [None])[0])
    lng = _parse_float_prefix(query.get("lng", [None])[0])
    if lat is None or lng is None:
        return ViewerUrlResult(
            error=UrlErrorKind.MISSING_COORDINATE,
            message=f"lat / lng not found in URL: {url!r}",
        )
    if abs(lat) >= MAX_LATITUDE:
        # the projection is undefined at the poles
        return ViewerUrlResult(
            error=UrlErrorKind.LATITUDE_OUT_OF_RANGE,
            message=f"lat must lie strictly between -90 and 90, got {lat} in {url!r}",
        )
    return ViewerUrlResult(point=GeoPoint(lat=lat, lng=lng))


def require_viewer_point(url: str) -> GeoPoint:
    res = parse_viewer_url(url)
    if res.error is not None:
        raise ViewerUrlError(res.error, res.message)
    return res.point


def build_viewer_url(
    x: float,
    y: float,
    config: PlannerConfig,
    zoom: int = DEFAULT_ZOOM,
    host: str = DEFAULT_HOST,
) -> str:
    """Viewer link centred on world pixel ``(x, y)``."""
    geo = to_geo(x, y, config)
    return f"https://{host}/?lat={geo.lat!r}&lng={geo.lng!r}&zoom={int(zoom)}"
