"""FastAPI REST backend for the wplace-route planner."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wplace_route.config import settings
from wplace_route.routers import plans
from wplace_route.viewer import ViewerUrlResult, build_viewer_url, parse_viewer_url

log = logging.getLogger(__name__)

app = FastAPI(title="wplace-route", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(plans.router)


@app.get("/health")
def health():
    cfg = settings.planner_config()
    return {
        "status": "ok",
        "chunk_modulus": cfg.chunk_modulus,
        "tile_modulus": cfg.tile_modulus,
        "slopes": len(cfg.slope_set),
    }


@app.get("/viewer/parse", response_model=ViewerUrlResult)
def viewer_parse(url: str):
    return parse_viewer_url(url)


@app.get("/viewer/url")
def viewer_url(x: float, y: float, zoom: int = settings.viewer_zoom):
    return {"url": build_viewer_url(x, y, settings.planner_config(), zoom=zoom, host=settings.viewer_host)}
