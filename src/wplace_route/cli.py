from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from wplace_route.config import SLOPE_PRESETS, settings
from wplace_route.core.engine import plan_from_geo
from wplace_route.core.models import GeoPoint, GeoRoutePlan, PlanOptions
from wplace_route.debug import emit_debug
from wplace_route.sinks.console import ConsoleSink
from wplace_route.sinks.file import FileSink
from wplace_route.viewer import MAX_LATITUDE, ViewerUrlError, build_viewer_url, require_viewer_point

log = logging.getLogger(__name__)


def _geo_arg(ap: argparse.ArgumentParser, flag: str, pair: List[float]) -> GeoPoint:
    lat, lng = pair
    if abs(lat) >= MAX_LATITUDE:
        ap.error(f"{flag}: lat must lie strictly between -90 and 90, got {lat}")
    return GeoPoint(lat=lat, lng=lng)


def _save_json(path: Path, obj) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")


def _resolve_points(args: argparse.Namespace) -> tuple[GeoPoint, GeoPoint]:
    if args.src is not None and args.dst is not None:
        return args.src, args.dst
    if len(args.urls) != 2:
        raise SystemExit("give two viewer URLs or --from LAT LNG --to LAT LNG")
    return require_viewer_point(args.urls[0]), require_viewer_point(args.urls[1])


def _render(console: Console, plan: GeoRoutePlan, cfg) -> None:
    if plan.slope_a is None:
        title = "Straight vertical move"
    else:
        title = (
            f"Slopes {plan.slope_a:.4g} x {plan.run_a} / {plan.slope_b:.4g} x {plan.run_b}"
            f" ({plan.order_used})"
        )
    table = Table(title=title)
    table.add_column("Vertex")
    table.add_column("World x")
    table.add_column("World y")
    table.add_column("Chunk")
    table.add_column("Local")
    table.add_column("Tile")
    table.add_column("Viewer")

    names = ["start", "bend", "end"] if len(plan.polyline_world) == 3 else ["start", "end"]
    for name, w, c, t in zip(names, plan.polyline_world, plan.polyline_blocks, plan.polyline_tiles):
        table.add_row(
            name,
            f"{w.x:.1f}",
            f"{w.y:.1f}",
            f"{c.block_x},{c.block_y}",
            f"{c.local_x},{c.local_y}",
            f"{t.block_x},{t.block_y}",
            build_viewer_url(w.x, w.y, cfg, zoom=settings.viewer_zoom, host=settings.viewer_host),
        )

    console.print(table)
    err = plan.residual_error
    console.print(f"Residual error: dx={err.dx:+.3f} dy={err.dy:+.3f} px")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="wplace-route")
    ap.add_argument("urls", nargs="*", help="Two wplace.live viewer URLs")
    ap.add_argument("--from", dest="src", nargs=2, type=float, metavar=("LAT", "LNG"), help="Start point")
    ap.add_argument("--to", dest="dst", nargs=2, type=float, metavar=("LAT", "LNG"), help="End point")
    ap.add_argument("--order", choices=["auto", "a-first", "b-first"], default=settings.order)
    ap.add_argument("--slope-preset", choices=sorted(SLOPE_PRESETS), default=None)
    ap.add_argument("--no-round", action="store_true", help="Keep fractional endpoints")
    ap.add_argument("--out", default="trips", help="Directory for last_run_plan.json")
    ap.add_argument("--debug", action="store_true", help="Print the full plan as JSON")
    ap.add_argument("--debug-file", default=None, help="Write the full plan JSON to this file")
    args = ap.parse_args(argv)
    if args.src is not None:
        args.src = _geo_arg(ap, "--from", args.src)
    if args.dst is not None:
        args.dst = _geo_arg(ap, "--to", args.dst)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    cfg = settings.planner_config(args.slope_preset)
    options = PlanOptions(order=args.order, round_to_int=settings.round_to_int and not args.no_round)
    console = Console()

    try:
        src, dst = _resolve_points(args)
    except ViewerUrlError as e:
        console.print(f"[red]{e.kind.value}[/red]: {e}")
        return 2

    plan = plan_from_geo(src, dst, cfg, options)
    _render(console, plan, cfg)

    out_path = Path(args.out) / "last_run_plan.json"
    _save_json(out_path, plan.model_dump(mode="json"))
    console.print(f"Saved: {out_path.resolve()}")

    if args.debug:
        emit_debug(plan, ConsoleSink(console))
    if args.debug_file:
        if not emit_debug(plan, FileSink(Path(args.debug_file))):
            log.error("Debug data was not written")

    return 0


if __name__ == "__main__":
    sys.exit(main())
