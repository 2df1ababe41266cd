from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List


VERTEX_COLOR = {
    "start": "#2ecc71",
    "bend": "#f1c40f",
    "end": "#e74c3c",
}


def build_vertices(plan: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Flatten a saved plan into one marker record per polyline vertex."""
    geo = plan.get("polyline_geo") or []
    names = ["start", "bend", "end"] if len(geo) == 3 else ["start", "end"]
    out = []
    for name, g, w, c, t in zip(
        names, geo, plan["polyline_world"], plan["polyline_blocks"], plan["polyline_tiles"]
    ):
        out.append(
            {
                "name": name,
                "lat": g["lat"],
                "lng": g["lng"],
                "color": VERTEX_COLOR.get(name, "#3498db"),
                "world": w,
                "chunk": c,
                "tile": t,
            }
        )
    return out


def render_html(plan: Dict[str, Any]) -> str:
    vertices = build_vertices(plan)
    target = plan.get("inputs", {}).get("p2", {}).get("geo")

    return f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>wplace-route – Last Run Map</title>
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css" />
  <style>
    body {{ margin: 0; font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; }}
    #map {{ height: 100vh; width: 100vw; }}
    .popup pre {{ white-space: pre-wrap; font-size: 12px; }}
  </style>
</head>
<body>
<div id="map"></div>
<script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"></script>
<script>
  const vertices = {json.dumps(vertices)};
  const target = {json.dumps(target)};

  const map = L.map('map');

  L.tileLayer('https://{{s}}.tile.openstreetmap.org/{{z}}/{{x}}/{{y}}.png', {{
    maxZoom: 19,
    attribution: '&copy; OpenStreetMap contributors'
  }}).addTo(map);

  function fmt(obj) {{
    try {{ return JSON.stringify(obj, null, 2); }} catch(e) {{ return String(obj); }}
  }}

  vertices.forEach((v) => {{
    const popup = `
      <div class="popup">
        <b>${{v.name}}</b><br/>
        <b>Lat/Lng:</b> ${{v.lat.toFixed(6)}}, ${{v.lng.toFixed(6)}}<br/>
        <b>Chunk:</b> ${{v.chunk.block_x}}, ${{v.chunk.block_y}} @ ${{v.chunk.local_x}}, ${{v.chunk.local_y}}<br/>
        <b>Tile:</b> ${{v.tile.block_x}}, ${{v.tile.block_y}}<br/>
        <b>World:</b>
        <pre>${{fmt(v.world)}}</pre>
      </div>
    `;
    L.circleMarker([v.lat, v.lng], {{ radius: 6, color: v.color }}).addTo(map).bindPopup(popup);
  }});

  L.polyline(vertices.map(v => [v.lat, v.lng]), {{ color: '#3498db', weight: 4, opacity: 0.9 }}).addTo(map);

  if (target) {{
    L.circleMarker([target.lat, target.lng], {{ radius: 4, color: '#7f8c8d', dashArray: '2 4' }})
      .addTo(map).bindPopup('requested end');
  }}

  const bounds = L.latLngBounds(vertices.map(v => [v.lat, v.lng]));
  map.fitBounds(bounds.pad(0.5));
</script>
</body>
</html>
"""


def main() -> None:
    trips_dir = Path("trips")
    plan_path = trips_dir / "last_run_plan.json"
    out_path = trips_dir / "last_run_map.html"

    plan = json.loads(plan_path.read_text(encoding="utf-8"))
    if not plan.get("polyline_geo"):
        raise SystemExit("No plan found in trips/last_run_plan.json")

    out_path.write_text(render_html(plan), encoding="utf-8")
    print(f"Wrote: {out_path.resolve()}")


if __name__ == "__main__":
    main()
