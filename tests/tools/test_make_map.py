# tests/tools/test_make_map.py
import json

from wplace_route.config import PlannerConfig
from wplace_route.core.engine import plan_from_geo
from wplace_route.core.models import GeoPoint
from wplace_route.tools.make_map import build_vertices, main, render_html


def _saved_plan():
    plan = plan_from_geo(
        GeoPoint(lat=35.681236, lng=139.767125), GeoPoint(lat=35.658034, lng=139.701636), PlannerConfig()
    )
    return plan.model_dump(mode="json")


def test_build_vertices_names_each_point():
    verts = build_vertices(_saved_plan())
    assert [v["name"] for v in verts] == ["start", "bend", "end"]
    assert verts[0]["chunk"]["modulus"] == 4000
    assert verts[2]["tile"]["modulus"] == 1000


def test_render_html_embeds_vertices():
    html = render_html(_saved_plan())
    assert "L.polyline" in html
    assert '"name": "bend"' in html
    assert "requested end" in html


def test_main_writes_map(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "trips").mkdir()
    (tmp_path / "trips" / "last_run_plan.json").write_text(json.dumps(_saved_plan()), encoding="utf-8")
    main()
    assert (tmp_path / "trips" / "last_run_map.html").exists()
