# tests/test_cli.py
import json

import pytest

from wplace_route import cli

TOKYO_URL = "https://wplace.live/?lat=35.681236&lng=139.767125&zoom=18"
SHIBUYA_URL = "https://wplace.live/?lat=35.658034&lng=139.701636&zoom=18"


def test_cli_from_urls_saves_plan(tmp_path, capsys):
    code = cli.main([TOKYO_URL, SHIBUYA_URL, "--out", str(tmp_path)])
    assert code == 0
    saved = json.loads((tmp_path / "last_run_plan.json").read_text(encoding="utf-8"))
    assert len(saved["polyline_world"]) == 3
    assert saved["inputs"]["p1"]["geo"]["lat"] == 35.681236
    out = capsys.readouterr().out
    assert "Residual error" in out


def test_cli_from_latlng_with_debug_file(tmp_path):
    debug_file = tmp_path / "debug.json"
    code = cli.main(
        [
            "--from", "35.681236", "139.767125",
            "--to", "35.658034", "139.701636",
            "--order", "b-first",
            "--slope-preset", "slopes19",
            "--out", str(tmp_path),
            "--debug-file", str(debug_file),
        ]
    )
    assert code == 0
    data = json.loads(debug_file.read_text(encoding="utf-8"))
    assert data["order_used"] == "b-first"


def test_cli_bad_url_exits_2(tmp_path, capsys):
    code = cli.main(["https://wplace.live/?lat=1", SHIBUYA_URL, "--out", str(tmp_path)])
    assert code == 2
    assert "missing_coordinate" in capsys.readouterr().out
    assert not (tmp_path / "last_run_plan.json").exists()


def test_cli_accepts_southern_hemisphere_pair(tmp_path):
    code = cli.main(["--from", "-33.8688", "151.2093", "--to", "-33.8568", "151.2153", "--out", str(tmp_path)])
    assert code == 0
    saved = json.loads((tmp_path / "last_run_plan.json").read_text(encoding="utf-8"))
    assert saved["inputs"]["p1"]["geo"]["lat"] == -33.8688


def test_cli_pole_url_exits_2(tmp_path, capsys):
    code = cli.main(["https://wplace.live/?lat=-90&lng=0", SHIBUYA_URL, "--out", str(tmp_path)])
    assert code == 2
    assert "latitude_out_of_range" in capsys.readouterr().out
    assert not (tmp_path / "last_run_plan.json").exists()


def test_cli_pole_pair_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--from", "90", "0", "--to", "35.0", "139.0", "--out", str(tmp_path)])
    assert exc.value.code == 2
