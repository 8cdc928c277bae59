# tests/app/test_build_and_report.py
import copy
import json
import logging

import pytest
from pydantic import ValidationError

from ride_fares.app.build import build
from ride_fares.app.demo import DEMO_SCENARIO, main
from ride_fares.app.report import render_report
from ride_fares.domain.entities.ride import PremiumRide, StandardRide
from ride_fares.domain.errors import InvalidArgument
from ride_fares.io.ride_logging import _JsonFormatter
from ride_fares.sim.ids import RideIdIssuer


def test_build_demo_world():
    app = build(DEMO_SCENARIO, use_logging=False)
    w = app.world

    assert [r.id for r in w.rides] == [1, 2, 3, 4]
    assert [type(r) for r in w.rides] == [StandardRide, PremiumRide, StandardRide, PremiumRide]
    assert w.drivers[101].total_earnings() == pytest.approx(36.35)
    assert w.drivers[102].total_earnings() == pytest.approx(91.00)
    assert w.total_revenue() == pytest.approx(127.35)

    # rides are shared by reference, not copied
    assert w.drivers[101].assigned_rides[0] is w.riders[201].requested_rides[0] is w.rides[0]


def test_report_matches_demo_layout():
    app = build(DEMO_SCENARIO, use_logging=False)
    text = render_report(app.world)
    lines = text.splitlines()

    assert lines[0] == "=== Ride Sharing System Demo ==="
    assert lines[2] == "All rides (polymorphic display):"
    assert lines[3] == (
        "[Standard] Ride #1 | From: Downtown -> To: Airport"
        " | Distance: 18.40 miles | Fare: $28.60"
    )
    assert "Driver ID: 102 | Name: Carlos Mendez | Rating: 4.80" in lines
    assert "Total earnings from assigned rides: $91.00" in lines
    assert "Rider ID: 202 | Name: Sam Lee | Ride history (2):" in lines
    assert lines[-3] == "Total revenue from all created rides: $127.35"
    assert lines[-1] == "=== End Demo ==="


def test_build_uses_injected_issuer():
    ids = RideIdIssuer(start=100)
    app = build(DEMO_SCENARIO, use_logging=False, ids=ids)
    assert [r.id for r in app.world.rides] == [100, 101, 102, 103]
    assert ids.peek() == 104


def test_unknown_ride_kind_fails_validation():
    cfg = copy.deepcopy(DEMO_SCENARIO)
    cfg["rides"][0]["kind"] = "helicopter"
    with pytest.raises(ValidationError):
        build(cfg, use_logging=False)


def test_extra_keys_are_forbidden():
    cfg = copy.deepcopy(DEMO_SCENARIO)
    cfg["drivers"][0]["vehicle"] = "sedan"
    with pytest.raises(ValidationError):
        build(cfg, use_logging=False)


@pytest.mark.parametrize(
    "assignment",
    [{"ride": 4, "driver_id": 101}, {"ride": 0, "driver_id": 999}, {"ride": 0, "rider_id": 999}],
)
def test_bad_assignments_fail_validation(assignment):
    cfg = copy.deepcopy(DEMO_SCENARIO)
    cfg["assignments"].append(assignment)
    with pytest.raises(ValidationError):
        build(cfg, use_logging=False)


def test_negative_distance_in_config_raises_invalid_argument():
    cfg = copy.deepcopy(DEMO_SCENARIO)
    cfg["rides"][2]["distance_miles"] = -4.5
    with pytest.raises(InvalidArgument):
        build(cfg, use_logging=False)


def test_duplicate_driver_ids_are_rejected():
    cfg = copy.deepcopy(DEMO_SCENARIO)
    cfg["drivers"].append({"id": 101, "name": "Someone Else"})
    with pytest.raises(ValueError):
        build(cfg, use_logging=False)


def test_main_prints_demo_report(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Total revenue from all created rides: $127.35" in out
    assert out.rstrip().endswith("=== End Demo ===")


def test_main_reads_json_config(tmp_path, capsys):
    cfg = {
        "name": "tiny",
        "rides": [{"kind": "base", "pickup": "A", "dropoff": "B", "distance_miles": 1.0}],
        "drivers": [{"id": 1, "name": "D"}],
        "assignments": [{"ride": 0, "driver_id": 1}],
    }
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(cfg))

    assert main(["--config", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Ride #1 | From: A -> To: B | Distance: 1.00 miles | Fare: $2.00" in out
    assert "Total revenue from all created rides: $2.00" in out


def test_main_log_level_emits_json_logs(caplog, capsys):
    caplog.set_level(logging.INFO, logger="ride_fares")
    assert main(["--log-level", "INFO"]) == 0

    assigned = [rec for rec in caplog.records if rec.getMessage() == "ride_assigned"]
    assert len(assigned) == 4
    payload = json.loads(_JsonFormatter().format(assigned[0]))
    assert payload["level"] == "INFO"
    assert payload["run_id"] == "demo"
    assert payload["driver_id"] == 101
    assert "Total revenue from all created rides: $127.35" in capsys.readouterr().out
