# ride_fares/app/demo.py
import argparse
import sys
from pathlib import Path

from ride_fares.app.build import build
from ride_fares.app.report import render_report
from ride_fares.config.models import ScenarioModel

DEMO_SCENARIO = {
    "name": "demo",
    "run_id": "demo",
    "rides": [
        {"kind": "standard", "pickup": "Downtown", "dropoff": "Airport", "distance_miles": 18.4},
        {
            "kind": "premium",
            "pickup": "Mall",
            "dropoff": "University",
            "distance_miles": 7.2,
            "multiplier": 1.5,
        },
        {"kind": "standard", "pickup": "Home", "dropoff": "Office", "distance_miles": 4.5},
        {
            "kind": "premium",
            "pickup": "Hotel",
            "dropoff": "Convention Center",
            "distance_miles": 12.0,
        },
    ],
    "drivers": [
        {"id": 101, "name": "Aisha Khan", "rating": 4.92},
        {"id": 102, "name": "Carlos Mendez", "rating": 4.80},
    ],
    "riders": [
        {"id": 201, "name": "Nabiha S."},
        {"id": 202, "name": "Sam Lee"},
    ],
    "assignments": [
        {"ride": 0, "driver_id": 101, "rider_id": 201},
        {"ride": 1, "driver_id": 102, "rider_id": 201},
        {"ride": 2, "driver_id": 101, "rider_id": 202},
        {"ride": 3, "driver_id": 102, "rider_id": 202},
    ],
}


def load_scenario(path: str | None) -> ScenarioModel:
    if path is None:
        return ScenarioModel.model_validate(DEMO_SCENARIO)
    return ScenarioModel.model_validate_json(Path(path).read_text())


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="ride-fares", description="Print a ride fare report.")
    p.add_argument("--config", help="JSON scenario file (defaults to the built-in demo)")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None)
    args = p.parse_args(argv)

    model = load_scenario(args.config)
    if args.log_level:
        log = model.log.model_copy(update={"level": args.log_level})
        model = model.model_copy(update={"log": log})

    # logs share stdout with the report; off unless a level is given
    app = build(model, use_logging=args.log_level is not None)
    sys.stdout.write(render_report(app.world) + "\n")
    return 0
