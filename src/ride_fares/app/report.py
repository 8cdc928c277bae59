# ride_fares/app/report.py
from ride_fares.domain.reporting import describe_all, money
from ride_fares.domain.state import WorldState


def render_report(world: WorldState) -> str:
    out = ["=== Ride Sharing System Demo ===", ""]

    out.append("All rides (polymorphic display):")
    out.extend(describe_all(world.rides))
    out.append("")

    out.append("---- Driver Summaries ----")
    for d in world.drivers.values():
        out += [d.summary(), ""]

    out.append("---- Rider Histories ----")
    for r in world.riders.values():
        out += [r.history(), ""]

    out.append(f"Total revenue from all created rides: {money(world.total_revenue())}")
    out += ["", "=== End Demo ==="]
    return "\n".join(out)
