# domain/reporting.py
from collections.abc import Iterable

from ride_fares.app.protocols import Fare


def money(x: float) -> str:
    return f"${x:.2f}"


def total_revenue(rides: Iterable[Fare | None]) -> float:
    """Sum of fares over `rides`; missing (None) references are skipped."""
    return sum((r.fare() for r in rides if r is not None), 0.0)


def describe_all(rides: Iterable[Fare | None]) -> list[str]:
    return [r.describe() for r in rides if r is not None]
