# domain/entities/ride.py
from dataclasses import dataclass
from math import isfinite
from typing import ClassVar

from ride_fares.domain.errors import InvalidArgument
from ride_fares.domain.reporting import money


def _as_number(label: str, v) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{label} must be a number, got {v!r}")


@dataclass(frozen=True)
class Ride:
    """
    A single trip with fixed endpoints and distance.
    The base tier charges a flat per-mile rate with a $2.00 floor.
    Fares are derived on every call, never stored.
    """

    id: int
    pickup: str
    dropoff: str
    distance_miles: float

    kind: ClassVar[str] = "base"
    prefix: ClassVar[str] = ""

    def __post_init__(self):
        self.check_args(self.pickup, self.dropoff, self.distance_miles)

    @classmethod
    def check_args(cls, pickup: str, dropoff: str, distance_miles: float) -> None:
        for label, v in (("pickup", pickup), ("dropoff", dropoff)):
            if not isinstance(v, str) or not v.strip():
                raise InvalidArgument(f"{label} must be a non-empty string")
        d = _as_number("distance_miles", distance_miles)
        if not isfinite(d):
            raise InvalidArgument("distance_miles must be finite")
        if d < 0:
            raise InvalidArgument(f"distance_miles must be >= 0, got {distance_miles}")

    def fare(self) -> float:
        per_mile = 1.0
        return max(2.0, per_mile * self.distance_miles)

    def describe(self) -> str:
        return (
            f"{self.prefix}Ride #{self.id}"
            f" | From: {self.pickup} -> To: {self.dropoff}"
            f" | Distance: {self.distance_miles:.2f} miles"
            f" | Fare: {money(self.fare())}"
        )


@dataclass(frozen=True)
class StandardRide(Ride):
    kind: ClassVar[str] = "standard"
    prefix: ClassVar[str] = "[Standard] "

    def fare(self) -> float:
        per_mile, booking_fee = 1.5, 1.0
        return max(3.0, per_mile * self.distance_miles + booking_fee)


@dataclass(frozen=True)
class PremiumRide(Ride):
    multiplier: float = 2.0  # scales the distance component only

    kind: ClassVar[str] = "premium"
    prefix: ClassVar[str] = "[Premium]  "

    def __post_init__(self):
        self.check_args(self.pickup, self.dropoff, self.distance_miles, multiplier=self.multiplier)

    @classmethod
    def check_args(
        cls, pickup: str, dropoff: str, distance_miles: float, multiplier: float = 2.0
    ) -> None:
        super().check_args(pickup, dropoff, distance_miles)
        m = _as_number("multiplier", multiplier)
        if not isfinite(m) or m < 0:
            raise InvalidArgument(f"multiplier must be finite and >= 0, got {multiplier}")

    def fare(self) -> float:
        per_mile, surge = 2.5, 2.0
        return max(10.0, per_mile * self.distance_miles * self.multiplier + surge)
