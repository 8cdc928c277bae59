# ride_fares/io/business_events.py

from dataclasses import dataclass


def to_cents(x: float) -> int:
    return int(round(x * 100))


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within a run
    name: str  # stable event name


@dataclass
class RideCreatedBiz(BizEvent):
    ride_id: int
    kind: str
    pickup: str
    dropoff: str
    distance_miles: float
    fare_cents: int


@dataclass
class RideAssignedBiz(BizEvent):
    ride_id: int | None
    driver_id: int
    fare_cents: int | None = None  # None when a missing ride was assigned
    assigned_count: int = 0


@dataclass
class RideRequestedBiz(BizEvent):
    ride_id: int | None
    rider_id: int
    requested_count: int = 0


@dataclass
class RidesClearedBiz(BizEvent):
    driver_id: int
    dropped: int
