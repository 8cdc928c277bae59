# domain/entities/rider.py
from dataclasses import dataclass, field

from ride_fares.domain.entities.ride import Ride
from ride_fares.domain.reporting import describe_all


@dataclass
class Rider:
    id: int
    name: str
    requested_rides: list[Ride | None] = field(default_factory=list)

    # append-only: riders keep their full history
    def request_ride(self, ride: Ride | None) -> None:
        self.requested_rides.append(ride)

    def history(self) -> str:
        header = (
            f"Rider ID: {self.id} | Name: {self.name}"
            f" | Ride history ({len(self.requested_rides)}):"
        )
        return "\n".join([header, *describe_all(self.requested_rides)])
