# ride_fares/domain/state.py
from dataclasses import dataclass, field

from ride_fares.domain.entities.driver import Driver
from ride_fares.domain.entities.ride import Ride
from ride_fares.domain.entities.rider import Rider
from ride_fares.domain.reporting import total_revenue


@dataclass
class WorldState:
    # every ride created for this scenario, in creation order
    rides: list[Ride] = field(default_factory=list)
    drivers: dict[int, Driver] = field(default_factory=dict)
    riders: dict[int, Rider] = field(default_factory=dict)

    def add_ride(self, r: Ride) -> None:
        self.rides.append(r)

    def add_driver(self, d: Driver) -> None:
        if d.id in self.drivers:
            raise ValueError(f"duplicate driver id {d.id}")
        self.drivers[d.id] = d

    def add_rider(self, r: Rider) -> None:
        if r.id in self.riders:
            raise ValueError(f"duplicate rider id {r.id}")
        self.riders[r.id] = r

    def total_revenue(self) -> float:
        return total_revenue(self.rides)
