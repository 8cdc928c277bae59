# domain/entities/driver.py
from dataclasses import dataclass, field

from ride_fares.domain.entities.ride import Ride
from ride_fares.domain.reporting import describe_all, money, total_revenue


@dataclass
class Driver:
    id: int
    name: str
    rating: float = 5.0  # conventionally 0.0 - 5.0, not clamped
    assigned_rides: list[Ride | None] = field(default_factory=list)

    def add_ride(self, ride: Ride | None) -> None:
        self.assigned_rides.append(ride)

    def total_earnings(self) -> float:
        return total_revenue(self.assigned_rides)

    def assigned_count(self) -> int:
        return len(self.assigned_rides)

    def clear_assigned_rides(self) -> None:
        # drops our references only; rides held elsewhere are untouched
        self.assigned_rides.clear()

    def summary(self) -> str:
        lines = [
            f"Driver ID: {self.id} | Name: {self.name} | Rating: {self.rating:.2f}",
            f"Assigned rides ({self.assigned_count()}):",
            *describe_all(self.assigned_rides),
            f"Total earnings from assigned rides: {money(self.total_earnings())}",
        ]
        return "\n".join(lines)
