# ride_fares/app/controllers/dispatch.py

from ride_fares.domain.entities.ride import Ride
from ride_fares.domain.state import WorldState
from ride_fares.sim.hooks import NoopHooks, RideHooks


class DispatchHandler:
    """Associates shared rides with drivers and riders of a world, reporting each change."""

    def __init__(self, world: WorldState, hooks: RideHooks | None = None):
        self.world = world
        self.hooks = hooks or NoopHooks()

    def assign(self, driver_id: int, ride: Ride | None) -> None:
        d = self.world.drivers[driver_id]
        d.add_ride(ride)
        self.hooks.ride_assigned(ride, driver_id=driver_id, count=d.assigned_count())

    def request(self, rider_id: int, ride: Ride | None) -> None:
        r = self.world.riders[rider_id]
        r.request_ride(ride)
        self.hooks.ride_requested(ride, rider_id=rider_id, count=len(r.requested_rides))

    def clear(self, driver_id: int) -> int:
        d = self.world.drivers[driver_id]
        dropped = d.assigned_count()
        d.clear_assigned_rides()
        self.hooks.rides_cleared(driver_id=driver_id, dropped=dropped)
        return dropped
