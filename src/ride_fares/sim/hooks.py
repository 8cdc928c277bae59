# sim/hooks.py
from typing import Protocol


class RideHooks(Protocol):
    def ride_created(self, ride): ...
    def ride_assigned(self, ride, *, driver_id: int, count: int): ...
    def ride_requested(self, ride, *, rider_id: int, count: int): ...
    def rides_cleared(self, *, driver_id: int, dropped: int): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def ride_created(self, *_, **__):
        pass

    def ride_assigned(self, *_, **__):
        pass

    def ride_requested(self, *_, **__):
        pass

    def rides_cleared(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
