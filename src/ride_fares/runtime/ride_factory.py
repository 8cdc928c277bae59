# runtime/ride_factory.py
from dataclasses import fields

from ride_fares.domain.entities.ride import PremiumRide, Ride, StandardRide
from ride_fares.domain.errors import InvalidArgument
from ride_fares.sim.hooks import NoopHooks, RideHooks
from ride_fares.sim.ids import RideIdIssuer

RIDE_TYPES: dict[str, type[Ride]] = {
    Ride.kind: Ride,
    StandardRide.kind: StandardRide,
    PremiumRide.kind: PremiumRide,
}


def _check_options(cls: type[Ride], opts: dict) -> None:
    allowed = {f.name for f in fields(cls)} - {f.name for f in fields(Ride)}
    unknown = sorted(set(opts) - allowed)
    if unknown:
        raise InvalidArgument(f"{cls.kind} ride does not accept {', '.join(unknown)}")


class RideFactory:
    """
    Builds rides and stamps them with ids from one issuer.
    Arguments are checked before an id is taken, so a rejected ride
    leaves no gap in the sequence.
    """

    def __init__(self, ids: RideIdIssuer | None = None, hooks: RideHooks | None = None):
        self.ids = ids or RideIdIssuer()
        self.hooks = hooks or NoopHooks()

    def create(self, kind: str, pickup: str, dropoff: str, distance_miles: float, **opts) -> Ride:
        try:
            cls = RIDE_TYPES[kind]
        except KeyError:
            raise ValueError(f"Unknown ride kind {kind!r}")
        try:
            _check_options(cls, opts)
            cls.check_args(pickup, dropoff, distance_miles, **opts)
        except InvalidArgument as exc:
            self.hooks.error(reason="invalid_ride", kind=kind, error=str(exc))
            raise
        # every tier option is numeric
        opts = {k: float(v) for k, v in opts.items()}
        ride = cls(self.ids.next_id(), pickup, dropoff, float(distance_miles), **opts)
        self.hooks.ride_created(ride)
        return ride

    def base(self, pickup: str, dropoff: str, distance_miles: float) -> Ride:
        return self.create("base", pickup, dropoff, distance_miles)

    def standard(self, pickup: str, dropoff: str, distance_miles: float) -> StandardRide:
        return self.create("standard", pickup, dropoff, distance_miles)

    def premium(
        self, pickup: str, dropoff: str, distance_miles: float, multiplier: float = 2.0
    ) -> PremiumRide:
        return self.create("premium", pickup, dropoff, distance_miles, multiplier=multiplier)
