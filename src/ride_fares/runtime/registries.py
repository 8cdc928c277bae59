# runtime/registries.py
from collections.abc import Callable

from ride_fares.config.models import (
    BaseRideModel,
    PremiumRideModel,
    RideUnion,
    StandardRideModel,
)
from ride_fares.domain.entities.ride import Ride
from ride_fares.runtime.ride_factory import RideFactory

RideMaker = Callable[[RideUnion, RideFactory], Ride]

_ride_registry: dict[str, RideMaker] = {}


def register_ride(kind: str):
    def deco(fn: RideMaker):
        _ride_registry[kind] = fn
        return fn

    return deco


def make_ride(cfg: RideUnion, *, factory: RideFactory) -> Ride:
    try:
        maker = _ride_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown ride kind {cfg.kind!r}")
    return maker(cfg, factory)


@register_ride("base")
def _make_base(cfg: BaseRideModel, factory: RideFactory):
    return factory.base(cfg.pickup, cfg.dropoff, cfg.distance_miles)


@register_ride("standard")
def _make_standard(cfg: StandardRideModel, factory: RideFactory):
    return factory.standard(cfg.pickup, cfg.dropoff, cfg.distance_miles)


@register_ride("premium")
def _make_premium(cfg: PremiumRideModel, factory: RideFactory):
    return factory.premium(cfg.pickup, cfg.dropoff, cfg.distance_miles, cfg.multiplier)
