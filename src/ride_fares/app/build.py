# ride_fares/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from ride_fares.app.controllers.dispatch import DispatchHandler
from ride_fares.config.models import ScenarioModel
from ride_fares.domain.entities.driver import Driver
from ride_fares.domain.entities.rider import Rider
from ride_fares.domain.state import WorldState
from ride_fares.io.recorder import Recorder
from ride_fares.io.ride_logging import RideLogging
from ride_fares.runtime.registries import make_ride
from ride_fares.runtime.ride_factory import RideFactory
from ride_fares.sim.hooks import NoopHooks
from ride_fares.sim.ids import RideIdIssuer


@dataclass
class App:
    model: ScenarioModel
    world: WorldState
    factory: RideFactory
    dispatch: DispatchHandler


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    ids: RideIdIssuer | None = None,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        RideLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) World & factory
    world = WorldState()
    factory = RideFactory(ids=ids, hooks=hooks)
    for ride_cfg in model.rides:
        world.add_ride(make_ride(ride_cfg, factory=factory))

    for d in model.drivers:
        world.add_driver(Driver(id=d.id, name=d.name, rating=d.rating))
    for r in model.riders:
        world.add_rider(Rider(id=r.id, name=r.name))

    # 3) Replay assignments in config order
    dispatch = DispatchHandler(world, hooks=hooks)
    for a in model.assignments:
        ride = world.rides[a.ride]
        if a.driver_id is not None:
            dispatch.assign(a.driver_id, ride)
        if a.rider_id is not None:
            dispatch.request(a.rider_id, ride)

    return App(model, world, factory, dispatch)
