from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- RIDES ---------------------
# Range checks live on the ride types themselves (InvalidArgument).


class BaseRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["base"] = "base"
    pickup: str
    dropoff: str
    distance_miles: float


class StandardRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["standard"] = "standard"
    pickup: str
    dropoff: str
    distance_miles: float


class PremiumRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["premium"] = "premium"
    pickup: str
    dropoff: str
    distance_miles: float
    multiplier: float = 2.0


RideUnion = Annotated[
    BaseRideModel | StandardRideModel | PremiumRideModel,
    Field(discriminator="kind"),
]


# ----------------- PARTIES ---------------------


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    rating: float = 5.0


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str


class AssignmentModel(BaseModel):
    """Links the ride at index `ride` (into ScenarioModel.rides) to a driver and/or rider."""

    model_config = ConfigDict(extra="forbid")
    ride: int
    driver_id: int | None = None
    rider_id: int | None = None


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    rides: list[RideUnion] = Field(default_factory=list)
    drivers: list[DriverModel] = Field(default_factory=list)
    riders: list[RiderModel] = Field(default_factory=list)
    assignments: list[AssignmentModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_assignments(self):
        n = len(self.rides)
        driver_ids = {d.id for d in self.drivers}
        rider_ids = {r.id for r in self.riders}
        for a in self.assignments:
            if not 0 <= a.ride < n:
                raise ValueError(f"assignment ride index {a.ride} out of range (0..{n - 1})")
            if a.driver_id is not None and a.driver_id not in driver_ids:
                raise ValueError(f"assignment names unknown driver {a.driver_id}")
            if a.rider_id is not None and a.rider_id not in rider_ids:
                raise ValueError(f"assignment names unknown rider {a.rider_id}")
        return self
