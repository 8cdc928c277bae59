# io/ride_logging.py
import json
import logging
import sys

from ride_fares.io.business_events import (
    RideAssignedBiz,
    RideCreatedBiz,
    RideRequestedBiz,
    RidesClearedBiz,
    to_cents,
)
from ride_fares.io.recorder import Recorder
from ride_fares.sim.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="ride_fares", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class RideLogging(NoopHooks):
    """
    Structured logs for ride lifecycle events, plus business events
    forwarded to an optional Recorder.
    Creation is logged at DEBUG unless `debug` is set; associations at INFO.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # ------------- Ride lifecycle --------------------------

    def ride_created(self, ride):
        fare = ride.fare()
        self._emit(
            "INFO" if self.debug else "DEBUG",
            "ride_created",
            ride_id=ride.id,
            kind=ride.kind,
            fare=round(fare, 2),
        )
        self.biz(
            RideCreatedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideCreated",
                ride_id=ride.id,
                kind=ride.kind,
                pickup=ride.pickup,
                dropoff=ride.dropoff,
                distance_miles=ride.distance_miles,
                fare_cents=to_cents(fare),
            )
        )

    def ride_assigned(self, ride, *, driver_id: int, count: int):
        rid = ride.id if ride is not None else None
        self._emit("INFO", "ride_assigned", ride_id=rid, driver_id=driver_id, assigned=count)
        self.biz(
            RideAssignedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideAssigned",
                ride_id=rid,
                driver_id=driver_id,
                fare_cents=to_cents(ride.fare()) if ride is not None else None,
                assigned_count=count,
            )
        )

    def ride_requested(self, ride, *, rider_id: int, count: int):
        rid = ride.id if ride is not None else None
        self._emit("INFO", "ride_requested", ride_id=rid, rider_id=rider_id, requested=count)
        self.biz(
            RideRequestedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RideRequested",
                ride_id=rid,
                rider_id=rider_id,
                requested_count=count,
            )
        )

    def rides_cleared(self, *, driver_id: int, dropped: int):
        self._emit("INFO", "rides_cleared", driver_id=driver_id, dropped=dropped)
        self.biz(
            RidesClearedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="RidesCleared",
                driver_id=driver_id,
                dropped=dropped,
            )
        )

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "ride_error", reason=reason, **extra)
