import sys
import time
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional

import pandas as pd


class EventKind(Enum):
    LOT_CREATED = "lot_created"
    SLOT_ADDED = "slot_added"
    SLOT_REJECTED = "slot_rejected"
    ALLOCATED = "allocated"
    QUEUED = "queued"
    DUPLICATE_VEHICLE = "duplicate_vehicle"
    DEALLOCATED = "deallocated"
    NOT_FOUND = "not_found"
    QUEUED_ALLOCATED = "queued_allocated"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    message: str
    timestamp: float = field(default_factory=time.time)
    license_plate: Optional[str] = None
    slot_id: Optional[str] = None


class EventSink:
    """Receives one :class:`Event` per state transition of a parking lot."""

    def record(self, event):
        raise NotImplementedError


class LoggerSink(EventSink):
    """
    Writes every event message to a ``logging.Logger``.

    Failures while logging are reported on stderr and never raised.
    """

    def __init__(self, logger):
        self.logger = logger

    def record(self, event):
        try:
            if event.kind in (
                EventKind.NOT_FOUND,
                EventKind.SLOT_REJECTED,
                EventKind.DUPLICATE_VEHICLE,
            ):
                self.logger.warning(event.message)
            else:
                self.logger.info(event.message)
        except Exception as exc:  # noqa: BLE001
            sys.stderr.write("Error writing to event log: %s\n" % exc)


class RecordingSink(EventSink):
    """Keeps events in memory, optionally passing them on to another sink."""

    def __init__(self, forward=None):
        self.events = []
        self.forward = forward

    def record(self, event):
        self.events.append(event)
        if self.forward is not None:
            self.forward.record(event)

    def kinds(self):
        return [event.kind for event in self.events]

    def to_dataframe(self):
        rows = []
        for event in self.events:
            row = asdict(event)
            row["kind"] = event.kind.value
            rows.append(row)
        return pd.DataFrame(
            rows, columns=["kind", "message", "timestamp", "license_plate", "slot_id"]
        )
