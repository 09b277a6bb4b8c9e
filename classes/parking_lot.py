import heapq
import itertools
import logging
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum

from classes.events import Event, EventKind

logger = logging.getLogger(__name__)


class AddOutcome(Enum):
    ADDED = "added"
    ALREADY_OCCUPIED = "already_occupied"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class LotStatus:
    name: str
    capacity: int
    available_count: int
    occupied_count: int
    waiting_count: int


def format_duration(seconds):
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return "%02d:%02d:%02d" % (hours, minutes, seconds)


class ParkingLot:
    """
    Hands out slots strictly by slot priority and queues whoever arrives
    when every slot is taken.

    The available pool is a heap of ``(priority_level, sequence, slot)``.
    ``sequence`` grows every time a slot enters the pool, so among slots of
    equal priority the one that has been free the longest is handed out
    first. Cars arriving to a full lot join a FIFO waiting list; each
    release promotes at most the head of that list.

    :param name: display name of the lot
    :param capacity: nominal capacity reported by :meth:`status`
    :param sink: an :class:`~classes.events.EventSink`, optional
    :param clock: returns the current time in seconds, used for stay durations
    """

    def __init__(self, name, capacity, sink=None, clock=time.time):
        self.name = name
        self.capacity = capacity
        self.sink = sink
        self.clock = clock

        self.available_slots = []
        self.occupied_slots = {}  # license plate -> slot
        self.waiting_list = deque()

        self._slots = {}  # slot id -> slot, every slot this lot owns
        self._sequence = itertools.count()

        self.record(
            EventKind.LOT_CREATED,
            "Parking lot created: %s with capacity: %d" % (name, capacity),
        )

    def record(self, kind, message, license_plate=None, slot_id=None):
        if self.sink is None:
            return
        event = Event(
            kind,
            message,
            timestamp=self.clock(),
            license_plate=license_plate,
            slot_id=slot_id,
        )
        try:
            self.sink.record(event)
        except Exception:  # noqa: BLE001
            logger.exception("Event sink failed on %s", kind.value)

    def _push(self, slot):
        heapq.heappush(
            self.available_slots, (slot.priority_level, next(self._sequence), slot)
        )

    def add_slot(self, slot):
        if slot.is_occupied:
            self.record(
                EventKind.SLOT_REJECTED,
                "Slot rejected: %s is already occupied" % slot.slot_id,
                slot_id=slot.slot_id,
            )
            return AddOutcome.ALREADY_OCCUPIED
        if slot.slot_id in self._slots:
            self.record(
                EventKind.SLOT_REJECTED,
                "Slot rejected: %s already exists" % slot.slot_id,
                slot_id=slot.slot_id,
            )
            return AddOutcome.DUPLICATE

        self._slots[slot.slot_id] = slot
        self._push(slot)
        self.record(
            EventKind.SLOT_ADDED,
            "Slot added: %s with priority level: %d"
            % (slot.slot_id, slot.priority_level),
            slot_id=slot.slot_id,
        )
        return AddOutcome.ADDED

    def allocate(self, vehicle):
        """
        Park ``vehicle`` in the best available slot.

        Returns the slot, or None when the lot is full and the vehicle was
        put on the waiting list. A plate that is already parked or waiting
        is refused with None and nothing changes.
        """
        plate = vehicle.license_plate
        if plate in self.occupied_slots or self.is_waiting(plate):
            self.record(
                EventKind.DUPLICATE_VEHICLE,
                "Vehicle %s is already parked or waiting." % plate,
                license_plate=plate,
            )
            return None

        if not self.available_slots:
            self.waiting_list.append(vehicle)
            self.record(
                EventKind.QUEUED,
                "No slots available. Vehicle %s added to waiting list."
                % vehicle.license_plate,
                license_plate=vehicle.license_plate,
            )
            return None

        _, _, slot = heapq.heappop(self.available_slots)
        slot.occupy(vehicle)
        self.occupied_slots[vehicle.license_plate] = slot

        self.record(
            EventKind.ALLOCATED,
            "Slot allocated: %s to vehicle: %s (%s)"
            % (slot.slot_id, vehicle.license_plate, vehicle.user_category.name),
            license_plate=vehicle.license_plate,
            slot_id=slot.slot_id,
        )
        return slot

    def deallocate(self, license_plate):
        """
        Release the slot held by ``license_plate``.

        Returns the freed slot, or None if the plate holds no slot. The head
        of the waiting list, if any, is parked before this returns.
        """
        slot = self.occupied_slots.pop(license_plate, None)
        if slot is None:
            self.record(
                EventKind.NOT_FOUND,
                "Vehicle not found: %s" % license_plate,
                license_plate=license_plate,
            )
            return None

        vehicle = slot.vacate()
        self._push(slot)

        duration = format_duration(self.clock() - vehicle.entry_time)
        self.record(
            EventKind.DEALLOCATED,
            "Slot deallocated: %s from vehicle: %s. Duration: %s"
            % (slot.slot_id, license_plate, duration),
            license_plate=license_plate,
            slot_id=slot.slot_id,
        )

        self.check_waiting_list()

        return slot

    def check_waiting_list(self):
        if not self.waiting_list or not self.available_slots:
            return None

        vehicle = self.waiting_list.popleft()
        slot = self.allocate(vehicle)
        self.record(
            EventKind.QUEUED_ALLOCATED,
            "Vehicle from waiting list allocated a slot: %s" % vehicle.license_plate,
            license_plate=vehicle.license_plate,
            slot_id=slot.slot_id,
        )
        return slot

    def status(self):
        return LotStatus(
            name=self.name,
            capacity=self.capacity,
            available_count=len(self.available_slots),
            occupied_count=len(self.occupied_slots),
            waiting_count=len(self.waiting_list),
        )

    def slot_for(self, license_plate):
        return self.occupied_slots.get(license_plate)

    def is_waiting(self, license_plate):
        return any(v.license_plate == license_plate for v in self.waiting_list)

    def waiting_plates(self):
        return [vehicle.license_plate for vehicle in self.waiting_list]

    def available(self):
        """Free slots in the order they would be handed out."""
        return [slot for _, _, slot in sorted(self.available_slots)]

    def slots(self):
        return list(self._slots.values())

    @property
    def total_slots(self):
        return len(self._slots)
