import time

from constants import LOT_NAME, LOT_CAPACITY, ZONES
from classes.parking_lot import ParkingLot
from classes.slot import Slot


def zone_sizes(capacity):
    sizes = []
    remaining = capacity
    for _, _, _, divisor in ZONES:
        if divisor is None:
            size = max(0, remaining)
        else:
            size = max(1, capacity // divisor)
        sizes.append(size)
        remaining -= size
    return sizes


def lot_init(name=LOT_NAME, capacity=LOT_CAPACITY, sink=None, clock=time.time):
    lot = ParkingLot(name, capacity, sink=sink, clock=clock)

    # Within a zone, slots are handed out in numbering order
    for (prefix, location, priority, _), size in zip(ZONES, zone_sizes(capacity)):
        for i in range(1, size + 1):
            lot.add_slot(Slot(f"{prefix}{i}", location, priority))

    return lot
