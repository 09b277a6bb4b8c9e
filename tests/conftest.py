import matplotlib

matplotlib.use("Agg")

import pytest

from classes.events import RecordingSink
from classes.parking_lot import ParkingLot
from classes.slot import Slot
from classes.user_category import UserCategory
from classes.vehicle import Vehicle


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_vehicle(clock):
    def _make(plate, category=UserCategory.REGULAR, vehicle_type="car"):
        return Vehicle(plate, vehicle_type, category, entry_time=clock())

    return _make


@pytest.fixture
def lot(sink, clock):
    """E1 (priority 1) and R1 (priority 4)."""
    lot = ParkingLot("Test Lot", 2, sink=sink, clock=clock)
    lot.add_slot(Slot("E1", "Emergency Zone", 1))
    lot.add_slot(Slot("R1", "Regular Zone", 4))
    return lot
