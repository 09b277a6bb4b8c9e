import time
from dataclasses import dataclass, field
from typing import Optional

from classes.user_category import UserCategory


@dataclass(frozen=True)
class Vehicle:
    """
    A requester for a parking slot.

    :param license_plate: unique identifier of the vehicle
    :param vehicle_type: free text, e.g. car, motorcycle, truck
    :param user_category: a :class:`UserCategory`
    :param entry_time: seconds on the lot's clock, defaults to wall-clock now
    """

    license_plate: str
    vehicle_type: str
    user_category: UserCategory
    entry_time: Optional[float] = field(default=None)

    def __post_init__(self):
        if not self.license_plate:
            raise ValueError("license plate must not be empty")
        if not isinstance(self.user_category, UserCategory):
            raise TypeError(
                "user_category must be a UserCategory, got %r" % (self.user_category,)
            )
        if self.entry_time is None:
            object.__setattr__(self, "entry_time", time.time())

    def __str__(self):
        return "Vehicle(%s, %s, %s, entry=%.2f)" % (
            self.license_plate,
            self.vehicle_type,
            self.user_category.name,
            self.entry_time,
        )
