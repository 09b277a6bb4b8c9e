class Slot:
    """
    One parking slot. Lower ``priority_level`` is handed out first.

    :param slot_id: unique identifier, e.g. ``E1``
    :param location: zone description
    :param priority_level: integer rank, 1 is the highest priority
    """

    def __init__(self, slot_id, location, priority_level):
        if not slot_id:
            raise ValueError("slot id must not be empty")
        if isinstance(priority_level, bool) or not isinstance(priority_level, int):
            raise TypeError("priority level must be an int, got %r" % (priority_level,))

        self.slot_id = slot_id
        self.location = location
        self.priority_level = priority_level
        self.occupied_by = None

    @property
    def is_occupied(self):
        return self.occupied_by is not None

    def occupy(self, vehicle):
        if self.is_occupied:
            return False
        self.occupied_by = vehicle
        return True

    def vacate(self):
        vehicle = self.occupied_by
        self.occupied_by = None
        return vehicle

    def __lt__(self, other):
        return self.priority_level < other.priority_level

    def __repr__(self):
        occupant = self.occupied_by.license_plate if self.is_occupied else "none"
        return "Slot(%s, %s, priority=%d, occupied=%s, by=%s)" % (
            self.slot_id,
            self.location,
            self.priority_level,
            self.is_occupied,
            occupant,
        )
