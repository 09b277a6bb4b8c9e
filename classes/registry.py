class VehicleRegistry:
    """Registered vehicles keyed by license plate, in registration order."""

    def __init__(self):
        self.vehicles = {}

    def register(self, vehicle):
        if vehicle.license_plate in self.vehicles:
            return False
        self.vehicles[vehicle.license_plate] = vehicle
        return True

    def get(self, license_plate):
        return self.vehicles.get(license_plate)

    def is_empty(self):
        return not self.vehicles

    def __contains__(self, license_plate):
        return license_plate in self.vehicles

    def __len__(self):
        return len(self.vehicles)

    def __iter__(self):
        return iter(self.vehicles.values())
