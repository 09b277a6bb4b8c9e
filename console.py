"""
console.py

Text menu for a single parking lot: register vehicles, park them, let them
exit, show the lot status and add slots from the admin panel.
"""
from constants import *
from classes.events import LoggerSink
from classes.parking_lot import AddOutcome
from classes.registry import VehicleRegistry
from classes.slot import Slot
from classes.user_category import UserCategory
from classes.vehicle import Vehicle
from simulation.init import lot_init
from simulation.utils import logging_setup


def format_status(status):
    return (
        "Parking Lot Status: \n"
        f"Name: {status.name}\n"
        f"Total Capacity: {status.capacity}\n"
        f"Available Slots: {status.available_count}\n"
        f"Occupied Slots: {status.occupied_count}\n"
        f"Waiting List Size: {status.waiting_count}\n"
    )


class ParkingSystem:
    def __init__(self, lot, registry=None, input_fn=input, output_fn=print):
        self.lot = lot
        self.registry = registry if registry is not None else VehicleRegistry()
        self.input = input_fn
        self.output = output_fn
        self.running = False

    def start(self):
        self.running = True
        self.output("===== Smart Parking System =====\n")

        actions = {
            1: self.register_vehicle,
            2: self.park_vehicle,
            3: self.exit_vehicle,
            4: self.display_status,
            5: self.admin_panel,
        }

        while self.running:
            self.display_menu()
            choice = self.get_int_input("Enter your choice: ")

            if choice == 0:
                self.running = False
                self.output("Thank you for using Smart Parking System!")
            elif choice in actions:
                actions[choice]()
            else:
                self.output("Invalid choice. Please try again.")

            self.output("")

    def display_menu(self):
        self.output("===== Main Menu =====")
        self.output("1. Register a Vehicle")
        self.output("2. Park a Vehicle")
        self.output("3. Exit a Vehicle")
        self.output("4. Display Parking Status")
        self.output("5. Admin Panel")
        self.output("0. Exit System")

    def register_vehicle(self):
        self.output("\n===== Register a Vehicle =====")

        license_plate = self.get_string_input("Enter license plate number: ")
        if not license_plate:
            self.output("License plate must not be empty.")
            return
        if license_plate in self.registry:
            self.output("Vehicle with this license plate is already registered.")
            return

        vehicle_type = self.get_string_input(
            "Enter vehicle type (car, motorcycle, truck, etc.): "
        )

        self.output("Select user category:")
        for category in UserCategory:
            self.output(f"{category.value}. {category.name.capitalize()}")

        choice = self.get_int_input("Enter choice (1-4): ")
        if choice not in [c.value for c in UserCategory]:
            self.output("Invalid choice. Setting as Regular.")
        user_category = UserCategory.from_choice(choice)

        vehicle = Vehicle(license_plate, vehicle_type, user_category)
        self.registry.register(vehicle)

        self.output(f"Vehicle registered successfully: {vehicle}")

    def park_vehicle(self):
        self.output("\n===== Park a Vehicle =====")

        if self.registry.is_empty():
            self.output("No vehicles registered. Please register a vehicle first.")
            return

        license_plate = self.get_string_input("Enter license plate number: ")
        vehicle = self.registry.get(license_plate)
        if vehicle is None:
            self.output("Vehicle not found. Please register the vehicle first.")
            return
        if self.lot.slot_for(license_plate) or self.lot.is_waiting(license_plate):
            self.output("Vehicle is already parked or waiting.")
            return

        slot = self.lot.allocate(vehicle)
        if slot is not None:
            self.output(f"Vehicle parked successfully in slot: {slot.slot_id}")
            self.output(f"Location: {slot.location}")
        else:
            self.output("No slots available. Vehicle added to waiting list.")

    def exit_vehicle(self):
        self.output("\n===== Exit a Vehicle =====")

        license_plate = self.get_string_input("Enter license plate number: ")
        slot = self.lot.deallocate(license_plate)

        if slot is not None:
            self.output(f"Vehicle exited successfully from slot: {slot.slot_id}")
        else:
            self.output("Vehicle not found in the parking lot.")

    def display_status(self):
        self.output("\n===== Parking Status =====")
        self.output(format_status(self.lot.status()))

    def admin_panel(self):
        self.output("\n===== Admin Panel =====")
        self.output("1. Add a new parking slot")
        self.output("2. View all registered vehicles")
        self.output("3. Back to main menu")

        choice = self.get_int_input("Enter your choice: ")
        if choice == 1:
            self.add_new_slot()
        elif choice == 2:
            self.view_registered_vehicles()
        elif choice != 3:
            self.output("Invalid choice.")

    def add_new_slot(self):
        self.output("\n===== Add New Slot =====")

        slot_id = self.get_string_input("Enter slot ID: ")
        if not slot_id:
            self.output("Slot ID must not be empty.")
            return
        location = self.get_string_input("Enter slot location: ")

        self.output("Select slot priority level:")
        self.output("1. Emergency (Highest)")
        self.output("2. VIP")
        self.output("3. Handicapped")
        self.output("4. Regular (Lowest)")

        priority_level = self.get_int_input("Enter choice (1-4): ")
        if priority_level not in range(1, LOWEST_PRIORITY + 1):
            self.output("Invalid choice. Setting as Regular priority.")
            priority_level = LOWEST_PRIORITY

        slot = Slot(slot_id, location, priority_level)
        outcome = self.lot.add_slot(slot)

        if outcome is AddOutcome.ADDED:
            self.output(f"New slot added successfully: {slot}")
        elif outcome is AddOutcome.DUPLICATE:
            self.output(f"Slot {slot_id} already exists.")
        else:
            self.output(f"Slot {slot_id} is occupied and was not added.")

    def view_registered_vehicles(self):
        self.output("\n===== Registered Vehicles =====")

        if self.registry.is_empty():
            self.output("No vehicles registered.")
            return

        for vehicle in self.registry:
            self.output(str(vehicle))

    def get_string_input(self, prompt):
        return self.input(prompt).strip()

    def get_int_input(self, prompt):
        while True:
            try:
                return int(self.input(prompt).strip())
            except ValueError:
                self.output("Please enter a valid number.")


if __name__ == "__main__":
    logger = logging_setup("parking")
    lot = lot_init(sink=LoggerSink(logger))
    ParkingSystem(lot).start()
