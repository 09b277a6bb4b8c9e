import os

LOT_NAME = os.getenv("PARKING_LOT_NAME", "Smart Parking Facility")
LOT_CAPACITY = int(os.getenv("PARKING_LOT_CAPACITY", "20"))

# (prefix, location, priority level, capacity divisor)
# A zone gets max(1, capacity // divisor) slots, e.g. 5 is 20%.
# Regular zone takes whatever is left after the others.
EMERGENCY_ZONE = ("E", "Emergency Zone", 1, 10)
VIP_ZONE = ("V", "VIP Zone", 2, 5)
HANDICAPPED_ZONE = ("H", "Handicapped Zone", 3, 5)
REGULAR_ZONE = ("R", "Regular Zone", 4, None)
ZONES = [EMERGENCY_ZONE, VIP_ZONE, HANDICAPPED_ZONE, REGULAR_ZONE]

LOWEST_PRIORITY = 4

LOG_DIR = os.getenv("PARKING_LOG_DIR", "logs")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VEHICLE_TYPES = ["car", "motorcycle", "truck", "van"]

# Simulation, time unit is minutes
ARRIVALS_CSV = os.getenv("PARKING_ARRIVALS_CSV")
SIM_MINUTES = 12 * 60
CAR_RATE = 1 / 30  # cars per minute
CAR_DURATION_SHAPE = 1.359
CAR_DURATION_SCALE = 3.68  # hours
POLL_INTERVAL = 1 / 60
DATA_COLLECTION_INTERVAL = 5  # mins

RANDOM_SEEDS = 12345
