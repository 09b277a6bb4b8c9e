import datetime
import logging
import os
import random
from os.path import join

import pandas as pd
from scipy.stats import poisson, weibull_min

from constants import *
from classes.user_category import UserCategory
from classes.vehicle import Vehicle


def process_car_arrival_csv(path):
    df = pd.read_csv(path)
    return [int(n) for n in df["car_arrival_rate"].tolist()]


def generate_arrivals(minutes, rate=CAR_RATE):
    # Number of cars arriving within each minute
    return [int(n) for n in poisson.rvs(mu=rate, size=minutes)]


def generate_times(car_arrival):
    times = []

    for _ in range(car_arrival):
        # Offset within the minute the car arrives in
        time_interval = round(random.uniform(0.0, 1.0), 2)
        times.append(time_interval)

    return times


def random_details(car_id):
    category = random.choices(
        list(UserCategory), weights=[1, 2, 2, 15], k=1
    )[0]
    return f"SIM{car_id:04d}", random.choice(VEHICLE_TYPES), category


def run(env, lot, car_id, delay, stats, logger, duration=None):
    yield env.timeout(delay)
    plate, vehicle_type, category = random_details(car_id)
    vehicle = Vehicle(plate, vehicle_type, category, entry_time=env.now * 60)
    logger.info(
        "Car %d (%s) arrived at the entrance of the carpark at %.2f."
        % (car_id, plate, env.now)
    )
    # Log waiting time - START
    time_start = env.now

    slot = lot.allocate(vehicle)
    if slot is None:
        stats.stats["Cars Waiting"] += 1
        while slot is None:
            yield env.timeout(POLL_INTERVAL)
            slot = lot.slot_for(plate)
        stats.stats["Cars Waiting"] -= 1

    # Log waiting time - END
    stats.waiting_stats[car_id] = round(env.now - time_start, 2)
    stats.stats["Cars Parked"] += 1

    if duration is None:
        duration = weibull_min.rvs(c=CAR_DURATION_SHAPE, scale=CAR_DURATION_SCALE) * 60
    logger.info(
        "Car %d will leave slot %s at %.2f (+%.2f)"
        % (car_id, slot.slot_id, env.now + duration, duration)
    )
    yield env.timeout(duration)

    lot.deallocate(plate)
    stats.stay_stats[car_id] = round(duration, 2)
    stats.stats["Cars Parked"] -= 1
    stats.stats["Cars Exited"] += 1


def vehicle_arrival(env, lot, stats, logger, arrivals):
    car_id = 1

    for car_arrival in arrivals:
        if car_arrival != 0:
            random_times_list = generate_times(car_arrival)
            formatted_list = ", ".join(map(str, random_times_list))
            logger.debug(f"Random list: {formatted_list}")

            for random_time in random_times_list:
                env.process(run(env, lot, car_id, random_time, stats, logger))
                car_id += 1

        yield env.timeout(1)
    logger.info("--No more incoming vehicles--")


def collect_occupancy(env, lot, stats):
    while True:
        status = lot.status()
        total = lot.total_slots
        ratio = status.occupied_count / total if total else 0.0
        stats.utilization_stats["occupancy"].append(ratio)
        stats.utilization_stats["waiting"].append(status.waiting_count)

        yield env.timeout(DATA_COLLECTION_INTERVAL)


def logging_setup(name, log_dir=LOG_DIR):
    # Create a logger
    logger = logging.getLogger(f"{name}")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    # Create a formatter
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Create a handler for stdout (console)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # Create a handler for a log file
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    file_handler = logging.FileHandler(join(log_dir, f"{name}_{timestamp}.log"))
    file_handler.setFormatter(formatter)

    # Add both handlers to the logger
    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
