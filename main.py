import random

import numpy as np
import simpy

from constants import *
from classes.events import LoggerSink, RecordingSink
from simulation.init import lot_init
from simulation.stats import StatsBox
from simulation.utils import (
    collect_occupancy,
    generate_arrivals,
    logging_setup,
    process_car_arrival_csv,
    vehicle_arrival,
)


def simulation(
    capacity=LOT_CAPACITY,
    minutes=SIM_MINUTES,
    seed=RANDOM_SEEDS,
    arrivals=None,
    logger=None,
):
    np.random.seed(seed=seed)
    random.seed(seed)
    if logger is None:
        logger = logging_setup(f"simulation-{capacity}")

    env = simpy.Environment()

    # Engine clock runs in seconds, the simulation in minutes
    sink = RecordingSink(forward=LoggerSink(logger))
    lot = lot_init(LOT_NAME, capacity, sink=sink, clock=lambda: env.now * 60)

    if arrivals is None:
        if ARRIVALS_CSV:
            arrivals = process_car_arrival_csv(ARRIVALS_CSV)
        else:
            arrivals = generate_arrivals(minutes)

    stats_box = StatsBox(logger)

    env.process(vehicle_arrival(env, lot, stats_box, logger, arrivals))
    env.process(collect_occupancy(env, lot, stats_box))

    env.run(until=minutes)
    stats_box.calculate_waiting_time()

    return lot, stats_box, sink


if __name__ == "__main__":
    lot, stats_box, sink = simulation()
    events_df = sink.to_dataframe()
    print(events_df["kind"].value_counts())
    stats_box.show_stats(LOT_NAME)
