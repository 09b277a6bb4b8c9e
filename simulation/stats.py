import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.ticker as mtick
from matplotlib.gridspec import GridSpec
import seaborn as sns

from constants import DATA_COLLECTION_INTERVAL


class StatsBox:
    def __init__(self, logger):
        self.utilization_stats = {"occupancy": [], "waiting": []}
        # Time from arrival at the gate until a slot is held, per car
        self.waiting_stats = {}
        # Time spent holding a slot, per car
        self.stay_stats = {}

        self.stats = {
            "Total Car Served": 0,
            "Cars Parked": 0,
            "Cars Exited": 0,
            "Cars Waiting": 0,
            "Avg. Waiting Time": 0,
            "Avg. Stay Time": 0,
        }
        self.logger = logger

    def calculate_waiting_time(self):
        self.stats["Total Car Served"] = (
            self.stats["Cars Parked"] + self.stats["Cars Exited"]
        )
        if self.waiting_stats:
            waiting = list(self.waiting_stats.values())
            self.stats["Avg. Waiting Time"] = round(float(np.mean(waiting)), 3)
        if self.stay_stats:
            stays = list(self.stay_stats.values())
            self.stats["Avg. Stay Time"] = round(float(np.mean(stays)), 3)

        return self.stats

    def to_dataframe(self):
        df = pd.DataFrame(
            {
                "Waiting Time": pd.Series(self.waiting_stats, dtype=float),
                "Stay Time": pd.Series(self.stay_stats, dtype=float),
            }
        )
        df.index.name = "Car ID"
        return df

    def show_stats(self, name, path=None):
        self.logger.info("=============STATISTICS=============")
        for label, value in self.calculate_waiting_time().items():
            self.logger.info(f"{label}: {value}")

        sns.set(style="whitegrid")
        fig = plt.figure(figsize=(16, 8))
        fig.suptitle(name)
        gs = GridSpec(2, 2)  # 2 rows, 2 columns

        ax1 = fig.add_subplot(gs[0, 0])
        ax2 = fig.add_subplot(gs[0, 1])
        ax3 = fig.add_subplot(gs[1, :])

        self.plot_time(self.waiting_stats, "Waiting", ax1)
        self.plot_time(self.stay_stats, "Stay", ax2)
        self.plot_occupancy_trend(self.utilization_stats["occupancy"], ax3)

        plt.tight_layout()
        if path is None:
            plt.show()
        else:
            fig.savefig(path)
        plt.close(fig)

    def plot_time(self, time_dict, title, ax):
        labels = list(time_dict.keys())
        times = list(time_dict.values())

        if times:
            self.logger.info(
                f"Mean of {title.lower()} time for a vehicle: {np.mean(times):.2f}"
            )
            sns.barplot(x=labels, y=times, lw=0.0, ax=ax)

        ax.set_xlabel("Car ID")
        ax.set_ylabel(f"{title} Time (mins)")
        ax.set_title(f"{title} Time of Vehicles")

    def plot_occupancy_trend(self, occupancy, ax):
        times = np.arange(0, len(occupancy) * DATA_COLLECTION_INTERVAL, DATA_COLLECTION_INTERVAL)

        if occupancy:
            sns.lineplot(x=times, y=occupancy, ax=ax, label="Occupied")

        ax.yaxis.set_major_formatter(mtick.PercentFormatter(1.0))
        ax.set_xlabel(f"Time (Interval of {DATA_COLLECTION_INTERVAL} mins)")
        ax.set_ylabel("Lot Occupancy")
        ax.set_title("Occupancy Trend")
