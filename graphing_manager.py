# graphing_manager.py

import os

import matplotlib.pyplot as plt

import logger as log
import constants as C
from needs import vitamin_letter

class GraphingManager:
    """
    Handles the collection of time-series data for the player's needs
    and generates plots after the session ends.
    """
    def __init__(self, sample_interval_seconds=C.GRAPH_SAMPLE_INTERVAL_SECONDS):
        self.sample_interval_seconds = sample_interval_seconds
        self.next_sample_time = None
        self.data = {
            'time_days': [],
            'temperature': [],
            'water': [],
            'calories': [],
            'vitamins': [],
        }
        log.log("GraphingManager initialized.")

    def clear(self):
        for key in self.data:
            self.data[key].clear()
        self.next_sample_time = None

    def add_data_point(self, time_seconds, needs):
        """
        Adds a single time-stamped data point to all data series.
        """
        self.data['time_days'].append(time_seconds / C.SECONDS_PER_DAY)
        self.data['temperature'].append(needs.temperature)
        self.data['water'].append(needs.water)
        self.data['calories'].append(needs.calories)
        self.data['vitamins'].append(needs.vitamins.tolist())

    def sample(self, time_manager, needs):
        """Records a data point whenever another sample interval of game time has passed."""
        now = time_manager.elapsed_game_seconds
        if self.next_sample_time is None or now >= self.next_sample_time:
            self.add_data_point(now, needs)
            self.next_sample_time = now + self.sample_interval_seconds
            return True
        return False

    def has_data(self):
        """
        Checks if any data has been collected.
        """
        return len(self.data['time_days']) > 0

    def _save(self, fig, file_path, label):
        try:
            fig.savefig(file_path)
            log.log(f"[GraphingManager] {label} graph saved to {file_path}")
            return file_path
        except Exception as e:
            log.warn(f"[GraphingManager] Could not save {label.lower()} graph. Reason: {e}")
            return None
        finally:
            plt.close(fig)

    def generate_and_save_base_needs_graph(self, output_dir=C.GRAPH_OUTPUT_DIR):
        """
        Uses matplotlib to generate a line graph of temperature, water and calories.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping needs plot.")
            return None
        log.log(f"[GraphingManager] Generating base needs plot with {len(self.data['time_days'])} data points...")

        fig, ax = plt.subplots(figsize=(12, 7))

        ax.plot(self.data['time_days'], self.data['temperature'], label='Temperature', color='tab:red')
        ax.plot(self.data['time_days'], self.data['water'], label='Water', color='tab:blue')
        ax.plot(self.data['time_days'], self.data['calories'], label='Calories', color='tab:orange')

        ax.set_title('Player Needs Over Time')
        ax.set_xlabel('Time (Game Days)')
        ax.set_ylabel('Level')
        ax.set_ylim(C.NEEDS_MIN_VALUE, C.NEEDS_MAX_VALUE)
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        return self._save(fig, os.path.join(output_dir, 'player_needs_graph.png'), "Needs")

    def generate_and_save_vitamins_graph(self, output_dir=C.GRAPH_OUTPUT_DIR):
        """
        Uses matplotlib to generate a line graph with one line per vitamin channel.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping vitamins plot.")
            return None
        log.log("[GraphingManager] Generating vitamins plot...")

        fig, ax = plt.subplots(figsize=(12, 7))

        channel_count = len(self.data['vitamins'][0])
        for i in range(channel_count):
            series = [sample[i] for sample in self.data['vitamins']]
            ax.plot(self.data['time_days'], series, label=f'Vitamin {vitamin_letter(i)}')

        ax.set_title('Player Vitamins Over Time')
        ax.set_xlabel('Time (Game Days)')
        ax.set_ylabel('Level')
        ax.set_ylim(C.NEEDS_MIN_VALUE, C.NEEDS_MAX_VALUE)
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        return self._save(fig, os.path.join(output_dir, 'player_vitamins_graph.png'), "Vitamins")

    def generate_and_save_graphs(self, output_dir=C.GRAPH_OUTPUT_DIR):
        """
        Generates and saves all configured graphs if data exists.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping plot generation.")
            return []

        saved = [
            self.generate_and_save_base_needs_graph(output_dir),
            self.generate_and_save_vitamins_graph(output_dir),
        ]
        return [path for path in saved if path is not None]
