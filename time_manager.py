#time_manager.py

from collections import namedtuple

import constants as C
import logger as log

GameTime = namedtuple("GameTime", ["day", "hour", "minute"])

class TimeManager:
    """
    The session's game clock. Real milliseconds are converted into accelerated
    in-game seconds; the day counter is always derived from the elapsed total.
    """
    def __init__(self, start_hour=C.START_HOUR, real_seconds_per_game_day=C.REAL_SECONDS_PER_GAME_DAY,
                 day_start_hour=C.DAY_START_HOUR, night_start_hour=C.NIGHT_START_HOUR):
        self.elapsed_game_seconds = float(start_hour * C.SECONDS_PER_HOUR)
        self.real_seconds_per_game_day = real_seconds_per_game_day
        self.acceleration_factor = C.SECONDS_PER_DAY / real_seconds_per_game_day
        self.day_start_hour = day_start_hour
        self.night_start_hour = night_start_hour
        self.current_day = self._day_for(self.elapsed_game_seconds)
        self.is_paused = False

    def _day_for(self, game_seconds):
        return int(game_seconds // C.SECONDS_PER_DAY) + 1

    def advance(self, fixed_step_ms):
        """
        Moves the clock forward by one fixed step of real time.
        Returns True on the step where the day counter changes.
        """
        game_seconds_delta = (fixed_step_ms / C.MILLISECONDS_PER_SECOND) * self.acceleration_factor
        self.elapsed_game_seconds += game_seconds_delta

        new_day = self._day_for(self.elapsed_game_seconds)
        if new_day == self.current_day:
            return False
        log.check(new_day == self.current_day + 1,
                  f"Clock skipped from day {self.current_day} to day {new_day} in one step")
        self.current_day = new_day
        log.log(f"Day {new_day} begins")
        return True

    def current_time(self):
        """Day, hour and minute of the clock. Pure; safe to call any number of times."""
        total_seconds = self.elapsed_game_seconds
        day = self._day_for(total_seconds)
        hour = int((total_seconds % C.SECONDS_PER_DAY) // C.SECONDS_PER_HOUR)
        minute = int((total_seconds % C.SECONDS_PER_HOUR) // C.SECONDS_PER_MINUTE)
        return GameTime(day, hour, minute)

    def is_night(self):
        hour = self.current_time().hour
        return hour < self.day_start_hour or hour >= self.night_start_hour

    def toggle_pause(self):
        self.is_paused = not self.is_paused
        log.log(f"Event: Simulation {'paused' if self.is_paused else 'resumed'}.")

    def get_display_string(self):
        game_time = self.current_time()
        time_str = f"Day {game_time.day}, {game_time.hour:02d}:{game_time.minute:02d}"
        if self.is_paused:
            time_str += " | PAUSED"
        return time_str
