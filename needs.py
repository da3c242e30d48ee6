#needs.py

import random

import numpy as np

import constants as C
import logger as log

BASE_NEEDS = ("temperature", "water", "calories")
DECAY_CATEGORIES = BASE_NEEDS + ("vitamins",)

def vitamin_letter(index):
    """Channel 0 is vitamin A, channel 1 is vitamin B, and so on."""
    return chr(ord("A") + index)

class NeedsState:
    """
    The player's physiological state. Every channel lives in [min_value, max_value].
    Vitamins are a fixed-length array owned by this object; use the accessors
    rather than resizing or replacing it.
    """
    def __init__(self, vitamin_count=C.VITAMIN_COUNT, min_value=C.NEEDS_MIN_VALUE, max_value=C.NEEDS_MAX_VALUE):
        self.min_value = min_value
        self.max_value = max_value
        self.temperature = max_value
        self.water = max_value
        self.calories = max_value
        self.vitamins = np.full(vitamin_count, max_value, dtype=np.float64)

    @property
    def vitamin_count(self):
        return len(self.vitamins)

    def get_vitamin(self, index):
        if not log.check(0 <= index < self.vitamin_count, f"Invalid vitamin channel {index}"):
            return None
        return float(self.vitamins[index])

    def set_vitamin(self, index, value):
        if not log.check(0 <= index < self.vitamin_count, f"Invalid vitamin channel {index}"):
            return False
        self.vitamins[index] = value
        self.clamp()
        return True

    def set_base_need(self, name, value):
        if not log.check(name in BASE_NEEDS, f"Unknown need '{name}'"):
            return False
        setattr(self, name, value)
        self.clamp()
        return True

    def clamp(self):
        """Clamps every channel into range and reports anything that still escapes it."""
        for name in BASE_NEEDS:
            setattr(self, name, min(max(getattr(self, name), self.min_value), self.max_value))
        np.clip(self.vitamins, self.min_value, self.max_value, out=self.vitamins)
        self.validate()

    def validate(self):
        # NaN survives clamping, so this is the one way a channel can still be out of range.
        valid = True
        for name in BASE_NEEDS:
            value = getattr(self, name)
            valid &= log.check(self.min_value <= value <= self.max_value, f"{name.capitalize()} out of bounds: {value}")
        for i, value in enumerate(self.vitamins):
            valid &= log.check(self.min_value <= value <= self.max_value,
                               f"Vitamin {vitamin_letter(i)} out of bounds: {value}")
        return valid

    def as_dict(self):
        return {
            "temperature": self.temperature,
            "water": self.water,
            "calories": self.calories,
            "vitamins": self.vitamins.tolist(),
        }

    def get_needs_string(self):
        vitamins = ",".join(str(round(v)) for v in self.vitamins.tolist())
        return f"T:{round(self.temperature)} W:{round(self.water)} C:{round(self.calories)} V:[{vitamins}]"

class DecayRates:
    """Drain per in-game minute for each category. All vitamin channels share one rate."""
    def __init__(self, temperature, water, calories, vitamins):
        self.temperature = temperature
        self.water = water
        self.calories = calories
        self.vitamins = vitamins

    @classmethod
    def from_hours_to_empty(cls, hours_to_empty, value_range=C.NEEDS_MAX_VALUE - C.NEEDS_MIN_VALUE):
        rates = {}
        for category in DECAY_CATEGORIES:
            hours = hours_to_empty[category]
            log.check(hours > 0, f"Hours to empty for {category} must be positive, got {hours}")
            rates[category] = value_range / (hours * C.MINUTES_PER_HOUR)
        return cls(**rates)

    def varied(self, variance, rng):
        """A copy with each category scaled by its own factor drawn from [1 - variance, 1 + variance]."""
        return DecayRates(**{
            category: getattr(self, category) * (1 + rng.uniform(-variance, variance))
            for category in DECAY_CATEGORIES
        })

    def as_dict(self):
        return {category: getattr(self, category) for category in DECAY_CATEGORIES}

    def __repr__(self):
        fields = ", ".join(f"{k}={v:.4f}" for k, v in self.as_dict().items())
        return f"DecayRates({fields})"

class NeedsModel:
    """
    Decays a NeedsState over fixed steps.

    The daily variance re-roll is the one deliberately non-reproducible part of
    the simulation: it draws from `rng` (a fresh random.Random by default), not
    from the world seed.
    """
    def __init__(self, state=None, hours_to_empty=None, variance=C.NEEDS_DAILY_VARIANCE,
                 real_seconds_per_game_day=C.REAL_SECONDS_PER_GAME_DAY, rng=None, start_day=1):
        self.state = state if state is not None else NeedsState()
        self.variance = variance
        self.real_seconds_per_game_day = real_seconds_per_game_day
        self.rng = rng if rng is not None else random.Random()
        value_range = self.state.max_value - self.state.min_value
        self.base_decay = DecayRates.from_hours_to_empty(hours_to_empty or C.NEEDS_HOURS_TO_EMPTY, value_range)
        self.daily_decay = DecayRates(**self.base_decay.as_dict())
        self.last_day = start_day

    def in_game_minutes(self, fixed_step_ms):
        """Converts real milliseconds into in-game minutes."""
        minutes_per_day = C.HOURS_PER_DAY * C.MINUTES_PER_HOUR
        return fixed_step_ms * minutes_per_day / (self.real_seconds_per_game_day * C.MILLISECONDS_PER_SECOND)

    def roll_daily_variance(self, day=None):
        self.daily_decay = self.base_decay.varied(self.variance, self.rng)
        self.last_day = day if day is not None else self.last_day + 1
        log.log(f"New daily decay rates for day {self.last_day}: {self.daily_decay}")

    def decay_step(self, fixed_step_ms, is_night, day_rollover=False, day=None):
        """
        Drains every channel for one fixed step.

        `is_night` and `day_rollover` come from the time model. Temperature only
        drains at night; water, calories and vitamins always drain.
        """
        if day_rollover:
            self.roll_daily_variance(day)

        minutes = self.in_game_minutes(fixed_step_ms)
        state = self.state
        rates = self.daily_decay

        if is_night:
            state.temperature -= rates.temperature * minutes
        state.water -= rates.water * minutes
        state.calories -= rates.calories * minutes
        state.vitamins -= rates.vitamins * minutes

        state.clamp()

