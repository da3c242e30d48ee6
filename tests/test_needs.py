import random

import numpy as np
import pytest

import constants as C
from conftest import errors_in
from needs import DecayRates, NeedsModel, NeedsState
from time_manager import TimeManager

NIGHT_STEP_MS = 16.67


def assert_in_range(state):
    for value in (state.temperature, state.water, state.calories, *state.vitamins):
        assert state.min_value <= value <= state.max_value


def test_base_decay_comes_from_hours_to_empty():
    rates = DecayRates.from_hours_to_empty(C.NEEDS_HOURS_TO_EMPTY)
    assert rates.temperature == pytest.approx(100 / (8 * 60))
    assert rates.water == pytest.approx(100 / (24 * 60))
    assert rates.calories == pytest.approx(100 / (36 * 60))
    assert rates.vitamins == pytest.approx(100 / (48 * 60))


def test_one_real_second_is_2_4_game_minutes():
    assert NeedsModel().in_game_minutes(1000) == pytest.approx(2.4)


def test_temperature_only_drains_at_night():
    model = NeedsModel(rng=random.Random(1))
    model.decay_step(1000, is_night=False)
    assert model.state.temperature == C.NEEDS_MAX_VALUE
    assert model.state.water < C.NEEDS_MAX_VALUE
    assert model.state.calories < C.NEEDS_MAX_VALUE

    model.decay_step(1000, is_night=True)
    assert model.state.temperature == pytest.approx(100 - model.daily_decay.temperature * 2.4)


def test_all_vitamins_drain_by_the_same_amount():
    model = NeedsModel(rng=random.Random(1))
    model.decay_step(5000, is_night=False)
    assert len(set(model.state.vitamins.tolist())) == 1
    assert model.state.vitamins[0] == pytest.approx(100 - model.daily_decay.vitamins * 12.0)


def test_values_stay_in_range_after_every_step():
    model = NeedsModel(rng=random.Random(2))
    for _ in range(1000):
        model.decay_step(2000, is_night=True, day_rollover=True)
        assert_in_range(model.state)
    assert model.state.temperature == C.NEEDS_MIN_VALUE
    assert model.state.water == C.NEEDS_MIN_VALUE


def test_daily_decay_unchanged_without_rollover():
    model = NeedsModel(rng=random.Random(3))
    before = model.daily_decay.as_dict()
    for _ in range(50):
        model.decay_step(C.FIXED_STEP_MS, is_night=True)
    assert model.daily_decay.as_dict() == before
    assert model.last_day == 1


def test_rollover_rerolls_within_variance():
    model = NeedsModel(rng=random.Random(4))
    model.decay_step(C.FIXED_STEP_MS, is_night=False, day_rollover=True, day=2)
    assert model.last_day == 2
    for category, base in model.base_decay.as_dict().items():
        factor = getattr(model.daily_decay, category) / base
        assert 1 - C.NEEDS_DAILY_VARIANCE <= factor <= 1 + C.NEEDS_DAILY_VARIANCE


def test_base_decay_is_never_modified():
    model = NeedsModel(rng=random.Random(5))
    base = model.base_decay.as_dict()
    for day in range(2, 6):
        model.roll_daily_variance(day)
    assert model.base_decay.as_dict() == base


def test_variance_rerolled_exactly_once_per_day(monkeypatch):
    tm = TimeManager()
    model = NeedsModel(rng=random.Random(6), start_day=tm.current_day)
    rolled_days = []
    original = model.roll_daily_variance

    def counting_roll(day=None):
        rolled_days.append(day)
        original(day)

    monkeypatch.setattr(model, "roll_daily_variance", counting_roll)
    while tm.current_day < 4:
        rollover = tm.advance(C.FIXED_STEP_MS)
        model.decay_step(C.FIXED_STEP_MS, tm.is_night(), rollover, tm.current_day)

    assert rolled_days == [2, 3, 4]
    assert model.last_day == 4


def test_night_temperature_decreases_until_clamped():
    model = NeedsModel(rng=random.Random(42))
    previous = model.state.temperature
    for _ in range(1000):
        model.decay_step(NIGHT_STEP_MS, is_night=True)
        assert model.state.temperature < previous
        previous = model.state.temperature

    reached_floor = False
    for _ in range(20000):
        model.decay_step(NIGHT_STEP_MS, is_night=True)
        if reached_floor:
            assert model.state.temperature == C.NEEDS_MIN_VALUE
        else:
            assert model.state.temperature < previous
            reached_floor = model.state.temperature == C.NEEDS_MIN_VALUE
        previous = model.state.temperature
    assert reached_floor


def test_nan_is_reported_not_raised(notices):
    state = NeedsState()
    state.water = float("nan")
    state.clamp()
    assert any("Water out of bounds" in message for message in errors_in(notices))


def test_vitamin_accessors_are_bounds_checked(notices):
    state = NeedsState()
    assert state.get_vitamin(5) is None
    assert state.set_vitamin(-1, 10.0) is False
    assert len(errors_in(notices)) == 2

    assert state.set_vitamin(2, 150.0)
    assert state.get_vitamin(2) == C.NEEDS_MAX_VALUE
    assert state.set_vitamin(2, -3.0)
    assert state.get_vitamin(2) == C.NEEDS_MIN_VALUE


def test_set_base_need_clamps():
    state = NeedsState()
    assert state.set_base_need("calories", -20.0)
    assert state.calories == C.NEEDS_MIN_VALUE
    assert state.set_base_need("morale", 5.0) is False


def test_custom_vitamin_count():
    state = NeedsState(vitamin_count=3)
    assert state.vitamin_count == 3
    assert np.all(state.vitamins == C.NEEDS_MAX_VALUE)
    assert state.get_needs_string() == "T:100 W:100 C:100 V:[100,100,100]"
