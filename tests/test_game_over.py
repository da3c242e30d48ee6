import pytest

import constants as C
from game_over import BASIC_NEEDS_REASON, evaluate_game_over, format_game_over_message
from needs import NeedsState


def make_state(temperature=50.0, water=50.0, calories=50.0, vitamins=(80.0, 80.0, 80.0, 80.0, 80.0)):
    state = NeedsState()
    state.temperature = temperature
    state.water = water
    state.calories = calories
    state.vitamins[:] = vitamins
    return state


def test_healthy_player_survives():
    assert evaluate_game_over(make_state()) is None


def test_frozen_player_dies_from_lack_of_basic_needs():
    assert evaluate_game_over(make_state(temperature=C.NEEDS_MIN_VALUE)) == "lack of basic needs"


@pytest.mark.parametrize("field", ["temperature", "water", "calories"])
def test_any_base_need_at_minimum_is_terminal(field):
    assert evaluate_game_over(make_state(**{field: C.NEEDS_MIN_VALUE})) == BASIC_NEEDS_REASON


def test_vitamin_a_deficiency():
    state = make_state(vitamins=(C.NEEDS_MIN_VALUE, 80.0, 80.0, 80.0, 80.0))
    assert evaluate_game_over(state) == "vitamin A deficiency"


def test_first_depleted_vitamin_wins():
    state = make_state(vitamins=(80.0, 80.0, 0.0, 0.0, 80.0))
    assert evaluate_game_over(state) == "vitamin C deficiency"


def test_base_needs_checked_before_vitamins():
    state = make_state(water=0.0, vitamins=(0.0, 80.0, 80.0, 80.0, 80.0))
    assert evaluate_game_over(state) == BASIC_NEEDS_REASON


def test_message_format():
    assert format_game_over_message("vitamin E deficiency") == "You died from vitamin E deficiency"
