import random

import pytest

import constants as C
from conftest import errors_in
from movement import Direction
from scheduler import FixedStepScheduler
from session import Session


class StepRecorder:
    def __init__(self):
        self.steps = []

    def __call__(self, fixed_step):
        self.steps.append(fixed_step)


def test_55ms_frame_runs_two_20ms_steps():
    scheduler = FixedStepScheduler(fixed_step_ms=20, max_delta_ms=200)
    recorder = StepRecorder()
    assert scheduler.accumulate(55, recorder) == 2
    assert recorder.steps == [20, 20]
    assert scheduler.residual == pytest.approx(15)


def test_first_frame_only_records_the_clock():
    scheduler = FixedStepScheduler(fixed_step_ms=20)
    recorder = StepRecorder()
    assert scheduler.frame(1000, recorder) == 0
    assert scheduler.frame(1055, recorder) == 2
    assert scheduler.residual == pytest.approx(15)


def test_stalled_frame_is_capped():
    scheduler = FixedStepScheduler(fixed_step_ms=20, max_delta_ms=200)
    recorder = StepRecorder()
    scheduler.start(0)
    assert scheduler.frame(5000, recorder) == 10
    assert scheduler.residual == pytest.approx(0)


def test_residual_below_one_step_after_every_frame():
    scheduler = FixedStepScheduler(fixed_step_ms=16.67, max_delta_ms=200)
    rng = random.Random(9)
    now = 0.0
    scheduler.start(now)
    for _ in range(500):
        now += rng.uniform(0, 250)
        scheduler.frame(now, lambda step: None)
        assert 0 <= scheduler.residual < scheduler.fixed_step


@pytest.mark.parametrize("chunks", [[100], [30, 45, 25], [5] * 20, [10, 0, 90]])
def test_step_sequence_independent_of_chunking(chunks):
    scheduler = FixedStepScheduler(fixed_step_ms=10, max_delta_ms=200)
    recorder = StepRecorder()
    for delta in chunks:
        scheduler.accumulate(delta, recorder)
    assert recorder.steps == [10] * 10
    assert scheduler.residual == 0


def test_halt_stops_remaining_steps_in_the_frame():
    scheduler = FixedStepScheduler(fixed_step_ms=10)
    recorder = StepRecorder()

    def halting_step(fixed_step):
        recorder(fixed_step)
        scheduler.halt()

    assert scheduler.accumulate(100, halting_step) == 1
    assert scheduler.accumulate(100, recorder) == 0
    assert recorder.steps == [10]


def test_clock_going_backwards_is_reported(notices):
    scheduler = FixedStepScheduler(fixed_step_ms=10)
    scheduler.start(500)
    assert scheduler.frame(400, StepRecorder()) == 0
    assert scheduler.residual == 0
    assert errors_in(notices)


def _run_session(chunks):
    session = Session(seed=7, fixed_step_ms=20, rng=random.Random(1))
    session.input_state.directions = {Direction.LEFT, Direction.UP}
    for delta in chunks:
        session.scheduler.accumulate(delta, session.step)
    needs = session.player.needs
    return (session.step_count, session.player.position, session.time_manager.elapsed_game_seconds,
            needs.temperature, needs.water, needs.calories, needs.vitamins.tolist())


def test_session_state_independent_of_frame_rate():
    fast = _run_session([20] * 300)
    slow = _run_session([200] * 30)
    uneven = _run_session([35, 5, 160, 100, 0, 60, 40] * 10 + [200] * 10)
    assert fast == slow == uneven


@pytest.mark.parametrize("chunks", [
    [100] * 6,
    [200] * 3,
    [50] * 12,
    [16, 17, 17] * 12,
    [85, 86, 86, 86, 86, 86, 85],
])
def test_default_step_count_independent_of_integer_frames(chunks):
    assert sum(chunks) == 600
    scheduler = FixedStepScheduler(fixed_step_ms=C.FIXED_STEP_MS, max_delta_ms=C.MAX_FRAME_DELTA_MS)
    reference = FixedStepScheduler(fixed_step_ms=C.FIXED_STEP_MS, max_delta_ms=C.MAX_FRAME_DELTA_MS)
    for delta in chunks:
        scheduler.accumulate(delta, lambda step: None)
    for _ in range(600):
        reference.accumulate(1, lambda step: None)
    assert scheduler.total_steps == reference.total_steps
    assert scheduler.residual == reference.residual
    assert 0 <= scheduler.residual < scheduler.fixed_step


def test_default_step_session_independent_of_frame_rate():
    def run(chunks):
        session = Session(seed=7, rng=random.Random(1))
        session.input_state.directions = {Direction.RIGHT}
        for delta in chunks:
            session.scheduler.accumulate(delta, session.step)
        return session.step_count, session.player.position, session.time_manager.elapsed_game_seconds

    assert run([100] * 30) == run([200] * 15) == run([16, 17, 17] * 60)
