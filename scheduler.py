#scheduler.py

from fractions import Fraction

import constants as C
import logger as log

class FixedStepScheduler:
    """
    Accumulator loop that turns variable real-time frames into fixed simulation steps.

    Each frame adds its (capped) real delta to the residual and then runs whole
    steps until less than one step of time is left. The same sequence of frame
    deltas always produces the same sequence of steps, and the same total time
    produces the same number of steps however it is split into frames.
    """
    def __init__(self, fixed_step_ms=C.FIXED_STEP_MS, max_delta_ms=C.MAX_FRAME_DELTA_MS):
        log.check(fixed_step_ms > 0, f"Fixed step must be positive, got {fixed_step_ms}")
        self.fixed_step = fixed_step_ms
        self.max_delta = max_delta_ms
        # Exact rational bookkeeping; 1000/60 ms has no exact float form, so float subtraction would drift.
        self._exact_step = Fraction(fixed_step_ms)
        self._residual = Fraction(0)
        self.last_frame_time = None
        self.total_steps = 0
        self.is_halted = False

    @property
    def residual(self):
        """Real time owed but not yet simulated, in ms."""
        return float(self._residual)

    def start(self, now_ms):
        self.last_frame_time = now_ms

    def halt(self):
        """Stops all further steps, including any still pending in the current frame."""
        self.is_halted = True

    def frame(self, now_ms, step_fn):
        """Runs the steps owed for one frame. Returns how many steps ran."""
        if self.last_frame_time is None:
            self.start(now_ms)
            return 0
        delta = now_ms - self.last_frame_time
        self.last_frame_time = now_ms
        return self.accumulate(delta, step_fn)

    def accumulate(self, delta_ms, step_fn):
        if not log.check(delta_ms >= 0, f"Frame clock went backwards by {-delta_ms} ms"):
            delta_ms = 0
        if self.is_halted:
            return 0

        self._residual += Fraction(min(delta_ms, self.max_delta))

        steps = 0
        while self._residual >= self._exact_step:
            step_fn(self.fixed_step)
            self._residual -= self._exact_step
            steps += 1
            if self.is_halted:
                break
        self.total_steps += steps
        return steps
