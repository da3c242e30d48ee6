#session.py

import constants as C
import logger as log
from game_over import evaluate_game_over, format_game_over_message
from needs import NeedsModel
from player import Player
from scheduler import FixedStepScheduler
from time_manager import TimeManager
from world import World

LEFT_BUTTON = 1
RIGHT_BUTTON = 3

class InputState:
    """
    Input pushed in by the window layer. The session samples it at the start
    of every fixed step, so input only takes effect on step boundaries.
    """
    def __init__(self):
        self.directions = set()
        self.clicks = []

    def push_click(self, button, position):
        self.clicks.append((button, position))

    def take_clicks(self):
        clicks, self.clicks = self.clicks, []
        return clicks

class Session:
    """
    One running game. Owns the clock, the world (and its noise generator), the
    player and the scheduler; nothing is looked up through globals.
    """
    def __init__(self, seed, fixed_step_ms=C.FIXED_STEP_MS, max_delta_ms=C.MAX_FRAME_DELTA_MS,
                 start_hour=C.START_HOUR, rng=None):
        log.log(f"Creating a new session with seed: {seed}")
        self.seed = seed
        self.time_manager = TimeManager(start_hour=start_hour)
        self.world = World(seed).generate()
        needs_model = NeedsModel(rng=rng, start_day=self.time_manager.current_day)
        start_x, start_y = self.world.player_start_position
        self.player = Player(start_x, start_y, needs_model=needs_model,
                             world_width=self.world.width, world_height=self.world.height)
        self.scheduler = FixedStepScheduler(fixed_step_ms, max_delta_ms)
        self.input_state = InputState()
        self.on_click = None
        self.game_over_reason = None
        self.step_count = 0

    @property
    def noise(self):
        return self.world.noise

    @property
    def is_over(self):
        return self.game_over_reason is not None

    def frame(self, now_ms):
        """Runs every fixed step owed since the last frame. Returns the number of steps."""
        if self.time_manager.is_paused:
            # Keep the clock reading current so resuming does not dump the paused time in at once.
            self.scheduler.start(now_ms)
            return 0
        return self.scheduler.frame(now_ms, self.step)

    def step(self, fixed_step_ms):
        """One fixed simulation step: input, clock, movement, needs, game-over check."""
        if self.is_over:
            return

        directions = frozenset(self.input_state.directions)
        for button, position in self.input_state.take_clicks():
            self._handle_click(button, position)

        day_rollover = self.time_manager.advance(fixed_step_ms)
        self.player.update(fixed_step_ms, directions, self.time_manager.is_night(),
                           day_rollover, self.time_manager.current_day)
        self.step_count += 1

        reason = evaluate_game_over(self.player.needs)
        if reason is not None:
            self._game_over(reason)

    def _handle_click(self, button, position):
        if button == LEFT_BUTTON:
            log.log(f"Left click at: {position}")
        elif button == RIGHT_BUTTON:
            log.log(f"Right click at: {position}")
        if self.on_click is not None:
            self.on_click(self, button, position)

    def _game_over(self, reason):
        self.game_over_reason = reason
        self.scheduler.halt()
        log.warn(f"GAME OVER: {format_game_over_message(reason)}. "
                 f"Survived {self.time_manager.current_day} day(s).")
