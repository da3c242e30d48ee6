#main.py

import argparse
import pygame
import cProfile
import pstats
import constants as C
from graphing_manager import GraphingManager
from movement import Direction
from renderer import Renderer
from seed_store import SeedEntry, random_seed, resolve_seed, save_seed
from session import Session, LEFT_BUTTON
import logger
import ui

MOVEMENT_KEYS = {
    pygame.K_w: Direction.UP, pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN, pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT, pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT, pygame.K_RIGHT: Direction.RIGHT,
}
SLOT_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2, pygame.K_4: 3, pygame.K_5: 4, pygame.K_6: 5}

def build_parser():
    parser = argparse.ArgumentParser(description="Run the Alpine Survival simulation.")
    parser.add_argument(
        "--seed",
        help=f"World seed between {C.SEED_MIN} and {C.SEED_MAX}. Defaults to the stored seed.",
    )
    parser.add_argument(
        "--seed-file",
        default=C.SEED_FILE_PATH,
        help="JSON file the current seed is read from and written back to.",
    )
    return parser

def initialize_display():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption(C.WINDOW_CAPTION)
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    small_font = pygame.font.Font(None, C.UI_SMALL_FONT_SIZE)
    logger.log("Display surface and fonts created.")
    return screen, font, small_font

def select_clicked_slot(session, button, position):
    """Left clicks on the hotbar select that slot."""
    if button != LEFT_BUTTON:
        return
    slot = ui.slot_at(position, len(session.player.inventory))
    if slot is not None:
        session.player.inventory.select_slot(slot)

def start_session(seed):
    session = Session(seed)
    session.on_click = select_clicked_slot
    logger.set_time_manager(session.time_manager)
    return session

def handle_seed_entry_key(event, seed_entry):
    """Feeds one key press to the open seed entry. Returns the chosen seed once submitted."""
    if event.key == pygame.K_ESCAPE:
        seed_entry.cancel()
    elif event.key == pygame.K_BACKSPACE:
        seed_entry.backspace()
    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        return seed_entry.submit()
    else:
        seed_entry.type_char(event.unicode)
    return None

def run_game(seed, seed_file=C.SEED_FILE_PATH):
    screen, font, small_font = initialize_display()
    renderer = Renderer(font, small_font)
    graphs = GraphingManager()
    seed_entry = SeedEntry()
    session = start_session(seed)

    logger.log("Starting main game loop...")
    logger.log("CONTROLS: [WASD/Arrows] Move, [1-6] Select slot, [SPACE] Pause, [N] New game, "
               "[TAB] Choose seed, [ESC] Quit.")

    clock = pygame.time.Clock()
    running = True
    while running:
        clock.tick(C.CLOCK_TICK_RATE)

        next_seed = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.MOUSEBUTTONDOWN:
                session.input_state.push_click(event.button, event.pos)
            if event.type == pygame.KEYDOWN:
                if seed_entry.is_active:
                    next_seed = handle_seed_entry_key(event, seed_entry) or next_seed
                    continue
                if event.key == pygame.K_ESCAPE: running = False
                if event.key == pygame.K_SPACE: session.time_manager.toggle_pause()
                if event.key == pygame.K_TAB: seed_entry.open(session.seed)
                if event.key in SLOT_KEYS: session.player.inventory.select_slot(SLOT_KEYS[event.key])
                if event.key == pygame.K_n: next_seed = random_seed()

        if next_seed is not None:
            save_seed(next_seed, seed_file)
            graphs.clear()
            session = start_session(next_seed)

        # Movement keys are ignored while a seed is being typed.
        keys = pygame.key.get_pressed()
        session.input_state.directions = set() if seed_entry.is_active else {
            direction for key, direction in MOVEMENT_KEYS.items() if keys[key]
        }

        # --- Simulation Logic (The "Update" part) ---
        # Every fixed step owed for this frame runs here, before anything is drawn.
        session.frame(pygame.time.get_ticks())
        graphs.sample(session.time_manager, session.player.needs)

        # --- Drawing (The "Render" part) ---
        renderer.draw(screen, session, seed_entry)
        pygame.display.flip()

    logger.log("Main game loop ended.")
    return graphs

def shutdown_game(graphs):
    graphs.generate_and_save_graphs()
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Game ended cleanly.")

def main(argv=None):
    args = build_parser().parse_args(argv)
    logger.log("--- Alpine Survival Start ---")
    seed = resolve_seed(args.seed_file, requested=args.seed)
    graphs = run_game(seed, args.seed_file)
    shutdown_game(graphs)
    logger.log("--- Alpine Survival Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # This allows the game to exit cleanly without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
