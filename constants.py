# constants.py

# =============================================================================
# --- SIMULATION & PERFORMANCE SETTINGS ---
# =============================================================================
CLOCK_TICK_RATE = 60
SIMULATION_TICK_RATE = 60.0 # The fixed number of logic updates per real second
MILLISECONDS_PER_SECOND = 1000.0
FIXED_STEP_MS = MILLISECONDS_PER_SECOND / SIMULATION_TICK_RATE
# Cap on a single frame's real delta. Prevents a "spiral of death" after a stall.
MAX_FRAME_DELTA_MS = 200.0
PROFILER_PRINT_LINE_COUNT = 20

# =============================================================================
# --- TIME ---
# =============================================================================
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY

# 1 game day = 10 minutes of real time.
# gameTime = realTime * (SECONDS_PER_DAY / REAL_SECONDS_PER_GAME_DAY), i.e. 144x
REAL_SECONDS_PER_GAME_DAY = 600.0
START_HOUR = 8 # A new session starts at 08:00 on day 1
DAY_START_HOUR = 8 # Before this hour it is night
NIGHT_START_HOUR = 18 # From this hour on it is night

# =============================================================================
# --- NEEDS ---
# =============================================================================
NEEDS_MIN_VALUE = 0.0
NEEDS_MAX_VALUE = 100.0
VITAMIN_COUNT = 5

# How long each need takes to drain from full to empty, in in-game hours.
# Base rate per in-game minute = (max - min) / (hours_to_empty * 60)
NEEDS_HOURS_TO_EMPTY = {
    "temperature": 8.0, # Only drains at night
    "water": 24.0,
    "calories": 36.0,
    "vitamins": 48.0, # Shared by every vitamin channel
}

# Daily +/- variance applied to each decay rate category once per in-game day.
NEEDS_DAILY_VARIANCE = 0.2

# =============================================================================
# --- PLAYER ---
# =============================================================================
PLAYER_MOVE_SPEED = 100.0 # Pixels per real second
DIAGONAL_FACTOR = 0.707 # ~1/sqrt(2), keeps diagonal movement from being faster
PLAYER_INVENTORY_SIZE = 6
PLAYER_START_OFFSET = (0.0, 40.0) # Relative to the player's camp

# =============================================================================
# --- WORLD GENERATION ---
# =============================================================================
WORLD_WIDTH = 1200
WORLD_HEIGHT = 800
TILE_SIZE = 32
VILLAGER_COUNT = 7
CAMP_RADIUS = 250.0
CAMP_SPACING = (30.0, 30.0)
VILLAGE_FACILITY_OFFSET = (40.0, 40.0)
WELL_COUNT = 3
WELL_MIN_DISTANCE = 150.0
WELL_INITIAL_WATER_LEVEL = 100.0
RESOURCE_VILLAGE_MIN_DISTANCE = 100.0
RESOURCE_TYPES = ("blackberry", "mushroom", "herb", "rabbit", "deer", "tree")
RESOURCES_PER_VILLAGER = 3
MAX_RESOURCES_PER_TYPE = 10
RESOURCE_PROPAGATION_CHANCE = 0.1 # Chance per night that a resource spawns a neighbour
NOISE_FREQUENCY = 0.01 # World pixels -> noise lattice units
NOISE_OCTAVES = 3
NOISE_PERSISTENCE = 0.5
NOISE_LACUNARITY = 2.0
WELL_NOISE_OFFSET = 128.0 # Samples wells from a different region of the noise field than resources
RESOURCE_NOISE_THRESHOLD = 1.0
TERRAIN_GRID_CELL_SIZE = 8
TERRAIN_ROCK_LEVEL = 2.0
TERRAIN_MEADOW_LEVEL = -0.5

# =============================================================================
# --- PERSISTENCE ---
# =============================================================================
SEED_FILE_PATH = "alpine_seed.json"
SEED_MIN = 1
SEED_MAX = 999

# =============================================================================
# --- UI & COLORS ---
# =============================================================================
SCREEN_WIDTH = WORLD_WIDTH
SCREEN_HEIGHT = WORLD_HEIGHT
WINDOW_CAPTION = "Alpine Survival"
UI_FONT_SIZE = 24
UI_SMALL_FONT_SIZE = 18
UI_PADDING = 10
UI_BAR_WIDTH = 150
UI_BAR_HEIGHT = 20
UI_BAR_SPACING = 5
UI_BAR_LABEL_WIDTH = 40
UI_INVENTORY_SLOT_SIZE = 50
UI_INVENTORY_SLOT_SPACING = 5
UI_ENTITY_RADIUS = 8
UI_PLAYER_RADIUS = 10
UI_PANEL_ALPHA = 170

COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0); COLOR_VOID = (10, 0, 20)
COLOR_BAR_BG = (51, 51, 51); COLOR_BORDER = (120, 120, 120); COLOR_SELECTED = (255, 215, 0)
COLOR_TEMPERATURE = (255, 99, 71); COLOR_WATER = (30, 144, 255); COLOR_CALORIES = (255, 165, 0)
COLOR_VITAMIN = (50, 205, 50)
COLOR_MEADOW = (96, 160, 72); COLOR_FOREST = (34, 100, 34); COLOR_ROCK = (140, 140, 150)
COLOR_NIGHT_OVERLAY = (0, 0, 40, 110)
COLOR_PLAYER = (240, 240, 240)
ENTITY_COLORS = {
    "village": (200, 170, 120), "camp": (160, 110, 60), "fireplace": (230, 80, 20),
    "sleeping_bag": (90, 60, 160), "storage_box": (130, 90, 50), "well": (30, 144, 255),
    "blackberry": (75, 0, 130), "mushroom": (210, 180, 140), "herb": (0, 200, 100),
    "rabbit": (220, 220, 220), "deer": (139, 90, 43), "tree": (0, 80, 0),
}

# =============================================================================
# --- GRAPHS ---
# =============================================================================
GRAPH_OUTPUT_DIR = "."
GRAPH_SAMPLE_INTERVAL_SECONDS = SECONDS_PER_HOUR # One data point per in-game hour
