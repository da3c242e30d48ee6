# logger.py

LEVEL_INFO = "INFO"
LEVEL_WARN = "WARN"
LEVEL_ERROR = "ERROR"

# This will hold a reference to the session's TimeManager instance.
_time_manager = None

# Optional collaborator that receives every notice as sink(level, message).
_sink = None

def set_time_manager(tm):
    """Sets the global time manager for the logger to use."""
    global _time_manager
    _time_manager = tm

def set_sink(sink):
    """Registers a diagnostics sink. Pass None to remove it."""
    global _sink
    _sink = sink

def _timestamp():
    if _time_manager is None:
        return "[Sim Start]"
    game_time = _time_manager.current_time()
    return f"[Day {game_time.day:03d} {game_time.hour:02d}:{game_time.minute:02d}]"

def _emit(level, message):
    prefix = _timestamp()
    if level == LEVEL_INFO:
        print(f"{prefix} {message}")
    else:
        print(f"{prefix} {level}: {message}")

    if _sink is None:
        return
    try:
        _sink(level, message)
    except Exception as e:
        # A broken sink must never stop the simulation loop. The notice is dropped.
        print(f"{prefix} {LEVEL_WARN}: Diagnostics sink failed, notice dropped. Reason: {e}")

def log(message):
    """Prints an informational message with a simulation timestamp if available."""
    _emit(LEVEL_INFO, message)

def warn(message):
    _emit(LEVEL_WARN, message)

def error(message):
    """Reports a programming invariant violation. Execution continues."""
    _emit(LEVEL_ERROR, message)

def check(condition, message):
    """Non-fatal assertion: reports `message` as an error when `condition` is false."""
    if not condition:
        error(f"ASSERTION FAILED: {message}")
    return bool(condition)
