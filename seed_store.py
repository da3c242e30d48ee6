#seed_store.py

import json
import random
from pathlib import Path

import constants as C
import logger as log

def random_seed(rng=None):
    """A fresh world seed in [SEED_MIN, SEED_MAX]."""
    rng = rng if rng is not None else random
    return rng.randint(C.SEED_MIN, C.SEED_MAX)

def parse_seed(value):
    """
    Converts user or file input into a world seed. Returns None, with a
    warning, for anything that is not a whole number in [SEED_MIN, SEED_MAX].
    """
    try:
        seed = int(str(value).strip())
    except ValueError:
        log.warn(f"Ignoring seed {value!r}, it is not a whole number")
        return None
    if not C.SEED_MIN <= seed <= C.SEED_MAX:
        log.warn(f"Ignoring seed {seed}, it must be between {C.SEED_MIN} and {C.SEED_MAX}")
        return None
    return seed

def load_seed(path=C.SEED_FILE_PATH):
    """Returns the stored seed, or None if there is no usable seed file."""
    path = Path(path)
    if not path.exists():
        return None
    try:
        with open(path, "r") as f:
            data = json.load(f)
        value = data["seed"]
    except (OSError, ValueError, TypeError, KeyError) as e:
        log.warn(f"Could not read seed file {path}. Reason: {e}")
        return None
    return parse_seed(value)

def save_seed(seed, path=C.SEED_FILE_PATH):
    """Writes the seed back. Failures are logged and ignored."""
    path = Path(path)
    try:
        with open(path, "w") as f:
            json.dump({"seed": int(seed)}, f, indent=2)
    except OSError as e:
        log.warn(f"Could not save seed to {path}. Reason: {e}")
        return False
    return True

def resolve_seed(path=C.SEED_FILE_PATH, rng=None, requested=None):
    """
    Picks the seed for a session: a valid requested seed wins, then the stored
    seed, then a freshly rolled one. The choice is written back to the file.
    """
    seed = parse_seed(requested) if requested is not None else None
    if seed is None:
        seed = load_seed(path)
    if seed is None:
        seed = random_seed(rng)
        log.log(f"No stored seed found. Rolled new seed {seed}.")
    save_seed(seed, path)
    return seed

class SeedEntry:
    """
    Typed seed for the next game. Digits are collected while the entry is open;
    submitting returns a validated seed or None.
    """
    def __init__(self, max_digits=len(str(C.SEED_MAX))):
        self.max_digits = max_digits
        self.text = ""
        self.is_active = False

    def open(self, current_seed=None):
        self.text = "" if current_seed is None else str(current_seed)
        self.is_active = True

    def cancel(self):
        self.text = ""
        self.is_active = False

    def type_char(self, char):
        if char.isdigit() and len(self.text) < self.max_digits:
            self.text += char
            return True
        return False

    def backspace(self):
        self.text = self.text[:-1]

    def submit(self):
        """Closes the entry when the typed seed is valid; stays open otherwise."""
        seed = parse_seed(self.text)
        if seed is not None:
            self.cancel()
        return seed
