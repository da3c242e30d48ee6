#player.py

import constants as C
import logger as log
from movement import PlayerKinematics
from needs import NeedsModel

class Inventory:
    """Fixed-capacity hotbar. Slots hold an item name or None."""
    def __init__(self, size=C.PLAYER_INVENTORY_SIZE):
        self.slots = [None] * size
        self.selected_slot = 0

    def __len__(self):
        return len(self.slots)

    def _valid_slot(self, slot):
        return log.check(isinstance(slot, int) and 0 <= slot < len(self.slots), f"Invalid inventory slot {slot}")

    def add_item(self, item):
        """Puts the item in the first empty slot. Returns the slot index, or None when full."""
        for i, current in enumerate(self.slots):
            if current is None:
                self.slots[i] = item
                log.log(f"Added {item} to inventory slot {i}")
                return i
        log.warn("Inventory is full")
        return None

    def remove_item(self, slot):
        if not self._valid_slot(slot):
            return None
        item = self.slots[slot]
        self.slots[slot] = None
        log.log(f"Removed {item} from inventory slot {slot}")
        return item

    def get_item(self, slot):
        if not self._valid_slot(slot):
            return None
        return self.slots[slot]

    def select_slot(self, slot):
        if not self._valid_slot(slot):
            return False
        self.selected_slot = slot
        log.log(f"Selected inventory slot {slot}")
        return True

    @property
    def selected_item(self):
        return self.slots[self.selected_slot]

class Player:
    """Owns everything about the player character that the simulation mutates."""
    def __init__(self, x, y, needs_model=None, inventory=None, world_width=C.WORLD_WIDTH, world_height=C.WORLD_HEIGHT):
        self.kinematics = PlayerKinematics(x, y, world_width=world_width, world_height=world_height)
        self.needs_model = needs_model if needs_model is not None else NeedsModel()
        self.inventory = inventory if inventory is not None else Inventory()
        log.log(f"Player initialized at ({x:.0f}, {y:.0f})")

    @property
    def position(self):
        return self.kinematics.position

    @property
    def needs(self):
        return self.needs_model.state

    def update(self, fixed_step_ms, directions, is_night, day_rollover=False, day=None):
        self.kinematics.integrate(fixed_step_ms, directions)
        self.needs_model.decay_step(fixed_step_ms, is_night, day_rollover, day)
