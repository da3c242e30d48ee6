#ui.py

import pygame
import constants as C
from game_over import format_game_over_message
from needs import BASE_NEEDS, vitamin_letter

NEED_BAR_COLORS = {
    "temperature": C.COLOR_TEMPERATURE,
    "water": C.COLOR_WATER,
    "calories": C.COLOR_CALORIES,
}
NEED_BAR_LABELS = {"temperature": "TMP", "water": "H2O", "calories": "CAL"}

def _draw_panel(screen, rect):
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill((0, 0, 0, C.UI_PANEL_ALPHA))
    screen.blit(panel, rect.topleft)

def _draw_bar(screen, font, x, y, label, value, color):
    label_surface = font.render(label, True, C.COLOR_WHITE)
    screen.blit(label_surface, (x, y))

    bar_x = x + C.UI_BAR_LABEL_WIDTH
    ratio = (value - C.NEEDS_MIN_VALUE) / (C.NEEDS_MAX_VALUE - C.NEEDS_MIN_VALUE)
    pygame.draw.rect(screen, C.COLOR_BAR_BG, (bar_x, y, C.UI_BAR_WIDTH, C.UI_BAR_HEIGHT))
    pygame.draw.rect(screen, color, (bar_x, y, C.UI_BAR_WIDTH * ratio, C.UI_BAR_HEIGHT))
    pygame.draw.rect(screen, C.COLOR_BORDER, (bar_x, y, C.UI_BAR_WIDTH, C.UI_BAR_HEIGHT), 1)

    value_surface = font.render(str(round(value)), True, C.COLOR_WHITE)
    value_rect = value_surface.get_rect(midright=(bar_x + C.UI_BAR_WIDTH - 4, y + C.UI_BAR_HEIGHT / 2))
    screen.blit(value_surface, value_rect)

def draw_need_bars(screen, font, needs):
    """One bar per base need, then one per vitamin channel, top-left of the screen."""
    row_count = len(BASE_NEEDS) + needs.vitamin_count
    row_height = C.UI_BAR_HEIGHT + C.UI_BAR_SPACING
    panel = pygame.Rect(C.UI_PADDING, C.UI_PADDING,
                        C.UI_BAR_LABEL_WIDTH + C.UI_BAR_WIDTH + 2 * C.UI_PADDING,
                        row_count * row_height + 2 * C.UI_PADDING)
    _draw_panel(screen, panel)

    x = panel.x + C.UI_PADDING
    y = panel.y + C.UI_PADDING
    for name in BASE_NEEDS:
        _draw_bar(screen, font, x, y, NEED_BAR_LABELS[name], getattr(needs, name), NEED_BAR_COLORS[name])
        y += row_height
    for i, value in enumerate(needs.vitamins):
        _draw_bar(screen, font, x, y, vitamin_letter(i), value, C.COLOR_VITAMIN)
        y += row_height

def draw_time_display(screen, font, time_manager):
    text_surface = font.render(time_manager.get_display_string(), True, C.COLOR_WHITE)
    rect = text_surface.get_rect(topright=(C.SCREEN_WIDTH - 2 * C.UI_PADDING, 2 * C.UI_PADDING))
    _draw_panel(screen, rect.inflate(2 * C.UI_PADDING, 2 * C.UI_PADDING))
    screen.blit(text_surface, rect)

def draw_seed_display(screen, font, seed):
    text_surface = font.render(f"Current Seed: {seed}  [N] New Game  [TAB] Choose Seed", True, C.COLOR_WHITE)
    rect = text_surface.get_rect(bottomright=(C.SCREEN_WIDTH - 2 * C.UI_PADDING, C.SCREEN_HEIGHT - 2 * C.UI_PADDING))
    _draw_panel(screen, rect.inflate(2 * C.UI_PADDING, 2 * C.UI_PADDING))
    screen.blit(text_surface, rect)

def draw_seed_entry(screen, font, seed_entry):
    """Prompt for the next game's seed, shown while the entry is open."""
    if not seed_entry.is_active:
        return
    cursor = "_" if len(seed_entry.text) < seed_entry.max_digits else ""
    text = f"Next seed ({C.SEED_MIN}-{C.SEED_MAX}): {seed_entry.text}{cursor}  [ENTER] Start  [ESC] Cancel"
    text_surface = font.render(text, True, C.COLOR_WHITE)
    rect = text_surface.get_rect(center=(C.SCREEN_WIDTH / 2, C.SCREEN_HEIGHT / 3))
    _draw_panel(screen, rect.inflate(4 * C.UI_PADDING, 2 * C.UI_PADDING))
    screen.blit(text_surface, rect)

def inventory_slot_rects(slot_count=C.PLAYER_INVENTORY_SIZE):
    """Screen rectangles of the hotbar slots, centred along the bottom edge."""
    step = C.UI_INVENTORY_SLOT_SIZE + C.UI_INVENTORY_SLOT_SPACING
    total_width = slot_count * step - C.UI_INVENTORY_SLOT_SPACING
    start_x = (C.SCREEN_WIDTH - total_width) / 2
    y = C.SCREEN_HEIGHT - C.UI_INVENTORY_SLOT_SIZE - 2 * C.UI_PADDING
    return [pygame.Rect(int(start_x + i * step), int(y), C.UI_INVENTORY_SLOT_SIZE, C.UI_INVENTORY_SLOT_SIZE)
            for i in range(slot_count)]

def slot_at(screen_pos, slot_count=C.PLAYER_INVENTORY_SIZE):
    """Index of the hotbar slot under a screen position, or None."""
    for i, rect in enumerate(inventory_slot_rects(slot_count)):
        if rect.collidepoint(screen_pos):
            return i
    return None

def draw_inventory(screen, font, inventory):
    rects = inventory_slot_rects(len(inventory))
    _draw_panel(screen, rects[0].union(rects[-1]).inflate(2 * C.UI_PADDING, 2 * C.UI_PADDING))
    for i, rect in enumerate(rects):
        border = C.COLOR_SELECTED if i == inventory.selected_slot else C.COLOR_BORDER
        pygame.draw.rect(screen, C.COLOR_BAR_BG, rect)
        pygame.draw.rect(screen, border, rect, 2)
        item = inventory.slots[i]
        if item is not None:
            text_surface = font.render(item[:4], True, C.COLOR_WHITE)
            screen.blit(text_surface, text_surface.get_rect(center=rect.center))

def draw_game_over(screen, font, reason, days_survived):
    """Draws the terminal overlay."""
    lines = ["Game Over", format_game_over_message(reason), f"You survived {days_survived} day(s)", "[N] New Game"]
    surfaces = [font.render(line, True, C.COLOR_WHITE) for line in lines]
    line_height = font.get_linesize()
    width = max(s.get_width() for s in surfaces) + 4 * C.UI_PADDING
    height = line_height * len(surfaces) + 4 * C.UI_PADDING
    panel = pygame.Rect(0, 0, width, height)
    panel.center = (C.SCREEN_WIDTH / 2, C.SCREEN_HEIGHT / 2)
    _draw_panel(screen, panel)
    for i, surface in enumerate(surfaces):
        rect = surface.get_rect(midtop=(panel.centerx, panel.y + 2 * C.UI_PADDING + i * line_height))
        screen.blit(surface, rect)
