#renderer.py

import numpy as np
import pygame

import constants as C
import logger as log
import ui

def terrain_colors(terrain_values):
    """
    Maps a [row, column] grid of noise values to an RGB array shaped for
    pygame.surfarray, i.e. [column, row, channel].
    """
    colors = np.zeros((*terrain_values.shape, 3), dtype=np.uint8)
    meadow_mask = terrain_values < C.TERRAIN_MEADOW_LEVEL
    forest_mask = (terrain_values >= C.TERRAIN_MEADOW_LEVEL) & (terrain_values < C.TERRAIN_ROCK_LEVEL)
    rock_mask = terrain_values >= C.TERRAIN_ROCK_LEVEL

    colors[meadow_mask] = C.COLOR_MEADOW
    if np.any(forest_mask):
        span = C.TERRAIN_ROCK_LEVEL - C.TERRAIN_MEADOW_LEVEL
        t = ((terrain_values[forest_mask] - C.TERRAIN_MEADOW_LEVEL) / span)[..., np.newaxis]
        colors[forest_mask] = (1 - t) * np.array(C.COLOR_MEADOW) + t * np.array(C.COLOR_FOREST)
    colors[rock_mask] = C.COLOR_ROCK
    return np.transpose(colors, (1, 0, 2))

class Renderer:
    """
    Draws a session once per frame. Reads simulation state only; never mutates it.
    """
    def __init__(self, font, small_font):
        self.font = font
        self.small_font = small_font
        # Terrain textures are cached per seed; the world layout never changes within a session.
        self.terrain_cache = {}
        self.night_overlay = None

    def _terrain_surface(self, world):
        if world.seed not in self.terrain_cache:
            color_array = terrain_colors(world.terrain_grid())
            surface = pygame.surfarray.make_surface(color_array)
            self.terrain_cache[world.seed] = pygame.transform.scale(surface, (world.width, world.height))
            log.log(f"Terrain texture generated for seed {world.seed}.")
        return self.terrain_cache[world.seed]

    def _draw_entities(self, screen, world):
        for entity in world.entities:
            color = C.ENTITY_COLORS.get(entity.kind, C.COLOR_WHITE)
            pygame.draw.circle(screen, color, (int(entity.x), int(entity.y)), C.UI_ENTITY_RADIUS)
            pygame.draw.circle(screen, C.COLOR_BLACK, (int(entity.x), int(entity.y)), C.UI_ENTITY_RADIUS, 1)

    def _draw_player(self, screen, player):
        x, y = player.position
        pygame.draw.circle(screen, C.COLOR_PLAYER, (int(x), int(y)), C.UI_PLAYER_RADIUS)
        pygame.draw.circle(screen, C.COLOR_BLACK, (int(x), int(y)), C.UI_PLAYER_RADIUS, 2)

    def _draw_night(self, screen):
        if self.night_overlay is None:
            self.night_overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            self.night_overlay.fill(C.COLOR_NIGHT_OVERLAY)
        screen.blit(self.night_overlay, (0, 0))

    def draw(self, screen, session, seed_entry=None):
        if not log.check(screen is not None, "Render called without a target surface"):
            return False

        screen.fill(C.COLOR_VOID)
        screen.blit(self._terrain_surface(session.world), (0, 0))
        self._draw_entities(screen, session.world)
        self._draw_player(screen, session.player)
        if session.time_manager.is_night():
            self._draw_night(screen)

        ui.draw_need_bars(screen, self.small_font, session.player.needs)
        ui.draw_time_display(screen, self.font, session.time_manager)
        ui.draw_inventory(screen, self.small_font, session.player.inventory)
        ui.draw_seed_display(screen, self.small_font, session.seed)

        if session.is_over:
            ui.draw_game_over(screen, self.font, session.game_over_reason, session.time_manager.current_day)
        if seed_entry is not None:
            ui.draw_seed_entry(screen, self.font, seed_entry)
        return True
