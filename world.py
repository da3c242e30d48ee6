#world.py

import math

import numpy as np

import constants as C
import logger as log
from noise_generator import NoiseGenerator

class Entity:
    """A static thing placed in the world: a camp, a well, a berry bush..."""
    def __init__(self, kind, x, y, **attributes):
        self.kind = kind
        self.x = x
        self.y = y
        self.attributes = attributes

    @property
    def position(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"Entity({self.kind!r}, {self.x:.1f}, {self.y:.1f})"

def distance(a, b):
    return math.hypot(a[0] - b[0], a[1] - b[1])

class World:
    """
    Seeded world layout. Everything placed here is a deterministic function of
    the seed: the noise field decides where wells and resources go.
    """
    def __init__(self, seed, width=C.WORLD_WIDTH, height=C.WORLD_HEIGHT):
        self.seed = seed
        self.width = width
        self.height = height
        self.noise = NoiseGenerator(seed)
        self.entities = []
        self.village = None
        self.camps = []
        self.wells = []
        self.resources = []
        self.player_start_position = (width / 2, height / 2)
        log.log(f"World initialized with seed: {seed}")

    def generate(self):
        log.log("Generating world...")
        self._generate_village()
        self._generate_camps()
        self._generate_wells()
        self._generate_resources()
        log.log(f"World generated with {len(self.entities)} entities")
        return self

    def _add(self, entity):
        self.entities.append(entity)
        return entity

    def _generate_village(self):
        center_x, center_y = self.width / 2, self.height / 2
        offset_x, offset_y = C.VILLAGE_FACILITY_OFFSET
        self.village = self._add(Entity("village", center_x, center_y))
        self.wells.append(self._add(Entity("well", center_x + offset_x, center_y + offset_y,
                                           water_level=C.WELL_INITIAL_WATER_LEVEL)))
        self._add(Entity("storage_box", center_x - offset_x, center_y + offset_y, communal=True))
        log.log("Village generated at center")

    def _generate_camps(self):
        center_x, center_y = self.width / 2, self.height / 2
        spacing_x, spacing_y = C.CAMP_SPACING

        for i in range(C.VILLAGER_COUNT):
            angle = (i / C.VILLAGER_COUNT) * 2 * math.pi
            x = center_x + math.cos(angle) * C.CAMP_RADIUS
            y = center_y + math.sin(angle) * C.CAMP_RADIUS

            self.camps.append(self._add(Entity("camp", x, y, villager_id=i)))
            self._add(Entity("fireplace", x + spacing_x, y, is_burning=False))
            self._add(Entity("sleeping_bag", x - spacing_x, y))
            self._add(Entity("storage_box", x, y + spacing_y, villager_id=i))

        # The player lives at camp 0.
        player_camp = self.camps[0]
        start_x = player_camp.x + C.PLAYER_START_OFFSET[0]
        start_y = player_camp.y + C.PLAYER_START_OFFSET[1]
        self.player_start_position = (
            min(max(start_x, 0.0), self.width - 1.0),
            min(max(start_y, 0.0), self.height - 1.0),
        )
        log.log(f"{C.VILLAGER_COUNT} camps generated around village")

    def _candidate_cells(self):
        """Centres of every TILE_SIZE cell in the world, row by row."""
        half = C.TILE_SIZE / 2
        for gy in range(int(self.height // C.TILE_SIZE)):
            for gx in range(int(self.width // C.TILE_SIZE)):
                yield gx, gy, gx * C.TILE_SIZE + half, gy * C.TILE_SIZE + half

    def sample(self, x, y, offset=0.0):
        """Noise value for a world-space point."""
        return self.noise.noise_2d(x * C.NOISE_FREQUENCY + offset, y * C.NOISE_FREQUENCY + offset)

    def _is_too_close_to_village(self, position):
        return distance(position, self.village.position) < C.RESOURCE_VILLAGE_MIN_DISTANCE

    def _is_too_close_to_existing_well(self, position):
        return any(distance(position, well.position) < C.WELL_MIN_DISTANCE for well in self.wells)

    def _generate_wells(self):
        scored = [(self.sample(x, y, C.WELL_NOISE_OFFSET), x, y) for _, _, x, y in self._candidate_cells()]
        # Highest noise first; ties broken by position so the order never depends on the sort.
        scored.sort(key=lambda item: (-item[0], item[2], item[1]))

        placed = 0
        for _, x, y in scored:
            if placed >= C.WELL_COUNT:
                break
            if self._is_too_close_to_village((x, y)) or self._is_too_close_to_existing_well((x, y)):
                continue
            self.wells.append(self._add(Entity("well", x, y, water_level=C.WELL_INITIAL_WATER_LEVEL)))
            placed += 1
        log.log(f"{len(self.wells)} wells generated")

    def _resource_cells(self):
        """Every cell whose noise clears the resource threshold, away from the village, row by row."""
        return [(x, y) for _, _, x, y in self._candidate_cells()
                if self.sample(x, y) >= C.RESOURCE_NOISE_THRESHOLD and not self._is_too_close_to_village((x, y))]

    def _generate_resources(self):
        budget = (C.VILLAGER_COUNT + 1) * C.RESOURCES_PER_VILLAGER
        cells = self._resource_cells()
        if len(cells) > budget:
            # Evenly spaced picks over the row-ordered list spread resources across the whole map.
            cells = [cells[i * len(cells) // budget] for i in range(budget)]
        elif len(cells) < budget:
            log.warn(f"Only {len(cells)} cells can hold resources, wanted {budget}")

        per_type = {kind: 0 for kind in C.RESOURCE_TYPES}
        for i, (x, y) in enumerate(cells):
            kind = C.RESOURCE_TYPES[i % len(C.RESOURCE_TYPES)]
            if per_type[kind] >= C.MAX_RESOURCES_PER_TYPE:
                continue
            per_type[kind] += 1
            self.resources.append(self._add(Entity(kind, x, y, collected=False,
                                                   propagation_chance=C.RESOURCE_PROPAGATION_CHANCE)))
        log.log(f"{len(self.resources)} resources generated")

    def terrain_grid(self, cell_size=C.TERRAIN_GRID_CELL_SIZE):
        """Fractal noise sampled at the centre of every terrain cell, indexed [row, column]."""
        wx = np.arange(0, self.width, cell_size) + cell_size / 2
        wy = np.arange(0, self.height, cell_size) + cell_size / 2
        wx_grid, wy_grid = np.meshgrid(wx, wy)
        return self.noise.fractal_noise_2d_grid(
            wx_grid * C.NOISE_FREQUENCY, wy_grid * C.NOISE_FREQUENCY,
            octaves=C.NOISE_OCTAVES, persistence=C.NOISE_PERSISTENCE, lacunarity=C.NOISE_LACUNARITY
        )

    def entities_near(self, position, radius=C.TILE_SIZE * 1.5):
        return [e for e in self.entities if distance(e.position, position) <= radius]

    def entities_by_type(self, kind):
        return [e for e in self.entities if e.kind == kind]

    def remove_entity(self, entity):
        if entity in self.entities:
            self.entities.remove(entity)
            if entity in self.resources:
                self.resources.remove(entity)
            return True
        return False
