#movement.py

from enum import Enum

import constants as C

class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

class PlayerKinematics:
    """
    Position and velocity of the player. Velocity is rebuilt from the current
    input on every step; it never carries over between steps.
    """
    def __init__(self, x=0.0, y=0.0, speed=C.PLAYER_MOVE_SPEED,
                 world_width=C.WORLD_WIDTH, world_height=C.WORLD_HEIGHT):
        self.x = x
        self.y = y
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.speed = speed
        self.world_width = world_width
        self.world_height = world_height

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def velocity(self):
        return (self.velocity_x, self.velocity_y)

    def resolve_velocity(self, directions):
        """Turns a set of Direction intents into a velocity in pixels per second."""
        vx = 0.0
        vy = 0.0
        # Opposite keys on one axis: DOWN overrides UP and RIGHT overrides LEFT.
        if Direction.UP in directions: vy = -self.speed
        if Direction.DOWN in directions: vy = self.speed
        if Direction.LEFT in directions: vx = -self.speed
        if Direction.RIGHT in directions: vx = self.speed

        if vx != 0 and vy != 0:
            vx *= C.DIAGONAL_FACTOR
            vy *= C.DIAGONAL_FACTOR
        return vx, vy

    def integrate(self, fixed_step_ms, directions):
        """
        Applies one fixed step of movement. Each axis is committed only if it
        stays inside the world; a blocked axis is dropped so the player slides
        along the edge.
        """
        self.velocity_x, self.velocity_y = self.resolve_velocity(directions)

        new_x = self.x + self.velocity_x * fixed_step_ms / C.MILLISECONDS_PER_SECOND
        new_y = self.y + self.velocity_y * fixed_step_ms / C.MILLISECONDS_PER_SECOND

        if 0 <= new_x < self.world_width:
            self.x = new_x
        if 0 <= new_y < self.world_height:
            self.y = new_y
        return self.position
