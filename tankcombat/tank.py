"""A tank on the playing field: movement, turret rotation and its bouncing shell."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .camera import Vec3


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; a negative width or height extends leftwards/down."""

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    def intersects(self, other: Rect) -> bool:
        """True when the interiors overlap; touching edges do not count."""
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
        )


class Tank:
    """A player tank. ``player_type`` 1 faces left and starts on the right."""

    def __init__(self, player_type: int = 1) -> None:
        self.speed = 1.0
        self.rotate_speed = 1.0
        self.player_type = player_type
        self.health = 3

        self.game_over_rotation = 0.0
        self.game_over_max_rotation = 880.0

        self.res_x = 0
        self.res_y = 0
        self.floor_width = 0.0
        self.floor_height = 0.0
        self.floor_height_pos = 0.0

        self.base_width = 0.0
        self.base_height = 0.0
        self.base_depth = 0.0
        self.base_pos = Vec3()

        self.rotator_width = 0.0
        self.rotator_height = 0.0
        self.rotator_depth = 0.0
        self.rotator_angle = 0.0

        self.cannon_width = 0.0
        self.cannon_height = 0.0
        self.cannon_depth = 0.0

        self.c_ball_width = 0.0
        self.c_ball_height = 0.0
        self.c_ball_depth = 0.0
        self.c_ball_pos = Vec3()
        self.c_ball_speed = Vec3()
        self.c_ball_speed_mod = 0.0
        self.c_ball_life = 0
        self.c_ball_life_max = 0
        self.is_shooted = False

        self.tip = Vec3()
        self.bottom = Vec3()

        self.is_left_pressed = False
        self.is_right_pressed = False
        self.is_down_pressed = False
        self.is_up_pressed = False
        self.is_rotate_left = False
        self.is_rotate_right = False

    def setup(self, res_x, res_y, floor_width, floor_height, floor_height_pos, screen_height) -> None:
        """Size the tank for the floor and place it at its starting side."""
        self.res_x = res_x
        self.res_y = res_y
        self.floor_width = floor_width
        self.floor_height = floor_height
        self.floor_height_pos = floor_height_pos

        self.base_width = screen_height * 0.3 / (res_x * 0.5)
        self.base_height = screen_height * 0.3 / (res_y * 0.5)
        self.base_depth = self.base_width * 0.2

        if self.player_type:
            x = floor_width * 0.5 - self.base_width * 0.5 - 50
        else:
            x = -(floor_width * 0.5) + self.base_width * 0.5 + 50
        self.base_pos = Vec3(x, 0.0, self.base_depth * 0.5)

        self.rotator_width = min(self.base_width, self.base_height)
        self.rotator_height = self.rotator_width
        self.rotator_depth = 0.2 * self.rotator_width
        self.rotator_angle = 0.0

        self.cannon_width = self.rotator_width * 0.2
        self.cannon_height = self.cannon_width
        self.cannon_depth = self.cannon_width * 5.0

        self.c_ball_width = self.cannon_width * 0.9
        self.c_ball_height = self.c_ball_width
        self.c_ball_depth = self.cannon_depth * 0.2
        self.c_ball_speed_mod = 12.0
        self.c_ball_life = 0
        self.c_ball_life_max = 3

        self.is_shooted = False
        self.game_over_rotation = 0.0

        self.cannon_ends()

    def cannon_ends(self) -> tuple[Vec3, Vec3]:
        """Recompute and return the world positions of the cannon's tip and bottom."""
        lift = self.rotator_depth * 0.5 + self.base_depth * 0.51
        facing = -1.0 if self.player_type else 1.0
        angle = math.radians(self.rotator_angle)
        self.bottom = self.base_pos + Vec3(0.0, 0.0, lift)
        self.tip = self.bottom + Vec3(
            facing * self.cannon_depth * math.cos(angle),
            facing * self.cannon_depth * math.sin(angle),
            0.0,
        )
        return self.tip, self.bottom

    def update(self, first_person: bool) -> None:
        """Advance one frame: move, rotate the turret and fly the shell."""
        self.cannon_ends()
        if first_person:
            direction = (self.tip - self.bottom).normalized()
            right = direction.cross(Vec3(0.0, 0.0, 1.0))
            steps = (
                (self.is_up_pressed, direction),
                (self.is_down_pressed, -direction),
                (self.is_right_pressed, right),
                (self.is_left_pressed, -right),
            )
            movement = Vec3()
            for pressed, step in steps:
                if pressed and not self._hits_boundary():
                    movement = movement + step
            self.base_pos = replace(
                self.base_pos,
                x=self.base_pos.x + movement.x,
                y=self.base_pos.y + movement.y,
            )
        else:
            steps = (
                (self.is_left_pressed, -self.speed, 0.0),
                (self.is_right_pressed, self.speed, 0.0),
                (self.is_up_pressed, 0.0, self.speed),
                (self.is_down_pressed, 0.0, -self.speed),
            )
            for pressed, dx, dy in steps:
                if pressed and not self._hits_boundary():
                    self.base_pos = replace(
                        self.base_pos, x=self.base_pos.x + dx, y=self.base_pos.y + dy
                    )

        if self.is_rotate_left:
            self.rotator_angle += self.rotate_speed
        if self.is_rotate_right:
            self.rotator_angle -= self.rotate_speed

        if self.is_shooted:
            self.c_ball_pos = self.c_ball_pos + self.c_ball_speed * self.c_ball_speed_mod
            if self.bullet_boundary_collision(self.floor_width, self.floor_height):
                if self.c_ball_life == self.c_ball_life_max:
                    self.c_ball_life = 0
                    self.is_shooted = False

    def shoot(self) -> None:
        """Fire a shell from the cannon tip unless one is already in flight."""
        if self.is_shooted:
            return
        tip, bottom = self.cannon_ends()
        self.c_ball_pos = tip
        self.c_ball_speed = (tip - bottom).normalized()
        self.is_shooted = True

    def game_over_animation_update(self) -> None:
        """Spin the turret of the defeated tank until the animation limit."""
        self.is_shooted = False
        if self.game_over_rotation < self.game_over_max_rotation:
            self.game_over_rotation += 3
            self.rotator_angle += 3

    def _hits_boundary(self) -> bool:
        return self.tank_boundary_collision(self.floor_width, self.floor_height)

    def tank_boundary_collision(self, floor_width, floor_height) -> bool:
        """Clamp the tank onto the floor; True if it was outside on one side."""
        left = -(floor_width * 0.5) + self.base_width * 0.5
        right = floor_width * 0.5 - self.base_width * 0.5
        top = floor_height * 0.5 - self.base_height * 0.5
        bottom = -(floor_height * 0.5) + self.base_height * 0.5

        pos = self.base_pos
        if pos.x < left:
            self.base_pos = replace(pos, x=left)
            return True
        if pos.x > right:
            self.base_pos = replace(pos, x=right)
            return True
        if pos.y > top:
            self.base_pos = replace(pos, y=top)
            return True
        if pos.y < bottom:
            self.base_pos = replace(pos, y=bottom)
            return True
        return False

    def bullet_boundary_collision(self, floor_width, floor_height) -> bool:
        """Bounce the shell off a floor edge, counting the bounce; True on a hit."""
        left = -(floor_width * 0.5)
        right = floor_width * 0.5
        top = floor_height * 0.5
        bottom = -(floor_height * 0.5)

        pos = self.c_ball_pos
        if pos.x <= left or pos.x >= right:
            self.c_ball_speed = replace(self.c_ball_speed, x=-self.c_ball_speed.x)
            self.c_ball_life += 1
            return True
        if pos.y >= top or pos.y <= bottom:
            self.c_ball_speed = replace(self.c_ball_speed, y=-self.c_ball_speed.y)
            self.c_ball_life += 1
            return True
        return False

    def tank_rect(self) -> Rect:
        """Footprint of the tank used for hit tests."""
        return Rect(
            self.base_pos.x - self.base_width / 2,
            self.base_pos.y - self.base_depth / 2,
            self.base_width,
            self.base_depth,
        )

    def bullet_rect(self) -> Rect:
        """Footprint of the shell used for hit tests."""
        return Rect(
            self.c_ball_pos.x - self.c_ball_width / 2,
            self.c_ball_pos.y - self.c_ball_height / 2,
            self.c_ball_width,
            self.c_ball_height,
        )