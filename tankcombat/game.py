"""Game flow: screens, key handling, hit detection and the end of a round."""

from __future__ import annotations

import math
from enum import Enum

from .tank import Tank

KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_UP = "up"
KEY_DOWN = "down"

PLAYER_LIVES = 3
ENEMY_LIVES = 1


class GameState(str, Enum):
    """Screens and views the game moves between."""

    START = "start"
    INFO = "info"
    TOP_DOWN = "2d"
    PERSPECTIVE = "3d"
    FIRST_PERSON = "fp"
    END = "end"


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"


# "M" cycles the views; from the start screen it begins the game.
_NEXT_ON_M = {
    GameState.END: GameState.START,
    GameState.TOP_DOWN: GameState.PERSPECTIVE,
    GameState.PERSPECTIVE: GameState.FIRST_PERSON,
    GameState.FIRST_PERSON: GameState.TOP_DOWN,
    GameState.INFO: GameState.START,
    GameState.START: GameState.TOP_DOWN,
}

_LIGHT_SWITCH_KEYS = {
    "1": "directional",
    "2": "p1_point",
    "3": "p2_point",
    "4": "p1_bullet_point",
    "5": "p2_bullet_point",
    "6": "spot1",
    "7": "spot2",
}

_LIGHT_FLAG_KEYS = {
    "I": 0, "i": 0,
    "o": 1,
    "P": 2, "p": 2,
    "K": 3, "k": 3,
    "L": 4, "l": 4,
    "ç": 5, "Ç": 5,
    ",": 6,
    ".": 7,
    "-": 8,
}

_MOVE_FLAGS = {
    KEY_LEFT: "is_left_pressed",
    KEY_RIGHT: "is_right_pressed",
    KEY_UP: "is_up_pressed",
    KEY_DOWN: "is_down_pressed",
    "Q": "is_rotate_left",
    "q": "is_rotate_left",
    "W": "is_rotate_right",
    "w": "is_rotate_right",
}


class Game:
    """Holds both tanks, the current screen and the light switches."""

    def __init__(self, width: float = 800, height: float = 800) -> None:
        self.width = width
        self.height = height

        self.lens_angle = 60.0
        self.alpha = 10.0
        self.beta = 1000.0
        self.perfect_dist = height * 0.5 / math.tan(math.radians(self.lens_angle * 0.5))

        self.flashing_time = 0.1
        self.last_flashing_time = 0.0

        self.res_x = 32
        self.res_y = 32
        self.floor_width = float(width)
        self.floor_height = float(height)
        self.floor_height_pos = 0.0

        self.state = GameState.START
        self.last_state: GameState | None = None
        self.difficulty = Difficulty.EASY

        self.lights = {name: True for name in _LIGHT_SWITCH_KEYS.values()}
        self.light_flags = [1] * 9
        self.wireframe = False

        self.player1 = Tank(player_type=1)
        self.player2 = Tank(player_type=0)
        self.player1.health = PLAYER_LIVES
        self.player2.health = ENEMY_LIVES
        self.winner: Tank | None = None

    @property
    def playing(self) -> bool:
        return self.state not in (GameState.START, GameState.END, GameState.INFO)

    def key_pressed(self, key: str) -> None:
        """React to a key going down."""
        if key in _LIGHT_SWITCH_KEYS:
            name = _LIGHT_SWITCH_KEYS[key]
            self.lights[name] = not self.lights[name]
        elif key in _LIGHT_FLAG_KEYS:
            i = _LIGHT_FLAG_KEYS[key]
            self.light_flags[i] = 0 if self.light_flags[i] == 1 else 1
        elif key == "g":
            self.wireframe = True
        elif key == "f":
            self.wireframe = False
        elif key in _MOVE_FLAGS:
            if self.playing:
                setattr(self.player1, _MOVE_FLAGS[key], True)
        elif key == " ":
            if self.playing:
                self.player1.shoot()
        elif key in ("M", "m"):
            self.last_state = self.state
            self.state = _NEXT_ON_M[self.state]
        elif key in ("N", "n"):
            if self.state is GameState.START:
                self.last_state = GameState.START
                self.state = GameState.INFO
        elif key in ("D", "d"):
            if self.state is GameState.START:
                self.difficulty = (
                    Difficulty.HARD if self.difficulty is Difficulty.EASY else Difficulty.EASY
                )

    def key_released(self, key: str) -> None:
        """React to a key coming up: stop the matching movement."""
        flag = _MOVE_FLAGS.get(key)
        if flag is not None:
            setattr(self.player1, flag, False)

    def update(self) -> None:
        """Advance the game by one frame."""
        if self.playing:
            self.player1.update(self.state is GameState.FIRST_PERSON)
            self.player2.update(False)
            self.check_bullet_collisions(self.player1, self.player2)
            self.check_game_over()
        elif self.state is GameState.END and self.winner is not None:
            if self.winner is self.player1:
                self.player2.game_over_animation_update()
            elif self.winner is self.player2:
                self.player1.game_over_animation_update()
        elif self.state is GameState.START:
            for tank in (self.player1, self.player2):
                tank.setup(10, 10, self.floor_width, self.floor_height,
                           self.floor_height_pos, self.height)
            if self.difficulty is Difficulty.HARD:
                self.lights["directional"] = False
                self.lights["p1_point"] = False
                self.lights["p2_point"] = False
                self.lights["p1_bullet_point"] = True
                self.lights["p2_bullet_point"] = True

    def check_bullet_collisions(self, player: Tank, enemy: Tank) -> None:
        """Apply hits; the player's shell only counts after a ricochet."""
        if player.is_shooted and player.bullet_rect().intersects(enemy.tank_rect()):
            if player.c_ball_life > 0:
                enemy.health -= 1
                player.is_shooted = False
                player.c_ball_life = 0
        if enemy.is_shooted and enemy.bullet_rect().intersects(player.tank_rect()):
            player.health -= 1
            enemy.is_shooted = False
            enemy.c_ball_life = 0

    def check_game_over(self) -> None:
        """End the round when a tank has no lives left and reset the lives."""
        if self.player1.health <= 0:
            self.winner = self.player2
        elif self.player2.health <= 0:
            self.winner = self.player1
        else:
            return
        self.player1.health = PLAYER_LIVES
        self.player2.health = ENEMY_LIVES
        self.state = GameState.END

    def lives_text(self) -> str:
        health = self.player1.health
        if isinstance(health, float) and health.is_integer():
            health = int(health)
        return f"LIVES: {health}"

    def end_text(self) -> str:
        return "PLAYER 1 WINS!" if self.winner is self.player1 else "GAME OVER!"