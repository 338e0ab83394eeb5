"""Game logic for a two-tank arena combat game: materials, camera maths, tanks and game flow."""

__version__ = "0.1.0"
__all__ = ["materials", "camera", "tank", "game"]