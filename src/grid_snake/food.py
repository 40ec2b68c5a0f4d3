"""Food placement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from grid_snake.grid import Grid, GridPosition

logger = logging.getLogger(__name__)


class Food:
    """The single piece of food on the board.

    Respawning draws from the whole grid, including cells under the snake.
    """

    def __init__(self, position: GridPosition) -> None:
        self.position = position

    @classmethod
    def random(cls, rng: np.random.Generator, grid: Grid) -> Food:
        return cls(grid.random_position(rng))

    def respawn(self, rng: np.random.Generator, grid: Grid) -> GridPosition:
        """Move the food to a uniformly random cell and return it."""
        self.position = grid.random_position(rng)
        logger.debug("Food respawned at (%d, %d).", self.position.x, self.position.y)
        return self.position

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"position": self.position.to_list()}
