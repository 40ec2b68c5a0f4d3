"""Grid coordinates with toroidal (wraparound) movement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from grid_snake.direction import Direction


@dataclass(frozen=True)
class GridPosition:
    """An ``(x, y)`` cell on the grid.

    Components are plain ints, so a coordinate may transiently be ``-1``
    before it is wrapped back into range.
    """

    x: int
    y: int

    @classmethod
    def new_from_move(
        cls,
        pos: GridPosition,
        direction: Direction,
        grid_width: int,
        grid_height: int,
    ) -> GridPosition:
        """Return the cell one step from *pos* in *direction*, wrapped.

        Python's ``%`` with a positive divisor never goes negative, so moving
        left from column 0 lands on ``grid_width - 1``.
        """
        dx, dy = direction.value
        return cls((pos.x + dx) % grid_width, (pos.y + dy) % grid_height)

    def to_list(self) -> list[int]:
        return [self.x, self.y]


class Grid:
    """Fixed grid dimensions plus the movement and sampling built on them.

    Dimensions are assumed positive; :class:`grid_snake.config.GameConfig`
    validates them before a grid is built.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def in_bounds(self, pos: GridPosition) -> bool:
        """Check whether a position lies within the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def wrap(self, x: int, y: int) -> GridPosition:
        """Wrap arbitrary coordinates around the grid edges."""
        return GridPosition(x % self.width, y % self.height)

    def move(self, pos: GridPosition, direction: Direction) -> GridPosition:
        """Move one cell in *direction* with wraparound."""
        return GridPosition.new_from_move(pos, direction, self.width, self.height)

    def random_position(self, rng: np.random.Generator) -> GridPosition:
        """Draw a uniformly random cell."""
        x = int(rng.integers(0, self.width))
        y = int(rng.integers(0, self.height))
        return GridPosition(x, y)

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
