"""Snake representation, input buffering and per-tick movement."""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from grid_snake.direction import Direction
from grid_snake.grid import Grid, GridPosition

if TYPE_CHECKING:
    from grid_snake.food import Food

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """One body cell. Two segments on the same cell compare equal."""

    position: GridPosition


class Outcome(enum.Enum):
    """What the head ran into on the most recent tick."""

    NONE = "none"
    ATE_FOOD = "ate_food"
    ATE_SELF = "ate_self"


class BufferState(enum.Enum):
    """Whether a second direction change is waiting to be promoted."""

    COMMITTED = "committed"
    PENDING_PROMOTION = "pending_promotion"


class Snake:
    """A snake made of a separately stored head plus a body deque.

    ``body[0]`` is the cell directly behind the head; ``body[-1]`` is the tail.

    Direction changes go through a two-slot buffer. The first change since
    the last tick goes straight into :attr:`direction`; a second one is held
    in :attr:`pending_direction` and promoted at the start of the first tick
    that finds :attr:`direction` already committed. This lets a player queue
    two turns (e.g. left then up) inside a single tick window without ever
    reversing into the body.
    """

    def __init__(self, start: GridPosition, grid: Grid) -> None:
        self.grid = grid
        self.head = Segment(start)
        self.body: deque[Segment] = deque([Segment(grid.wrap(start.x - 1, start.y))])
        self.direction = Direction.RIGHT
        self.last_committed_direction = Direction.RIGHT
        self.pending_direction: Direction | None = None
        self.last_outcome = Outcome.NONE

    @classmethod
    def from_positions(
        cls,
        grid: Grid,
        positions: Iterable[GridPosition],
        direction: Direction = Direction.RIGHT,
    ) -> Snake:
        """Build a snake from explicit cells, head first.

        The committed direction is set to *direction* as well, as if the
        snake had just finished a tick moving that way.
        """
        cells = list(positions)
        if len(cells) < 2:
            raise ValueError("A snake needs at least 2 segments.")
        snake = cls(cells[0], grid)
        snake.body = deque(Segment(p) for p in cells[1:])
        snake.direction = direction
        snake.last_committed_direction = direction
        return snake

    @property
    def buffer_state(self) -> BufferState:
        if self.pending_direction is None:
            return BufferState.COMMITTED
        return BufferState.PENDING_PROMOTION

    def __len__(self) -> int:
        return len(self.body) + 1

    def positions(self) -> list[GridPosition]:
        """Return every occupied cell, head first."""
        return [self.head.position, *(seg.position for seg in self.body)]

    def occupies(self, pos: GridPosition) -> bool:
        """Check whether the head or any body segment sits on *pos*."""
        return self.head.position == pos or any(
            seg.position == pos for seg in self.body
        )

    def handle_direction_input(self, requested: Direction) -> None:
        """Apply or buffer a requested direction, ignoring reversals."""
        if (
            self.direction != self.last_committed_direction
            and requested != self.direction.inverse()
        ):
            # A change is already waiting for the next tick; queue this one behind it.
            self.pending_direction = requested
            logger.debug("Buffered direction %s.", requested.name)
        elif requested != self.last_committed_direction.inverse():
            self.direction = requested

    def eats_food(self, food: Food) -> bool:
        return self.head.position == food.position

    def eats_self(self) -> bool:
        """Check whether the head overlaps any body segment."""
        return any(seg.position == self.head.position for seg in self.body)

    def update(self, food: Food) -> Outcome:
        """Advance one tick and return what the new head ran into."""
        if (
            self.direction == self.last_committed_direction
            and self.pending_direction is not None
        ):
            self.direction = self.pending_direction
            self.pending_direction = None

        new_head = Segment(self.grid.move(self.head.position, self.direction))
        self.body.appendleft(self.head)
        self.head = new_head

        if self.eats_self():
            outcome = Outcome.ATE_SELF
        elif self.eats_food(food):
            outcome = Outcome.ATE_FOOD
        else:
            outcome = Outcome.NONE

        # Eating (food or self) freezes the tail for this tick.
        if outcome is Outcome.NONE:
            self.body.pop()

        self.last_committed_direction = self.direction
        self.last_outcome = outcome
        return outcome

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": self.head.position.to_list(),
            "body": [seg.position.to_list() for seg in self.body],
            "direction": self.direction.name,
            "last_committed_direction": self.last_committed_direction.name,
            "pending_direction": (
                self.pending_direction.name if self.pending_direction else None
            ),
            "last_outcome": self.last_outcome.value,
        }
