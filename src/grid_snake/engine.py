"""Tick-based game state composing grid, snake and food logic."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.direction import Direction
from grid_snake.food import Food
from grid_snake.grid import Grid, GridPosition
from grid_snake.snake import Outcome, Snake

logger = logging.getLogger(__name__)

FoodListener = Callable[[GridPosition], None]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame for a renderer."""

    tick: int
    head: GridPosition
    body: tuple[GridPosition, ...]
    food: GridPosition
    direction: Direction
    game_over: bool

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "head": self.head.to_list(),
            "body": [p.to_list() for p in self.body],
            "food": self.food.to_list(),
            "direction": self.direction.name,
            "game_over": self.game_over,
        }


class SimulationCore(Protocol):
    """What a host loop needs from the simulation."""

    def tick(self) -> Outcome | None: ...

    def render_snapshot(self) -> Snapshot: ...

    def on_direction_input(self, direction: Direction) -> None: ...


class GameState:
    """Single-snake, tick-based game.

    Owns the snake, the food and the RNG. Each call to :meth:`tick` runs one
    whole simulation step; once the snake eats itself the game is frozen
    until :meth:`reset`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        self._food_listeners: list[FoodListener] = []
        self._new_game()

    def _new_game(self) -> None:
        self.snake = Snake(self.config.start_position, self.grid)
        self.food = Food.random(self.rng, self.grid)
        self.game_over = False
        self.tick_count = 0

    def reset(self) -> None:
        """Start a fresh game, keeping the RNG stream and listeners."""
        self._new_game()
        logger.info("Game reset.")

    def add_food_listener(self, listener: FoodListener) -> None:
        """Register a callback fired with the eaten cell whenever food is eaten."""
        self._food_listeners.append(listener)

    def remove_food_listener(self, listener: FoodListener) -> None:
        if listener in self._food_listeners:
            self._food_listeners.remove(listener)

    def handle_direction_input(self, direction: Direction) -> None:
        """Forward a direction request to the snake, even after game over."""
        self.snake.handle_direction_input(direction)

    on_direction_input = handle_direction_input

    def on_key(self, key: object) -> Direction | None:
        """Decode a key name and forward it if it is an arrow."""
        direction = Direction.from_input_key(key)
        if direction is not None:
            self.handle_direction_input(direction)
        return direction

    def tick(self) -> Outcome | None:
        """Advance the game by one tick.

        Returns the snake's outcome, or ``None`` if the game is already over.
        """
        if self.game_over:
            return None

        outcome = self.snake.update(self.food)
        self.tick_count += 1

        if outcome is Outcome.ATE_FOOD:
            eaten = self.food.position
            self.food.respawn(self.rng, self.grid)
            self._notify_food_eaten(eaten)
        elif outcome is Outcome.ATE_SELF:
            self.game_over = True
            logger.info(
                "Snake ate itself at tick %d with length %d.",
                self.tick_count, len(self.snake),
            )
        return outcome

    def _notify_food_eaten(self, position: GridPosition) -> None:
        for listener in list(self._food_listeners):
            try:
                listener(position)
            except Exception:
                logger.exception("Food listener %r failed.", listener)

    def render_snapshot(self) -> Snapshot:
        return Snapshot(
            tick=self.tick_count,
            head=self.snake.head.position,
            body=tuple(seg.position for seg in self.snake.body),
            food=self.food.position,
            direction=self.snake.direction,
            game_over=self.game_over,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick_count,
            "game_over": self.game_over,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
