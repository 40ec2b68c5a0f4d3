"""Grid Snake: deterministic tick-based simulation core."""

from grid_snake.clock import TickClock
from grid_snake.config import GameConfig
from grid_snake.direction import Direction
from grid_snake.driver import TickDriver
from grid_snake.engine import GameState, SimulationCore, Snapshot
from grid_snake.food import Food
from grid_snake.grid import Grid, GridPosition
from grid_snake.snake import BufferState, Outcome, Segment, Snake

__all__ = [
    "BufferState",
    "Direction",
    "Food",
    "GameConfig",
    "GameState",
    "Grid",
    "GridPosition",
    "Outcome",
    "Segment",
    "SimulationCore",
    "Snake",
    "Snapshot",
    "TickClock",
    "TickDriver",
]
