"""Async host loop feeding fixed-rate ticks to a simulation."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from grid_snake.clock import TickClock
from grid_snake.direction import Direction
from grid_snake.engine import GameState, SimulationCore, Snapshot

logger = logging.getLogger(__name__)


class TickDriver:
    """Runs a :class:`SimulationCore` at a fixed tick rate on one event loop.

    Every owed tick is run to completion before control returns to the loop,
    so input submitted from other coroutines always lands between ticks.
    """

    def __init__(
        self,
        core: SimulationCore,
        rate: float,
        on_snapshot: Callable[[Snapshot], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.core = core
        self.tick_clock = TickClock(rate)
        self.on_snapshot = on_snapshot
        self._clock = clock
        self._running = False
        self.ticks_run = 0

    @classmethod
    def for_game(cls, game: GameState, **kwargs) -> TickDriver:
        """Build a driver running *game* at its configured tick rate."""
        return cls(game, game.config.tick_rate, **kwargs)

    @property
    def running(self) -> bool:
        return self._running

    def submit_direction(self, direction: Direction) -> None:
        self.core.on_direction_input(direction)

    def stop(self) -> None:
        """Stop the loop after the current batch of ticks."""
        self._running = False

    async def run(
        self,
        max_ticks: int | None = None,
        stop_on_game_over: bool = True,
    ) -> int:
        """Tick until stopped, game over or *max_ticks*; return ticks run."""
        self._running = True
        self.tick_clock.reset()
        self.tick_clock.owed_ticks(self._clock())
        logger.info("Tick driver started at %s ticks/s.", self.tick_clock.rate)
        try:
            while self._running:
                await asyncio.sleep(self.tick_clock.interval)
                owed = self.tick_clock.owed_ticks(self._clock())
                for _ in range(owed):
                    if max_ticks is not None and self.ticks_run >= max_ticks:
                        break
                    if self.core.tick() is None:
                        # Game over; the rest of the batch would be no-ops.
                        break
                    self.ticks_run += 1

                snapshot = self.core.render_snapshot()
                if self.on_snapshot is not None:
                    self.on_snapshot(snapshot)

                if stop_on_game_over and snapshot.game_over:
                    break
                if max_ticks is not None and self.ticks_run >= max_ticks:
                    break
        except asyncio.CancelledError:
            logger.info("Tick driver cancelled after %d ticks.", self.ticks_run)
            raise
        finally:
            self._running = False
        logger.info("Tick driver stopped after %d ticks.", self.ticks_run)
        return self.ticks_run
