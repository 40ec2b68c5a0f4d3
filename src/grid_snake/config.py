"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from grid_snake.grid import GridPosition

logger = logging.getLogger(__name__)

# Fields that may be null in a config file.
_OPTIONAL_FIELDS = frozenset({"start_x", "start_y", "seed"})


@dataclass(frozen=True)
class GameConfig:
    """Grid size, tick rate, start cell and RNG seed for one game.

    ``start_x`` / ``start_y`` default to a quarter of the way across and
    halfway down. A ``seed`` of ``None`` draws entropy from the OS.
    """

    grid_width: int = 30
    grid_height: int = 20
    tick_rate: int = 8
    start_x: int | None = None
    start_y: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 2 or self.grid_height < 2:
            raise ValueError("grid_width and grid_height must each be at least 2.")
        if self.tick_rate < 1:
            raise ValueError("tick_rate must be at least 1.")
        start = self.start_position
        if not (0 <= start.x < self.grid_width and 0 <= start.y < self.grid_height):
            raise ValueError("Start position must lie inside the grid.")

    @property
    def start_position(self) -> GridPosition:
        x = self.start_x if self.start_x is not None else self.grid_width // 4
        y = self.start_y if self.start_y is not None else self.grid_height // 2
        return GridPosition(x, y)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object.")

        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}.")
        for key, value in raw.items():
            if value is None and key in _OPTIONAL_FIELDS:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be an integer, got {value!r}.")
        return cls(**raw)
