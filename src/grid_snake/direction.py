"""Cardinal movement directions and input-key decoding."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downwards, so ``UP`` decrements it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def inverse(self) -> Direction:
        """Return the direction pointing the opposite way."""
        return _OPPOSITES[self]

    @classmethod
    def from_input_key(cls, key: object) -> Direction | None:
        """Decode an arrow-key-like name, or return ``None`` if unrecognized.

        Accepts ``"up"``, ``"Up"``, ``"ArrowUp"``, ``"KEY_UP"`` and the
        equivalents for the other three arrows.
        """
        if not isinstance(key, str):
            return None
        name = key.strip().lower()
        for prefix in ("arrow", "key_"):
            if name.startswith(prefix):
                name = name[len(prefix):]
                break
        return _KEY_NAMES.get(name)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_NAMES: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}
