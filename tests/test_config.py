"""Tests for the game configuration dataclass."""

import json

import pytest

from grid_snake.config import GameConfig
from grid_snake.grid import GridPosition


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.grid_width == 30
        assert cfg.grid_height == 20
        assert cfg.tick_rate == 8
        assert cfg.seed is None

    def test_default_start_position(self):
        assert GameConfig().start_position == GridPosition(7, 10)

    def test_explicit_start_position(self):
        cfg = GameConfig(grid_width=10, grid_height=10, start_x=0, start_y=9)
        assert cfg.start_position == GridPosition(0, 9)

    def test_grid_too_small(self):
        with pytest.raises(ValueError, match="at least 2"):
            GameConfig(grid_width=1)
        with pytest.raises(ValueError, match="at least 2"):
            GameConfig(grid_height=0)

    def test_tick_rate_must_be_positive(self):
        with pytest.raises(ValueError, match="tick_rate"):
            GameConfig(tick_rate=0)

    def test_start_outside_grid(self):
        with pytest.raises(ValueError, match="inside the grid"):
            GameConfig(grid_width=10, grid_height=10, start_x=10)
        with pytest.raises(ValueError, match="inside the grid"):
            GameConfig(grid_width=10, grid_height=10, start_y=-1)

    def test_to_dict_serializable(self):
        d = GameConfig(seed=5).to_dict()
        assert d["seed"] == 5
        assert isinstance(json.dumps(d), str)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(grid_width=12, grid_height=9, tick_rate=4, seed=99)
        path = tmp_path / "nested" / "game.json"
        cfg.save(path)
        assert path.exists()
        assert GameConfig.load(path) == cfg

    def test_load_validates(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"grid_width": 1}))
        with pytest.raises(ValueError):
            GameConfig.load(path)

    def test_load_rejects_unknown_keys(self, tmp_path):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"grid_width": 10, "speed": 3}))
        with pytest.raises(ValueError, match="Unknown config keys: speed"):
            GameConfig.load(path)

    @pytest.mark.parametrize("value", ["10", 10.5, True, [10]])
    def test_load_rejects_non_integer_values(self, tmp_path, value):
        path = tmp_path / "typed.json"
        path.write_text(json.dumps({"grid_width": value}))
        with pytest.raises(ValueError, match="grid_width must be an integer"):
            GameConfig.load(path)

    def test_load_rejects_null_required_field(self, tmp_path):
        path = tmp_path / "null.json"
        path.write_text(json.dumps({"tick_rate": None}))
        with pytest.raises(ValueError, match="tick_rate must be an integer"):
            GameConfig.load(path)

    def test_load_accepts_null_optional_fields(self, tmp_path):
        path = tmp_path / "nulls.json"
        path.write_text(json.dumps({"seed": None, "start_x": None}))
        assert GameConfig.load(path) == GameConfig()

    def test_load_rejects_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([30, 20]))
        with pytest.raises(ValueError, match="JSON object"):
            GameConfig.load(path)
