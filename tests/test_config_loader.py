"""
Tests for configuration loading and validation.
"""

import pytest
import yaml

from rollerball.config_loader import load_config, get_config, reload_config


def write_config(tmp_path, **overrides):
    raw = {
        "surface": {"width": 800, "height": 1200},
        "ball": {"radius": 100, "color": [170, 170, 255]},
        "walls": {"count": 3, "speed": 10, "color": [255, 170, 255]},
        "display": {"background_color": [255, 255, 255], "banner_color": [255, 0, 0]},
    }
    for section, values in overrides.items():
        raw[section].update(values)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(raw))
    return str(path)


class TestDefaultConfig:

    def test_default_values(self):
        config = load_config()

        assert config.ball.radius == 100
        assert config.ball.reset_offset == 10
        assert config.walls.count == 3
        assert config.walls.speed == 10
        assert config.walls.width_divisor == 6
        assert config.walls.height_divisor == 20
        assert config.input.shake_threshold == 100
        assert config.display.banner_text == "You won!"

    def test_cached_config(self):
        assert get_config() is get_config()

    def test_reload(self, tmp_path):
        try:
            config = reload_config(write_config(tmp_path, walls={"count": 5}))
            assert config.walls.count == 5
            assert get_config() is config
        finally:
            reload_config()


class TestMinimalConfig:

    def test_optional_sections_have_defaults(self, tmp_path):
        config = load_config(write_config(tmp_path))

        assert config.input.gravity == pytest.approx(9.80665)
        assert config.loop.refresh_rate == 60
        assert config.loop.join_timeout == 2.0
        assert config.ball.reset_offset == 10


class TestValidation:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_bad_color(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, ball={"color": [1, 2]}))

    def test_no_walls(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, walls={"count": 0}))

    def test_zero_divisor(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, walls={"width_divisor": 0}))

    def test_non_positive_radius(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(write_config(tmp_path, ball={"radius": 0}))

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_config(str(path))
