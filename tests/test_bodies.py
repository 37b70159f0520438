import numpy as np
import pytest

from orrery.bodies import (
    MAX_TRAIL_POINTS,
    Planet,
    default_moon,
    default_planets,
)


def _planet(**kwargs):
    values = dict(
        name="Test",
        radius=2.0,
        distance=5.0,
        base_orbit_speed=4.0,
        base_rotation_speed=3.0,
        tilt=10.0,
    )
    values.update(kwargs)
    return Planet(**values)


def test_default_speeds_use_global_factors():
    planet = _planet()
    assert planet.orbit_speed == pytest.approx(4.0 * 0.5)
    assert planet.rotation_speed == pytest.approx(3.0 * 1.0)


def test_apply_speed_scales_base_speeds():
    planet = _planet()
    planet.apply_speed(2.0, 3.0)
    assert planet.orbit_speed == pytest.approx(8.0)
    assert planet.rotation_speed == pytest.approx(9.0)


def test_advance_accumulates_angles():
    planet = _planet()
    planet.advance()
    planet.advance()
    assert planet.orbit_angle == pytest.approx(2 * planet.orbit_speed * 0.01)
    assert planet.rotation_angle == pytest.approx(2 * planet.rotation_speed * 0.01)


def test_trail_keeps_only_newest_points():
    planet = _planet()
    for k in range(MAX_TRAIL_POINTS + 5):
        planet.add_trail_point((k, 0, 0))
    assert len(planet.trail) == MAX_TRAIL_POINTS
    assert planet.trail[0][0] == 5
    assert planet.trail[-1][0] == MAX_TRAIL_POINTS + 4


def test_trail_point_is_copied():
    planet = _planet()
    point = np.array([1.0, 2.0, 3.0])
    planet.add_trail_point(point)
    point[0] = 99.0
    assert planet.trail[0][0] == 1.0


def test_trail_colors_fade_and_hide_older_half():
    planet = _planet()
    for k in range(10):
        planet.add_trail_point((k, 0, 0))
    colors = planet.trail_colors()
    assert colors.shape == (10, 4)
    assert np.all(colors[:, :3] == 1.0)
    assert np.all(colors[:5, 3] == 0.0)
    assert np.all(np.diff(colors[:, 3]) >= 0)
    assert np.all(colors[5:, 3] > 0)
    assert colors[-1, 3] < 1.0


def test_trail_colors_two_points():
    planet = _planet()
    planet.add_trail_point((0, 0, 0))
    planet.add_trail_point((1, 0, 0))
    assert planet.trail_colors()[:, 3].tolist() == [0.0, 0.5]


def test_trail_colors_empty():
    assert _planet().trail_colors().shape == (0, 4)


def test_name_position_offsets_by_radius():
    planet = _planet(radius=2.0)
    result = planet.name_position((1.0, 2.0, 3.0))
    assert result.tolist() == [1.0, 2.0, 1.0]


def test_default_planets_order():
    names = [p.name for p in default_planets()]
    assert names == [
        "Sun",
        "Mercury",
        "Venus",
        "Earth",
        "Mars",
        "Jupiter",
        "Saturn",
        "Uranus",
        "Neptune",
    ]


def test_default_planets_increase_in_distance():
    distances = [p.distance for p in default_planets()]
    assert distances == sorted(distances)
    assert distances[0] == 0.0


def test_default_textures_follow_names():
    planets = default_planets()
    assert planets[3].texture == "texture/earth.jpg"
    assert default_moon().texture == "texture/moon.jpg"


def test_default_moon():
    moon = default_moon()
    assert moon.name == "Moon"
    assert moon.distance == 2.0
    assert moon.orbit_speed == pytest.approx(13.0 * 0.5)