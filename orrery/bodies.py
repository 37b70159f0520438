"""Celestial bodies: orbital parameters, motion and trails."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

import numpy as np

MAX_TRAIL_POINTS = 200
DEFAULT_ORBIT_FACTOR = 0.5
DEFAULT_ROTATION_FACTOR = 1.0
ANGLE_STEP = 0.01


@dataclass
class Planet:
    """A body that orbits at ``distance`` and spins about its tilted axis.

    Angles are in radians except ``tilt``, which is in degrees.
    """

    name: str
    radius: float
    distance: float
    base_orbit_speed: float
    base_rotation_speed: float
    tilt: float
    texture: str = ""
    orbit_speed: float = field(init=False, default=0.0)
    rotation_speed: float = field(init=False, default=0.0)
    orbit_angle: float = 0.0
    rotation_angle: float = 0.0
    trail: deque = field(default_factory=lambda: deque(maxlen=MAX_TRAIL_POINTS))

    def __post_init__(self) -> None:
        self.apply_speed(DEFAULT_ORBIT_FACTOR, DEFAULT_ROTATION_FACTOR)

    def add_trail_point(self, position) -> None:
        """Record a position, dropping the oldest once the trail is full."""
        self.trail.append(np.asarray(position, dtype=float).reshape(3).copy())

    def trail_colors(self) -> np.ndarray:
        """RGBA per trail point: white, fading in towards the newest point.

        The older half of the trail is fully transparent.
        """
        count = len(self.trail)
        if count == 0:
            return np.zeros((0, 4))
        index = np.arange(count)
        alpha = index / count
        alpha[index < count // 2] = 0.0
        colors = np.ones((count, 4))
        colors[:, 3] = alpha
        return colors

    def name_position(self, position) -> np.ndarray:
        """Where the body's label is anchored, given its centre."""
        x, y, z = np.asarray(position, dtype=float).reshape(3)
        return np.array([x, y, z - self.radius])

    def advance(self) -> None:
        """Move one frame along the orbit and around the axis."""
        self.orbit_angle += self.orbit_speed * ANGLE_STEP
        self.rotation_angle += self.rotation_speed * ANGLE_STEP

    def apply_speed(self, orbit_factor: float, rotation_factor: float) -> None:
        """Scale the base speeds by the global speed factors."""
        self.orbit_speed = self.base_orbit_speed * orbit_factor
        self.rotation_speed = self.base_rotation_speed * rotation_factor


# name, radius, distance, orbit speed, rotation speed, tilt
_PLANETS = (
    ("Sun", 3.0, 0.0, 0.0, 0.1, 0.0),
    ("Mercury", 0.6, 4.5, 4.7, 0.017, 0.03),
    ("Venus", 1.2, 7.0, 3.5, 0.004, 177.3),
    ("Earth", 1.3, 10.75, 3.0, 1.0, 23.4),
    ("Mars", 0.7, 15.0, 2.4, 0.97, 25.2),
    ("Jupiter", 2.5, 19.0, 1.3, 2.4, 3.1),
    ("Saturn", 2.3, 25.0, 0.97, 2.2, 26.7),
    ("Uranus", 1.8, 35.0, 0.68, 1.4, 97.8),
    ("Neptune", 1.8, 45.0, 0.54, 1.5, 28.3),
)

_MOON = ("Moon", 0.3, 2.0, 13.0, 0.1, 6.7)


def _make(row) -> Planet:
    name, radius, distance, orbit, rotation, tilt = row
    return Planet(
        name=name,
        radius=radius,
        distance=distance,
        base_orbit_speed=orbit,
        base_rotation_speed=rotation,
        tilt=tilt,
        texture=f"texture/{name.lower()}.jpg",
    )


def default_planets() -> list[Planet]:
    """The Sun followed by the eight planets, innermost first."""
    return [_make(row) for row in _PLANETS]


def default_moon() -> Planet:
    """The Moon; its distance is measured from the Earth."""
    return _make(_MOON)