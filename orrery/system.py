"""Simulation state of the solar system and its keyboard controls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from orrery.bodies import (
    DEFAULT_ORBIT_FACTOR,
    DEFAULT_ROTATION_FACTOR,
    Planet,
    default_moon,
    default_planets,
)
from orrery.camera import Camera
from orrery.transforms import identity, rotate, scale, translate, world_to_screen

FONT_PATHS = ("fonts/Helvetica.ttc", "fonts/MarkerFelt.ttc")
FONT_NAMES = ("Helvetica", "MarkerFelt")
FONT_SIZE = 24

LABEL_SCALE = 0.5
LABEL_CHAR_WIDTH = 12.0
MOON_PARENT = "Earth"

_X = (1.0, 0.0, 0.0)
_Y = (0.0, 1.0, 0.0)
_Z = (0.0, 0.0, 1.0)


class Key(Enum):
    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    LEFT_CONTROL = auto()
    RIGHT_CONTROL = auto()
    F = auto()
    R = auto()


@dataclass
class SolarSystem:
    """Planets, the Moon, the camera and the user-facing settings."""

    planets: list[Planet] = field(default_factory=default_planets)
    moon: Planet = field(default_factory=default_moon)
    camera: Camera = field(default_factory=Camera)
    rotation_speed: float = DEFAULT_ROTATION_FACTOR
    orbit_speed: float = DEFAULT_ORBIT_FACTOR
    show_names: bool = True
    current_font: int = 0
    should_close: bool = False
    planet_positions: list[np.ndarray] = field(init=False)
    moon_position: np.ndarray = field(init=False)
    models: dict[str, np.ndarray] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.planet_positions = [np.zeros(3) for _ in self.planets]
        self.moon_position = np.zeros(3)
        self._update_speeds()

    @property
    def font_path(self) -> str:
        return FONT_PATHS[self.current_font]

    def _update_speeds(self) -> None:
        for body in (*self.planets, self.moon):
            body.apply_speed(self.orbit_speed, self.rotation_speed)

    def step(self) -> None:
        """Advance one frame: move bodies, record trails and model matrices."""
        for index, planet in enumerate(self.planets):
            planet.advance()
            model = rotate(identity(), planet.orbit_angle, _Y)
            model = translate(model, (planet.distance, 0.0, 0.0))
            model = rotate(model, math.radians(-90.0), _X)

            position = model[:3, 3].copy()
            self.planet_positions[index] = position
            if index > 0:
                planet.add_trail_point(position)

            model = rotate(model, math.radians(planet.tilt), _Y)
            model = rotate(model, planet.rotation_angle, _Z)
            self.models[planet.name] = scale(model, planet.radius)

            if planet.name == MOON_PARENT:
                self._step_moon(planet)

    def _step_moon(self, parent: Planet) -> None:
        moon = self.moon
        model = rotate(identity(), parent.orbit_angle, _Y)
        model = translate(model, (parent.distance, 0.0, 0.0))
        model = rotate(model, moon.orbit_angle, _Y)
        model = translate(model, (moon.distance, 0.0, 0.0))
        model = rotate(model, math.radians(-90.0), _X)

        self.moon_position = model[:3, 3].copy()
        moon.add_trail_point(self.moon_position)

        model = rotate(model, math.radians(moon.tilt), _X)
        model = rotate(model, moon.rotation_angle, _Y)
        self.models[moon.name] = scale(model, moon.radius)
        moon.advance()

    def handle_key(self, key: Key) -> None:
        """React to a key press."""
        key = Key(key)
        if key is Key.ESCAPE:
            self.should_close = True
        elif key is Key.UP:
            self.rotation_speed += 0.1
            self.orbit_speed += 0.05
            self._update_speeds()
        elif key is Key.DOWN:
            self.rotation_speed = max(self.rotation_speed - 0.1, 0.1)
            self.orbit_speed = max(self.orbit_speed - 0.05, 0.05)
            self._update_speeds()
        elif key is Key.RIGHT:
            self.rotation_speed *= 1.2
            self.orbit_speed *= 1.2
            self._update_speeds()
        elif key is Key.LEFT:
            self.rotation_speed = max(self.rotation_speed * 0.8, 0.05)
            self.orbit_speed = max(self.orbit_speed * 0.8, 0.025)
            self._update_speeds()
        elif key in (Key.LEFT_CONTROL, Key.RIGHT_CONTROL):
            self.show_names = not self.show_names
        elif key is Key.F:
            self.current_font = (self.current_font + 1) % len(FONT_PATHS)
        elif key is Key.R:
            self.camera.reset()

    def status_lines(self) -> list[str]:
        """The on-screen help and status text, top line first."""
        names = "Shown" if self.show_names else "Hidden"
        return [
            f"Rotation Speed: {self.rotation_speed:.2f} (Up/Down/Left/Right Keys)",
            f"Current Font: {FONT_NAMES[self.current_font]} (Press F to change)",
            f"Planet Names: {names} (Press Ctrl to toggle)",
            "Camera Control: Left-click (Rotate), Right-click (Pan), Scroll (Zoom), R (Reset)",
        ]

    def label_positions(self, view, projection, viewport) -> list[tuple[str, float, float]]:
        """Screen positions of body names, roughly centred; empty when hidden."""
        if not self.show_names:
            return []
        bodies = [*zip(self.planets, self.planet_positions), (self.moon, self.moon_position)]
        labels = []
        for body, position in bodies:
            screen = world_to_screen(body.name_position(position), view, projection, viewport)
            half_width = len(body.name) * LABEL_CHAR_WIDTH * LABEL_SCALE
            labels.append((body.name, float(screen[0] - half_width), float(screen[1])))
        return labels