"""Orbit/pan/zoom camera driven by mouse input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from orrery.transforms import identity, look_at, perspective, rotate

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

DEFAULT_POSITION = (0.0, 100.0, 230.0)
DEFAULT_TARGET = (0.0, 0.0, 0.0)
DEFAULT_UP = (0.0, 1.0, 0.0)
DEFAULT_ZOOM = 15.0

MIN_ZOOM = 1.0
MAX_ZOOM = 25.0
NEAR_PLANE = 0.1
FAR_PLANE = 1000.0


class MouseButton(Enum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class ButtonAction(Enum):
    RELEASE = 0
    PRESS = 1


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float)


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


@dataclass
class Camera:
    """Camera whose field of view (``zoom``, degrees) and pose follow the mouse."""

    position: np.ndarray = field(default_factory=lambda: _vector(DEFAULT_POSITION))
    target: np.ndarray = field(default_factory=lambda: _vector(DEFAULT_TARGET))
    up: np.ndarray = field(default_factory=lambda: _vector(DEFAULT_UP))
    zoom: float = DEFAULT_ZOOM
    mouse_speed: float = 0.5
    scroll_speed: float = 2.0
    first_mouse: bool = True
    last_x: float = SCREEN_WIDTH / 2.0
    last_y: float = SCREEN_HEIGHT / 2.0
    left_pressed: bool = False
    right_pressed: bool = False

    def reset(self) -> None:
        """Restore the default pose and zoom."""
        self.position = _vector(DEFAULT_POSITION)
        self.target = _vector(DEFAULT_TARGET)
        self.up = _vector(DEFAULT_UP)
        self.zoom = DEFAULT_ZOOM
        self.first_mouse = True

    def _basis(self) -> tuple[np.ndarray, np.ndarray]:
        direction = _normalize(self.position - self.target)
        right = _normalize(np.cross(self.up, direction))
        return right, np.cross(direction, right)

    def on_mouse_move(self, x: float, y: float) -> None:
        """Orbit with the left button held, pan with the right one."""
        if self.first_mouse:
            self.last_x = x
            self.last_y = y
            self.first_mouse = False

        x_offset = x - self.last_x
        y_offset = y - self.last_y
        self.last_x = x
        self.last_y = y

        if self.left_pressed:
            rot_x = -y_offset * self.mouse_speed * 0.01
            rot_y = -x_offset * self.mouse_speed * 0.01
            right, _ = self._basis()
            rotation = rotate(identity(), rot_y, self.up)
            rotation = rotate(rotation, rot_x, right)
            offset = rotation @ np.append(self.position - self.target, 1.0)
            self.position = self.target + offset[:3]

        if self.right_pressed:
            right, up = self._basis()
            pan = (
                (-right * x_offset * self.mouse_speed + up * y_offset * self.mouse_speed)
                * 0.25
                * self.zoom
                / 45.0
            )
            self.position = self.position + pan
            self.target = self.target + pan

    def on_mouse_button(self, button: MouseButton, action: ButtonAction) -> None:
        """Track which of the left and right buttons are held."""
        button = MouseButton(button)
        action = ButtonAction(action)
        pressed = action is ButtonAction.PRESS
        if button is MouseButton.LEFT:
            self.left_pressed = pressed
        elif button is MouseButton.RIGHT:
            self.right_pressed = pressed

    def on_scroll(self, x_offset: float, y_offset: float) -> None:
        """Narrow or widen the field of view, kept within its limits."""
        self.zoom = min(max(self.zoom - y_offset * self.scroll_speed, MIN_ZOOM), MAX_ZOOM)

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.target, self.up)

    def projection_matrix(self, aspect: float = SCREEN_WIDTH / SCREEN_HEIGHT) -> np.ndarray:
        return perspective(math.radians(self.zoom), aspect, NEAR_PLANE, FAR_PLANE)