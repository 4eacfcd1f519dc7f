"""A free-look camera driven by Euler angles, producing right-handed view matrices."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np

YAW = -90.0
PITCH = 0.0
SPEED = 5.0
SENSITIVITY = 0.1
ZOOM = 45.0

PITCH_LIMIT = 89.0
ZOOM_MIN = 1.0
ZOOM_MAX = 45.0


class CameraMovement(Enum):
    """Directions the camera can be moved in from keyboard-like input."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed look-at matrix, laid out so that ``matrix @ point`` transforms."""
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


class FreeCamera:
    """Camera that turns mouse, scroll and keyboard input into a view."""

    def __init__(
        self,
        position=(0.0, 0.0, 0.0),
        up=(0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.world_up = np.array(up, dtype=float)
        self.front = np.array([0.0, 0.0, -1.0])
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """Return the 4x4 view matrix for the current position and angles."""
        self._update_vectors()
        return _look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera along one of its axes."""
        velocity = self.movement_speed * delta_time
        offsets = {
            CameraMovement.FORWARD: self.front,
            CameraMovement.BACKWARD: -self.front,
            CameraMovement.LEFT: -self.right,
            CameraMovement.RIGHT: self.right,
            CameraMovement.UP: self.up,
            CameraMovement.DOWN: -self.up,
        }
        self.position = self.position + offsets[direction] * velocity

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by a cursor offset, optionally keeping pitch in range."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Zoom by a vertical scroll offset, clamped to the allowed range."""
        self.zoom = min(max(self.zoom - float(yoffset), ZOOM_MIN), ZOOM_MAX)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))