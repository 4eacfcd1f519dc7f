"""A particle emitter that spawns, ages and billboards glowing sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import numpy as np

DEFAULT_CONST_SPEED = (5.0, 5.0, 0.0)
FACE_VECTOR = np.array([0.0, 0.0, 1.0])

# Two triangles of a unit quad: x, y, z followed by u, v per vertex.
QUAD_VERTICES = np.array(
    [
        [0.0, 1.0, 0.0, 0.0, 1.0],
        [1.0, 0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0, 1.0],
        [1.0, 1.0, 0.0, 1.0, 1.0],
        [1.0, 0.0, 0.0, 1.0, 0.0],
    ],
    dtype=np.float32,
)


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _ones4() -> np.ndarray:
    return np.ones(4)


@dataclass
class Particle:
    """State of a single particle."""

    position: np.ndarray = field(default_factory=_zeros3)
    velocity: np.ndarray = field(default_factory=_zeros3)
    color: np.ndarray = field(default_factory=_ones4)
    lifetime: float = 0.0


@dataclass(frozen=True)
class DrawCommand:
    """What is needed to draw one living particle as a camera-facing quad."""

    model: np.ndarray
    color: np.ndarray
    lifetime: float


def _translation(offset: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _scaling(scale: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[0, 0], matrix[1, 1], matrix[2, 2] = scale
    return matrix


def _rotation(angle: float, axis: np.ndarray) -> np.ndarray:
    x, y, z = axis
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return matrix


def _billboard(position: np.ndarray, camera_position: np.ndarray) -> np.ndarray:
    """Rotation turning the quad's face towards the camera."""
    with np.errstate(invalid="ignore", divide="ignore"):
        direction = camera_position - position
        direction = direction / np.linalg.norm(direction)
        axis = np.cross(FACE_VECTOR, direction)
        length = np.linalg.norm(axis)
        cos_angle = float(np.clip(np.dot(FACE_VECTOR, direction), -1.0, 1.0))
        if length == 0.0:
            if cos_angle > 0.0:
                return np.identity(4)
            return _rotation(math.pi, np.array([0.0, 1.0, 0.0]))
        return _rotation(math.acos(cos_angle), axis / length)


class ParticleGenerator:
    """Spawns particles around a centre, ages them and drops the dead ones."""

    def __init__(
        self,
        amount: int,
        min_time: float,
        max_time: float,
        color: Iterable[float],
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.amount = int(amount)
        self.min_time = float(min_time)
        self.max_time = float(max_time)
        self.color = np.array(color, dtype=float)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.center_position = np.zeros(3)
        self.const_speed = np.array(DEFAULT_CONST_SPEED)
        self.particles: List[Particle] = [Particle() for _ in range(self.amount)]

    def _ball(self, radius: float) -> np.ndarray:
        while True:
            point = self.rng.uniform(-radius, radius, 3)
            if np.linalg.norm(point) <= radius:
                return point

    def spawn_particles(
        self,
        amount: int,
        min_velocity: Iterable[float],
        max_velocity: Iterable[float],
    ) -> None:
        """Add ``amount`` particles within a unit ball around the centre."""
        low = np.asarray(min_velocity, dtype=float) * np.ones(3)
        high = np.asarray(max_velocity, dtype=float) * np.ones(3)
        for _ in range(amount):
            self.particles.append(
                Particle(
                    position=self.center_position + self._ball(1.0),
                    velocity=self.rng.uniform(low, high),
                    color=np.append(self.color, 1.0),
                    lifetime=float(self.rng.uniform(self.min_time, self.max_time)),
                )
            )

    def update(self, dt: float, new_particles: int = 0, offset=(0.0, 0.0, 0.0)) -> None:
        """Advance every particle by ``dt`` seconds."""
        for particle in self.particles:
            self._update_particle(particle, dt)

    def _update_particle(self, particle: Particle, dt: float) -> None:
        with np.errstate(all="ignore"):
            ypos = np.float64(particle.position[1])
            fade = np.float64(particle.lifetime) / self.max_time
            if particle.velocity[1] > 0:
                factor = np.array(
                    [0.5 * math.pi / ypos, 2 * math.pi / ypos, 0.5 * math.pi / ypos]
                )
                step = fade * factor * particle.velocity * dt
            else:
                factor = np.full(3, 0.5 * math.pi / ypos)
                step = 0.1 * fade * factor * particle.velocity * dt
            particle.position = particle.position + step

            color_factor = np.sqrt(np.float64(5.0 - particle.lifetime))
            particle.color = particle.color - np.array(
                [color_factor * 0.006, color_factor * 0.008, color_factor * 0.01, 1.0]
            )
            if particle.position[1] < 2:
                particle.color = particle.color - 0.05
        particle.lifetime -= dt

    def draw(self, camera_position: Iterable[float], scale: Iterable[float]) -> List[DrawCommand]:
        """Return draw commands for living particles and discard the dead ones."""
        camera = np.asarray(camera_position, dtype=float)
        scale_matrix = _scaling(np.asarray(scale, dtype=float) * np.ones(3))
        commands: List[DrawCommand] = []
        survivors: List[Particle] = []
        for particle in self.particles:
            if particle.lifetime > 0.0:
                survivors.append(particle)
                model = (
                    _translation(particle.position)
                    @ _billboard(particle.position, camera)
                    @ scale_matrix
                )
                commands.append(DrawCommand(model, particle.color.copy(), particle.lifetime))
        self.particles = survivors
        return commands