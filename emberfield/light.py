"""Light source state and the shader uniforms it feeds."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Tuple, Union

Vec3 = Tuple[float, float, float]
UniformValue = Union[float, Vec3]

DIRECTION = ".direction"
SPOT_DIRECTION = ".spotLightDirection"
POSITION = ".position"
AMBIENT = ".ambientIntensity"
DIFFUSE = ".intensity"
CUTOFF = ".cutoff"
INNER_CUTOFF = ".innercutoff"
SPECULAR = ".specularIntensity"
IS_POINT = ".isPoint"
IS_DIRECTION = ".isDirection"
IS_SPOT = ".isSpot"
COLOR = ".color"
KC = ".kc"
KL = ".kl"
KQ = ".kq"
EXPONENT = ".spotexponent"
VIEW_POSITION = "viewPosition"


def _vec3(values: Iterable[float]) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


class Light:
    """A directional, point or spot light addressed by a uniform struct name.

    Position and direction share one storage slot: setting either changes both.
    """

    def __init__(
        self,
        color: Iterable[float] = (1.0, 1.0, 1.0),
        name: str = "light",
        intensity: float = 1.0,
        ambient: float = 0.25,
        specular: float = 0.5,
    ) -> None:
        self.color = _vec3(color)
        self.name = name
        self.intensity = float(intensity)
        self.ambient_intensity = float(ambient)
        self.specular_intensity = float(specular)
        self.attenuation: Vec3 = (0.0, 0.0, 0.0)
        self.spot_direction: Vec3 = (0.0, 0.0, 1.0)
        self.cutoff = 1.0
        self.inner_cutoff = 1.0
        self.spot_exponent = 0.0
        self._location: Vec3 = (0.0, 0.0, 0.0)

    @property
    def position(self) -> Vec3:
        return self._location

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._location = _vec3(value)

    @property
    def direction(self) -> Vec3:
        return self._location

    @direction.setter
    def direction(self, value: Iterable[float]) -> None:
        self._location = _vec3(value)

    def set_attenuation_constants(
        self, exponent: float, kc: float, kl: float, kq: float
    ) -> None:
        """Set the spot exponent and the constant, linear and quadratic terms."""
        self.spot_exponent = float(exponent)
        self.attenuation = (float(kc), float(kl), float(kq))

    def uniforms(
        self, camera_position: Iterable[float], directional: bool, is_spot: bool
    ) -> Dict[str, UniformValue]:
        """Return the uniforms this light sets, in the order they are set."""
        kc, kl, kq = self.attenuation
        values: Dict[str, UniformValue] = {}

        def put(suffix: str, value: UniformValue) -> None:
            values[self.name + suffix] = value

        if is_spot:
            put(POSITION, self.position)
            put(IS_POINT, 1.0)
            put(SPOT_DIRECTION, self.spot_direction)
            put(IS_SPOT, 1.0)
            put(CUTOFF, self.cutoff)
            put(INNER_CUTOFF, self.inner_cutoff)
            put(KC, kc)
            put(KL, kl)
            put(KQ, kq)
            put(EXPONENT, self.spot_exponent)
        elif directional:
            put(DIRECTION, self.direction)
            put(IS_DIRECTION, 1.0)
        else:
            put(POSITION, self.position)
            put(IS_POINT, 1.0)
            put(KC, kc)
            put(KL, kl)
            put(KQ, kq)

        put(COLOR, self.color)
        put(AMBIENT, self.ambient_intensity)
        put(SPECULAR, self.specular_intensity)
        put(DIFFUSE, self.intensity)
        values[VIEW_POSITION] = _vec3(camera_position)
        return values

    def render(
        self,
        camera_position: Iterable[float],
        set_uniform: Callable[[str, UniformValue], object],
        directional: bool,
        is_spot: bool,
    ) -> None:
        """Push every uniform of this light through ``set_uniform(name, value)``."""
        for name, value in self.uniforms(camera_position, directional, is_spot).items():
            set_uniform(name, value)