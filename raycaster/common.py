from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from raycaster.vector import Vector3, as_vec, vec

if TYPE_CHECKING:
    from raycaster.primitives import Primitive


BACKGROUND_COLOR = (50, 50, 50)


class ConfigurationError(ValueError):
    """Raised when a scene, camera or frame is built from unusable values."""


@dataclass
class Settings:
    width: int = 640
    height: int = 480
    camera_position: Vector3 = field(default_factory=lambda: vec(0.0, 0.0, 0.0))
    view_plane_y_size: float = 0.1
    view_plane_distance: float = -0.5
    background: tuple = BACKGROUND_COLOR
    parallel: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"resolution must be positive, got {self.width}x{self.height}"
            )
        self.camera_position = as_vec(self.camera_position)


@dataclass
class Light:
    position: Vector3
    color: Vector3 = field(default_factory=lambda: vec(255.0, 255.0, 255.0))
    intensity: float = 70.0

    def __post_init__(self):
        self.position = as_vec(self.position)
        self.color = as_vec(self.color)


@dataclass
class Ray:
    origin: Vector3
    direction: Vector3  # unit length

    def at(self, t: float) -> Vector3:
        return self.origin + self.direction * t


@dataclass
class HitRecord:
    point: Optional[Vector3]
    hit: bool
    distance: float
    object: Optional["Primitive"] = None

    @classmethod
    def miss(cls) -> "HitRecord":
        return cls(point=None, hit=False, distance=np.inf, object=None)
