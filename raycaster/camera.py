from typing import Optional

from raycaster.common import ConfigurationError, Ray, Settings
from raycaster.vector import Vector3, as_vec, normalize, vec


class Camera:
    """Pinhole camera; screen (0, 0) is the ray along the z axis, not an image corner."""

    def __init__(
        self,
        width: int,
        height: int,
        position: Optional[Vector3] = None,
        view_plane_y_size: float = 0.1,
        view_plane_distance: float = -0.5,
    ):
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"resolution must be positive, got {width}x{height}")
        if view_plane_y_size <= 0:
            raise ConfigurationError(f"view plane size must be positive, got {view_plane_y_size}")
        if view_plane_distance == 0:
            raise ConfigurationError("view plane distance must not be zero")

        self.position = vec(0.0, 0.0, 0.0) if position is None else as_vec(position)
        self.view_plane_distance = view_plane_distance
        self.view_plane_y_size = view_plane_y_size
        self.view_plane_x_size = (width / height) * view_plane_y_size

    @classmethod
    def from_settings(cls, settings: Settings) -> "Camera":
        return cls(
            settings.width,
            settings.height,
            position=settings.camera_position,
            view_plane_y_size=settings.view_plane_y_size,
            view_plane_distance=settings.view_plane_distance,
        )

    def ray_at_screen_space(self, x: float, y: float) -> Ray:
        direction = vec(
            x * self.view_plane_x_size,
            y * self.view_plane_y_size,
            self.view_plane_distance,
        )
        return Ray(origin=self.position, direction=normalize(direction))
