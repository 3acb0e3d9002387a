import logging
import math
import time
from typing import Tuple

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from raycaster.app import App
from raycaster.common import ConfigurationError
from raycaster.primitives import Sphere
from raycaster.scene import Scene

logger = logging.getLogger(__name__)


# The kernels below repeat the sequential pipeline on packed arrays:
#   spheres[i] = (cx, cy, cz, radius, r, g, b), light = (x, y, z, intensity)
# and keep its operation order so both renderers agree on every pixel.


@njit
def intersect(sphere, ox: float, oy: float, oz: float, dx: float, dy: float, dz: float) -> float:
    ocx = ox - sphere[0]
    ocy = oy - sphere[1]
    ocz = oz - sphere[2]

    b = dx * ocx + dy * ocy + dz * ocz
    discriminant = b * b - (ocx * ocx + ocy * ocy + ocz * ocz) + sphere[3] * sphere[3]

    if discriminant < 0:
        return math.inf

    t = -b - math.sqrt(discriminant)
    return math.inf if t < 0 else t


@njit
def shoot_ray(spheres, light, background, ox, oy, oz, dx, dy, dz) -> Tuple[int, int, int]:
    dist_to_nearest = math.inf
    nearest = -1
    for i in range(spheres.shape[0]):
        dist = intersect(spheres[i], ox, oy, oz, dx, dy, dz)
        if dist < dist_to_nearest:
            dist_to_nearest = dist
            nearest = i

    if nearest == -1:
        return background[0], background[1], background[2]

    sphere = spheres[nearest]
    px = ox + dx * dist_to_nearest
    py = oy + dy * dist_to_nearest
    pz = oz + dz * dist_to_nearest

    nx = px - sphere[0]
    ny = py - sphere[1]
    nz = pz - sphere[2]
    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    nx, ny, nz = nx / length, ny / length, nz / length

    lx = light[0] - px
    ly = light[1] - py
    lz = light[2] - pz
    distance_to_light = math.sqrt(lx * lx + ly * ly + lz * lz)
    if distance_to_light == 0:
        return 0, 0, 0
    attenuation = 1 / (1 + 0.1 * distance_to_light + 0.1 * distance_to_light * distance_to_light)
    lx, ly, lz = lx / distance_to_light, ly / distance_to_light, lz / distance_to_light

    cos_theta = lx * nx + ly * ny + lz * nz
    if cos_theta <= 0:
        return 0, 0, 0

    intensity = light[3]
    return (
        int(sphere[4] * cos_theta * attenuation * intensity),
        int(sphere[5] * cos_theta * attenuation * intensity),
        int(sphere[6] * cos_theta * attenuation * intensity),
    )


@njit(parallel=True)
def render_image(image, spheres, light, background, origin, x_size, y_size, plane_distance):
    height, width, _ = image.shape
    x_ratio = 1.0 / width
    y_ratio = 1.0 / height

    for row in prange(height):
        for col in range(width):
            dx = col * x_ratio * x_size
            dy = row * y_ratio * y_size
            dz = plane_distance
            length = math.sqrt(dx * dx + dy * dy + dz * dz)

            r, g, b = shoot_ray(
                spheres, light, background,
                origin[0], origin[1], origin[2],
                dx / length, dy / length, dz / length,
            )
            image[row, col, 0] = r
            image[row, col, 1] = g
            image[row, col, 2] = b


def pack_scene(scene: Scene) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    spheres = np.zeros((len(scene), 7), dtype=np.float64)

    for i, obj in enumerate(scene):
        if not isinstance(obj, Sphere):
            raise ConfigurationError(
                f"parallel renderer only draws spheres, got {type(obj).__name__}"
            )
        spheres[i, :3] = obj.center
        spheres[i, 3] = obj.radius
        spheres[i, 4:] = obj.color

    light = np.array([*scene.light.position, scene.light.intensity], dtype=np.float64)
    return spheres, light


class ParallelApp(App):
    def run(self):
        spheres, light = pack_scene(self.scene)
        width, height = self.settings.width, self.settings.height

        logger.info("rendering %dx%d frame in parallel, %d spheres", width, height, len(spheres))
        start = time.perf_counter()

        image = np.zeros((height, width, 3), dtype=np.int64)
        render_image(
            image,
            spheres,
            light,
            np.array(self.settings.background, dtype=np.int64),
            np.array(self.camera.position, dtype=np.float64),
            self.camera.view_plane_x_size,
            self.camera.view_plane_y_size,
            self.camera.view_plane_distance,
        )

        for row in range(height):
            for col in range(width):
                self.sink.set_pixel(col, row, image[row, col])

        logger.info("done in %.2f s", time.perf_counter() - start)
