import math

import numpy as np
from numpy.typing import NDArray

from raycaster.common import BACKGROUND_COLOR, HitRecord, Light
from raycaster.vector import dot, norm, normalize


Color = NDArray[np.int64]

BLACK = (0, 0, 0)


def attenuation(distance: float) -> float:
    return 1 / (1 + 0.1 * distance + 0.1 * distance * distance)


def shade(hit: HitRecord, light: Light) -> Color:
    """
    Diffuse color of a hit lit by a point light.

    Channels are truncated to integers but never clamped, so bright
    surfaces close to the light go well past 255.
    """
    normal = normalize(hit.object.normal_at(hit.point))

    to_light = light.position - hit.point
    distance_to_light = norm(to_light)
    if distance_to_light == 0:
        # light on the surface itself
        return np.array(BLACK, dtype=np.int64)
    light_attenuation = attenuation(distance_to_light)

    to_light = to_light / distance_to_light
    cos_theta = dot(to_light, normal)

    if cos_theta <= 0:
        return np.array(BLACK, dtype=np.int64)

    color = hit.object.color
    return np.array(
        [math.trunc(color[c] * cos_theta * light_attenuation * light.intensity) for c in range(3)],
        dtype=np.int64,
    )


def shade_hit(hit: HitRecord, light: Light, background=BACKGROUND_COLOR) -> Color:
    if not hit.hit:
        return np.array(background, dtype=np.int64)

    return shade(hit, light)
