import math

import numpy as np
from numpy.typing import NDArray


Vector3 = NDArray[np.float64]


def vec(x: float, y: float, z: float) -> Vector3:
    v = np.array([x, y, z], dtype=np.float64)
    v.flags.writeable = False
    return v


def as_vec(values) -> Vector3:
    """Copy any 3-element sequence into a read-only float64 vector."""
    x, y, z = values
    return vec(x, y, z)


def dot(u: Vector3, v: Vector3) -> float:
    return u[0] * v[0] + u[1] * v[1] + u[2] * v[2]


def norm(v: Vector3) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vector3) -> Vector3:
    # zero vectors are never passed in
    return v / norm(v)
