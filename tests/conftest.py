import matplotlib
import pytest

from raycaster.common import Light
from raycaster.primitives import Sphere
from raycaster.scene import Scene

matplotlib.use("Agg")


@pytest.fixture
def yellow_sphere():
    return Sphere(center=(0.0, 0.0, -5.0), radius=1.0, color=(100.0, 100.0, 0.0))


@pytest.fixture
def single_sphere_scene(yellow_sphere):
    return Scene(Light(position=(0.0, 0.0, 0.0)), [yellow_sphere])
