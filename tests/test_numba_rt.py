import numpy as np
import pytest

from raycaster.common import ConfigurationError, Light, Settings
from raycaster.cpu_rt import CpuApp
from raycaster.numba_rt import ParallelApp, pack_scene
from raycaster.primitives import Primitive
from raycaster.scene import Scene, default_scene


class Plane(Primitive):
    pass


def test_pack_scene():
    spheres, light = pack_scene(default_scene())

    assert spheres.shape == (3, 7)
    np.testing.assert_array_equal(spheres[0], [0.5, 0.8, -8.0, 0.5, 100.0, 100.0, 0.0])
    np.testing.assert_array_equal(light, [0.0, -2.0, 0.0, 70.0])


def test_pack_scene_rejects_other_primitives():
    with pytest.raises(ConfigurationError):
        pack_scene(Scene(Light(position=(0.0, 0.0, 0.0)), [Plane()]))


@pytest.mark.parametrize("scene_name", ["default", "single"])
def test_matches_sequential_renderer(scene_name, single_sphere_scene):
    scene = default_scene() if scene_name == "default" else single_sphere_scene
    settings = Settings(width=64, height=48)

    sequential = CpuApp(settings, scene=scene)
    sequential.run()
    parallel = ParallelApp(settings, scene=scene)
    parallel.run()

    np.testing.assert_array_equal(parallel.sink.pixels, sequential.sink.pixels)


def test_empty_scene_is_all_background():
    app = ParallelApp(Settings(width=8, height=6, background=(7, 8, 9)), scene=Scene(Light(position=(0.0, 0.0, 0.0))))
    app.run()

    assert np.all(app.sink.pixels == [7, 8, 9])


def test_light_touching_visible_surface(yellow_sphere):
    scene = Scene(Light(position=(0.0, 0.0, -4.0)), [yellow_sphere])
    settings = Settings(width=4, height=3)

    sequential = CpuApp(settings, scene=scene)
    sequential.run()
    parallel = ParallelApp(settings, scene=scene)
    parallel.run()

    np.testing.assert_array_equal(parallel.sink.pixels[0, 0], [0, 0, 0])
    np.testing.assert_array_equal(parallel.sink.pixels, sequential.sink.pixels)
