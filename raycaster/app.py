from typing import Optional

import numpy as np
from numpy.typing import NDArray

from raycaster.camera import Camera
from raycaster.common import Settings
from raycaster.scene import Scene, default_scene
from raycaster.sink import ImageSink, PixelSink


class App:
    def __init__(self, settings: Settings, scene: Optional[Scene] = None, sink: Optional[PixelSink] = None):
        self.settings = settings
        self.camera = Camera.from_settings(settings)

        self.sink = sink if sink is not None else ImageSink(settings.width, settings.height)
        self.scene = scene if scene is not None else self.create_world()

    def run(self):
        raise NotImplementedError

    @property
    def image(self) -> NDArray[np.uint8]:
        return self.sink.to_rgb8()

    def create_world(self) -> Scene:
        return default_scene()
