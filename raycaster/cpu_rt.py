import logging
import time

from raycaster.app import App
from raycaster.camera import Camera
from raycaster.common import BACKGROUND_COLOR
from raycaster.intersect import find_closest_hit
from raycaster.scene import Scene
from raycaster.shading import shade_hit
from raycaster.sink import PixelSink

logger = logging.getLogger(__name__)


class FrameRenderer:
    """Casts one ray per pixel in raster order and hands each color to the sink."""

    def __init__(self, camera: Camera, scene: Scene, width: int, height: int, background=BACKGROUND_COLOR):
        self.camera = camera
        self.scene = scene
        self.width = width
        self.height = height
        self.background = background

    def get_pixel_color(self, col: int, row: int):
        screen_x = col * (1.0 / self.width)
        screen_y = row * (1.0 / self.height)

        ray = self.camera.ray_at_screen_space(screen_x, screen_y)
        hit = find_closest_hit(self.scene, ray)
        return shade_hit(hit, self.scene.light, self.background)

    def render(self, sink: PixelSink) -> None:
        logger.info("rendering %dx%d frame, %d objects", self.width, self.height, len(self.scene))
        start = time.perf_counter()

        for row in range(self.height):
            for col in range(self.width):
                sink.set_pixel(col, row, self.get_pixel_color(col, row))
            logger.debug("row %d/%d", row + 1, self.height)

        logger.info("done in %.2f s", time.perf_counter() - start)


class CpuApp(App):
    def run(self):
        renderer = FrameRenderer(
            self.camera,
            self.scene,
            self.settings.width,
            self.settings.height,
            self.settings.background,
        )
        renderer.render(self.sink)
