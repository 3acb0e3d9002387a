import numpy as np
from numpy.typing import NDArray

# a pixel still this color after a frame was never rendered
UNRENDERED_COLOR = (255, 0, 0)


class PixelSink:
    def set_pixel(self, x: int, y: int, rgb) -> None:
        raise NotImplementedError


class ImageSink(PixelSink):
    """
    Keeps the frame in memory as raw integer channels, exactly as the
    renderer produced them. `to_rgb8` narrows them for display.
    """

    def __init__(self, width: int, height: int, clear_color=UNRENDERED_COLOR):
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 3), dtype=np.int64)
        self.pixels[:] = clear_color

    def set_pixel(self, x: int, y: int, rgb) -> None:
        self.pixels[y, x] = rgb

    def to_rgb8(self) -> NDArray[np.uint8]:
        # keep the low byte of every channel, as an 8 bit surface would
        return (self.pixels & 0xFF).astype(np.uint8)
