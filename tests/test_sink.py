import numpy as np

from raycaster.sink import ImageSink


def test_new_sink_is_filled_with_unrendered_red():
    sink = ImageSink(3, 2)
    assert sink.pixels.shape == (2, 3, 3)
    assert np.all(sink.pixels == [255, 0, 0])


def test_set_pixel_uses_column_then_row():
    sink = ImageSink(3, 2)
    sink.set_pixel(2, 1, (1, 2, 3))
    np.testing.assert_array_equal(sink.pixels[1, 2], [1, 2, 3])


def test_raw_channels_are_kept_and_narrowed_for_display():
    sink = ImageSink(2, 1)
    sink.set_pixel(0, 0, (5833, 256, 300))
    sink.set_pixel(1, 0, (50, 50, 50))

    np.testing.assert_array_equal(sink.pixels[0, 0], [5833, 256, 300])
    rgb8 = sink.to_rgb8()
    assert rgb8.dtype == np.uint8
    np.testing.assert_array_equal(rgb8[0, 0], [201, 0, 44])
    np.testing.assert_array_equal(rgb8[0, 1], [50, 50, 50])
