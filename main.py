import argparse
import logging
import sys

from raycaster.common import ConfigurationError, Settings

from raycaster.cpu_rt import CpuApp
from raycaster.numba_rt import ParallelApp

import matplotlib.pyplot as plt

logger = logging.getLogger("raycaster")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a scene of spheres lit by one point light")
    parser.add_argument("--cpu", action="store_true", help="Render one pixel at a time (default)")
    parser.add_argument("--parallel", action="store_true", help="Render scanlines in parallel with numba")

    parser.add_argument("--width", type=int, default=640, help="Image width")
    parser.add_argument("--height", type=int, default=480, help="Image height")

    parser.add_argument("--output", help="Save the frame to this image file")
    parser.add_argument("--no-show", action="store_true", help="Do not open a window with the frame")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        settings = Settings(
            width=args.width,
            height=args.height,
            parallel=args.parallel and not args.cpu,
        )

        if settings.parallel:
            app = ParallelApp(settings)
        else:
            app = CpuApp(settings)

        app.run()
    except ConfigurationError as e:
        logger.error("cannot render: %s", e)
        return 1

    if args.output:
        plt.imsave(args.output, app.image)
        logger.info("saved %s", args.output)

    if not args.no_show:
        plt.imshow(app.image)
        plt.show(block=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
