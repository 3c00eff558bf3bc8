"""Entry point kept minimal by delegating to Engine.

Command-line flags override the defaults in `config.py`; everything else
(window, scheduling, input) lives in the engine and the cube scene.
"""

import argparse
import logging
import sys

from camera.camera import ViewAngles
from config import FOV_HORIZONTAL, FOV_VERTICAL, HEIGHT, TICK_INTERVAL_MS, WIDTH
from core.engine import Engine
from core.errors import InvalidConfiguration


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Bounce a cube around a perspective view frustum."
    )
    parser.add_argument("--fov-h", type=float, default=FOV_HORIZONTAL,
                        help="horizontal field of view in degrees")
    parser.add_argument("--fov-v", type=float, default=FOV_VERTICAL,
                        help="vertical field of view in degrees")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height")
    parser.add_argument("--interval", type=float, default=TICK_INTERVAL_MS,
                        help="milliseconds between bounce steps")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):  # small wrapper for clarity / debuggers
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        view = ViewAngles.from_degrees(args.fov_h, args.fov_v)
        engine = Engine(view, size=(args.width, args.height), interval_ms=args.interval)
    except InvalidConfiguration as e:
        logging.getLogger(__name__).error("Invalid configuration: %s", e)
        return 2
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
