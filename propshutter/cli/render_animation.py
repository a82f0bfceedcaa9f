"""CLI for animating the shutter sweep."""

import argparse
import sys
from pathlib import Path

from propshutter.core import ANIMATION_STEP_COUNT, ConfigurationError
from propshutter.render import ShutterAnimation
from propshutter.cli.common import add_propeller_args, params_from_args


def main():
    parser = argparse.ArgumentParser(description="Animate a rolling shutter sweeping across a rotating propeller")
    add_propeller_args(parser, step_count=ANIMATION_STEP_COUNT)
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output GIF (shows a window if omitted)")
    parser.add_argument("--fps", type=int, default=30, help="Frames per second of the saved GIF")
    parser.add_argument("--interval", type=int, default=20, help="Delay between frames in ms (interactive)")

    args = parser.parse_args()

    try:
        params = params_from_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    animation = ShutterAnimation(params, interval_ms=args.interval)
    if args.output is None:
        animation.show()
    else:
        animation.save(args.output, fps=args.fps)
        print(f"Animation ({animation.frame_count} frames) -> {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
