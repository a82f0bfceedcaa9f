"""CLI for rendering a static rolling-shutter photograph."""

import argparse
import sys
from pathlib import Path

from propshutter.core import PhotographEngine, ConfigurationError
from propshutter.codecs import PhotographCodec
from propshutter.render import save_photograph
from propshutter.cli.common import add_propeller_args, params_from_args


def main():
    parser = argparse.ArgumentParser(description="Render a rolling-shutter photograph of a rotating propeller")
    add_propeller_args(parser, step_count=1000)
    parser.add_argument("-o", "--output", type=Path, default=Path("propeller.png"), help="Output image path")
    parser.add_argument("--points", type=Path, default=None, help="Also save photograph points (.npy)")
    parser.add_argument("--title", type=str, default=None, help="Plot title")

    args = parser.parse_args()

    try:
        params = params_from_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    engine = PhotographEngine(params)
    photographs, meta = engine.synthesize()

    save_photograph(args.output, photographs, title=args.title)
    print(f"Photograph -> {args.output}")
    for photo in photographs:
        print(f"  blade {photo.blade.index} (phase {photo.blade.phase_offset:.3f}): {len(photo)} points")
    print(f"  degenerate samples: {int(meta['degenerate'].sum())}")

    if args.points is not None:
        PhotographCodec.save(args.points, photographs=photographs, params=params.to_dict(), compress=False)
        print(f"Points -> {args.points}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
