"""CLI for rendering a photograph gallery from a scenario CSV."""

import argparse
import logging
from pathlib import Path

from propshutter.generators import GalleryGenerator
from propshutter.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Render photographs for every scenario in a CSV")
    parser.add_argument("csv", type=Path, help="Path to scenario CSV")
    parser.add_argument("-o", "--output", type=Path, required=True, help="Output root directory")
    parser.add_argument("-w", "--workers", type=int, default=4, help="Number of parallel workers")
    parser.add_argument("--device", type=str, default="cpu", help="Device to use")
    parser.add_argument("--no-skip", action="store_true", help="Don't skip existing outputs")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bar")
    parser.add_argument("--points-only", action="store_true", help="Skip PNG rendering")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    gen = GalleryGenerator(args.csv, args.output)

    results = gen.generate(
        num_workers=args.workers,
        device=args.device,
        skip_existing=not args.no_skip,
        progress=not args.no_progress,
        save_photo=not args.points_only,
    )

    print(f"\nGeneration complete:")
    print(f"  Total scenarios: {results['total']}")
    print(f"  Processed: {results['processed']}")
    print(f"  Skipped: {results['skipped']}")
    print(f"  Errors: {len(results['errors'])}")

    if results['errors']:
        print("\nErrors:")
        for err in results['errors'][:10]:
            print(f"  {err['sample_id']}: {err['error']}")
        if len(results['errors']) > 10:
            print(f"  ... and {len(results['errors']) - 10} more")


if __name__ == "__main__":
    main()
