"""CLI for generating scenario CSV files."""

import argparse
from pathlib import Path

from propshutter.generators import ScenarioGenerator
from propshutter.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Generate CSV of propeller scenarios from a YAML spec")
    parser.add_argument("config", type=Path, help="Path to YAML configuration file")
    parser.add_argument("-o", "--output", type=Path, required=True, help="Output CSV path")

    args = parser.parse_args()
    setup_logging()

    gen = ScenarioGenerator(args.config)
    n = gen.generate(args.output)
    print(f"Generated {n} scenarios -> {args.output}")


if __name__ == "__main__":
    main()
