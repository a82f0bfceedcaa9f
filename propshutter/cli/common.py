"""Shared argparse options for the propeller CLIs."""

import argparse
import logging

from propshutter.core import PropellerParams, blade_phases
from propshutter.logging_config import setup_logging


def add_propeller_args(parser: argparse.ArgumentParser, step_count: int) -> None:
    parser.add_argument("-c", "--config", type=str, default=None, help="YAML file with propeller parameters")
    parser.add_argument("-n", "--steps", type=int, default=None, help=f"Shutter samples (default {step_count})")
    parser.add_argument("-t", "--shutter-duration", type=float, default=None, help="Shutter sweep duration in seconds")
    parser.add_argument("-f", "--frequency", type=float, default=None, help="Rotation frequency in Hz")
    parser.add_argument("-b", "--blades", type=int, default=None, help="Number of evenly spaced blades")
    parser.add_argument("--phases", type=float, nargs="+", default=None, help="Explicit blade phase offsets (radians)")
    parser.add_argument("--device", type=str, default="cpu", help="Torch device")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.set_defaults(default_step_count=step_count)


def params_from_args(args: argparse.Namespace) -> PropellerParams:
    """PropellerParams from a YAML file (if given) overridden by explicit flags."""
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    if args.config:
        params = PropellerParams.from_yaml(args.config)
    else:
        params = PropellerParams(step_count=args.default_step_count)
    if args.steps is not None:
        params.step_count = args.steps
    if args.shutter_duration is not None:
        params.shutter_duration = args.shutter_duration
    if args.frequency is not None:
        params.frequency_hz = args.frequency
    if args.phases:
        params.phase_offsets = tuple(args.phases)
    elif args.blades is not None:
        params.phase_offsets = blade_phases(args.blades)
    params.device = args.device
    return params.validate()
