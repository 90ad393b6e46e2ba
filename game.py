#!/usr/bin/env python3
"""Pragyan Rover - console entry point.

Drive the rover across a polar sector, analyse regolith with APXS/LIBS,
relay data through Vikram during comm windows and prepare for the lunar
night before the 14-day daylight campaign ends.
"""

import argparse
import logging
import sys

from rover.engine import MissionController
from rover.interface import MissionConsole
from rover.utils.constants import RNG_SEED_DEFAULT


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Pragyan Rover - Lunar Day Ops (console)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                  # New mission with the default seed
  %(prog)s --seed 42        # Specific seed
  %(prog)s --debug          # Verbose engine logging
        """,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RNG_SEED_DEFAULT,
        help=f"Random seed for the map and all mission randomness (default: {RNG_SEED_DEFAULT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    print(f"Generating polar sector with seed {args.seed}...")
    controller = MissionController(seed=args.seed)

    final = MissionConsole(controller).run()

    done = sum(1 for o in final.objectives if o.done)
    print(f"\nObjectives completed: {done}/{len(final.objectives)}")
    print(f"Resource potential: {final.resource_potential:g}%")
    if final.wake_succeeded is not None:
        print("Rover survived the night." if final.wake_succeeded else "Rover lost to the night.")


if __name__ == "__main__":
    main()
