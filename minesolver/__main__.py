"""Command-line entry point: watch the rule solver play one game."""

import argparse
import logging
import random
import sys

from .engine import STEP_DELAY, play_cli


def main() -> None:
    parser = argparse.ArgumentParser(prog="minesolver", description=__doc__)
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed; omit for a different game every run")
    parser.add_argument("--delay", type=float, default=STEP_DELAY,
                        help="Seconds to pause between solver steps")
    parser.add_argument("--no-wait", action="store_true",
                        help="Guess immediately instead of waiting for Enter when stuck")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        status = play_cli(
            rng=random.Random(args.seed),
            delay=args.delay,
            wait_for_input=not args.no_wait,
            color=not args.no_color,
        )
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        sys.exit(0)

    sys.exit(0 if status == 1 else 1)


if __name__ == "__main__":
    main()
