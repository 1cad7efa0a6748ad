#!/usr/bin/env python3
"""Generate a few IDs with the secure and non-secure generators.

Usage:
    # Two secure and two non-secure IDs of the default length (21):
    python basic_usage.py

    # Custom length, seeded non-secure stream, debug logging:
    python basic_usage.py --length 12 --seed 7 --verbose

    # Draw from a custom alphabet instead of a-zA-Z0-9-_:
    python basic_usage.py --alphabet 0123456789abcdef

Settings can also come from the environment, e.g.:
    export NANOID_DEFAULT_LENGTH=16
    export NANOID_LOG_LEVEL=summary
"""

from __future__ import annotations

import argparse
import logging

from nanoidgen import entropy, new_generator

logger = logging.getLogger("nanoid_example")


def main() -> None:
    parser = argparse.ArgumentParser(description="nanoidgen example")
    parser.add_argument("--length", type=int, default=None, help="Units per ID.")
    parser.add_argument("--alphabet", default=None, help="Alphabet to draw from.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Reseed the shared non-secure stream before generating.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    secure = new_generator(args.alphabet, args.length)
    logger.info("ID 1: %s", secure())
    logger.info("ID 2: %s", secure())

    if args.seed is not None:
        entropy.seed(args.seed)
    fast = new_generator(args.alphabet, args.length, secure=False)
    logger.info("ID 3: %s", fast())
    logger.info("ID 4: %s", fast())


if __name__ == "__main__":
    main()
