#!/usr/bin/env python3
"""
jhash command line harness

Hashes each argument with the previous digest as seed and prints the final
digest in lowercase hex.
"""
import argparse
import sys

from jhash import MASK32, jhash


def parse_seed(value):
    try:
        return int(value, 0) & MASK32
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {value!r}")


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(prog="jhash", description="Jenkins hash (jhash) of strings")
    parser.add_argument("strings", nargs="*", default=[],
                        help="Strings to hash, each seeded with the previous digest")
    parser.add_argument("--seed", type=parse_seed, default=0,
                        help="Initial seed, decimal or 0x-prefixed hex")
    parser.add_argument("--debug", type=int, default=0,
                        help="Print debugging information")

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_arguments(argv)

    h = args.seed
    for s in args.strings:
        key = s.encode("utf-8", "surrogateescape")
        h = jhash(key, h)
        if args.debug:
            print(f"{s!r} ({len(key)} bytes) -> {h:08x}", file=sys.stderr)

    print(f"{h:x}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
