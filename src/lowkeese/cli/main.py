"""
Lowkeese CLI.
"""

import argparse
import logging

from lowkeese.core.config import settings
from lowkeese.cli.commands import translate, dictionary


def main():
    logging.basicConfig(level=settings().LOG_LEVEL, format="%(levelname)s:%(name)s:%(message)s")

    parser = argparse.ArgumentParser(prog="lowkeese", description="Lowkeese CLI")
    subparsers = parser.add_subparsers(dest="command")

    translate.add_subparser(subparsers)
    dictionary.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
