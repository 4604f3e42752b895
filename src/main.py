""" Command-line entry point for rush. """
import argparse
import sys

from constants import PROGRAM_NAME, VERSION
from shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="An interactive shell with bash-style prompt templates"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )
    return parser


def main(argv=None):
    build_parser().parse_args(argv)
    sys.exit(Shell().run())


if __name__ == "__main__":
    main()
