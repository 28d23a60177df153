"""
offdict CLI.
"""

import argparse

from offdict.cli.commands import build, check, lookup, serve
from offdict.core.config import get_settings
from offdict.core.logging_config import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(prog="offdict", description="Offline WordNet dictionary")
    subparsers = parser.add_subparsers(dest="command")

    build.add_subparser(subparsers)
    check.add_subparser(subparsers)
    lookup.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
