"""Argument parsing functionality for cratequery."""

import argparse

from constants import Constants


def _non_negative_int(value):
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return number


def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Args:
        argv (list, optional): Argument list. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="cratequery",
        description="Query package metadata from a crates registry index",
        add_help=True,
    )

    parser.add_argument("packages",
                        metavar="PACKAGE",
                        help="Packages to query, as NAME or NAME@REQUIREMENT",
                        nargs="+")

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument("-d", "--deps",
                              dest="DEPS",
                              help="Show dependencies for each package",
                              action="store_true")
    output_group.add_argument("-f", "--features",
                              dest="FEATURES",
                              help="Show features for each package",
                              action="store_true")

    parser.add_argument("-j", "--json",
                        dest="JSON",
                        help="Print output as a single JSON document",
                        action="store_true")
    parser.add_argument("-p", "--pretty",
                        dest="PRETTY",
                        help="Pretty print JSON output",
                        action="store_true")
    parser.add_argument("--delimiter",
                        dest="DELIMITER",
                        help="Separator for dependency and feature lists (default: newline)",
                        action="store",
                        type=str,
                        default=Constants.DEFAULT_DELIMITER)

    parser.add_argument("-r", "--recursive",
                        dest="RECURSIVE",
                        help="Recursively resolve dependencies of each package",
                        action="store_true")
    parser.add_argument("--max-depth",
                        dest="MAX_DEPTH",
                        help="Maximum dependency depth when resolving recursively",
                        action="store",
                        type=_non_negative_int)
    parser.add_argument("--ignore-missing",
                        dest="IGNORE_MISSING",
                        help="Skip packages that cannot be found instead of failing",
                        action="store_true")

    parser.add_argument("-i", "--index",
                        dest="INDEX_URL",
                        help=f"Alternate index URL (default: {Constants.INDEX_URL})",
                        action="store",
                        type=str)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help="HTTP request timeout in seconds",
                        action="store",
                        type=int)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--version",
                        action="version",
                        version=f"%(prog)s {Constants.VERSION}")

    return parser.parse_args(argv)
