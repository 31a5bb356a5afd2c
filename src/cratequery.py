"""cratequery - query package metadata from a crates registry index

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from cli_config import apply_overrides
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import ExitCodes, OutputMode
from errors import CrateQueryError, IndexIoError, NotFoundError, RequestError
from output import render
from versioning.resolver import Resolver

logger = logging.getLogger(__name__)


def _output_mode(args):
    if args.DEPS:
        return OutputMode.DEPS
    if args.FEATURES:
        return OutputMode.FEATURES
    return OutputMode.RECORD


def _exit_code_for(exc):
    """Map a resolution error to the process exit code."""
    if isinstance(exc, NotFoundError):
        return ExitCodes.NOT_FOUND
    if isinstance(exc, RequestError) and exc.status_code == 404:
        return ExitCodes.NOT_FOUND
    if isinstance(exc, (RequestError, IndexIoError)):
        return ExitCodes.CONNECTION_ERROR
    return ExitCodes.RESOLUTION_ERROR


def run(args):
    """Resolve the requested packages and return the rendered output.

    Raises:
        CrateQueryError: On any unrecovered resolution or encoding error.
    """
    if args.MAX_DEPTH is not None and not args.RECURSIVE:
        logger.warning("--max-depth has no effect without --recursive")

    resolver = Resolver(
        recursive=args.RECURSIVE,
        max_depth=args.MAX_DEPTH,
        ignore_missing=args.IGNORE_MISSING,
        index_location=args.INDEX_URL,
    )
    releases = resolver.resolve_all(args.packages)
    if is_debug_enabled(logger):
        logger.debug(
            "Resolution finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="resolve_all",
                count=len(releases),
            ),
        )
    if not releases:
        logger.warning("No packages resolved.")
        return ""

    return render(
        releases,
        _output_mode(args),
        as_json=args.JSON,
        pretty=args.PRETTY,
        delimiter=args.DELIMITER,
    )


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    apply_overrides(args)
    logger.info("Arguments parsed.")

    try:
        text = run(args)
    except CrateQueryError as exc:
        logger.error("%s", exc)
        sys.exit(_exit_code_for(exc).value)

    if text:
        print(text)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
