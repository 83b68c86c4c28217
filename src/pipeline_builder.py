"""pipeline-builder - CI workflow generator and dependency resolver for build-packs

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from cli_config import apply_args
from common.logging_utils import extra_context, is_debug_enabled
from constants import ExitCodes
from errors import PipelineBuilderError


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    apply_args(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    try:
        if args.action == "zulu-dependency":
            from cli_zulu import run_zulu_dependency  # pylint: disable=import-outside-toplevel
            run_zulu_dependency(args)
        elif args.action == "contribute":
            from cli_contribute import run_contribute  # pylint: disable=import-outside-toplevel
            run_contribute(args)
    except PipelineBuilderError as e:
        logger.error("%s", e)
        if is_debug_enabled(logger):
            logger.debug(
                "CLI finished",
                extra=extra_context(
                    event="function_exit",
                    component="cli",
                    action=args.action,
                    outcome=type(e).__name__
                )
            )
        sys.exit(e.exit_code.value)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action=args.action,
                outcome="success"
            )
        )
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
