"""Argument parsing functionality for pipeline-builder."""

import argparse

from constants import Constants


def _common_parser():
    """Options shared by every subcommand."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    common.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    common.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    return common


def add_zulu_arguments(parser):
    """Register the Zulu lookup inputs; unset flags fall back to INPUT_* env vars."""
    parser.add_argument("--type",
                        dest="TYPE",
                        help="Bundle feature set, i.e: jdk, jre (env: INPUT_TYPE)",
                        action="store", type=str)
    parser.add_argument("--version",
                        dest="VERSION",
                        help="JDK version prefix, i.e: 8, 11 (env: INPUT_VERSION)",
                        action="store", type=str)
    parser.add_argument("--constraint",
                        dest="CONSTRAINT",
                        help="Optional version range the result must satisfy (env: INPUT_CONSTRAINT)",
                        action="store", type=str)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    common = _common_parser()
    parser = argparse.ArgumentParser(
        prog="pipeline-builder",
        description="Generate build-pack CI workflows and resolve dependency versions",
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="action", metavar="ACTION")
    subparsers.required = True

    zulu = subparsers.add_parser(
        "zulu-dependency",
        parents=[common],
        help="Resolve the latest Azul Zulu bundle and print action outputs",
    )
    add_zulu_arguments(zulu)

    contribute = subparsers.add_parser(
        "contribute",
        parents=[common],
        help="Generate workflows from a project's pipeline descriptor",
    )
    contribute.add_argument("-d", "--directory",
                            dest="DIRECTORY",
                            help="Project directory containing " + Constants.DESCRIPTOR_FILE,
                            action="store", type=str,
                            default=".")
    contribute.add_argument("-o", "--output",
                            dest="OUTPUT",
                            help="Directory to write workflows beneath (default: project directory)",
                            action="store", type=str)
    contribute.add_argument("--dry-run",
                            dest="DRY_RUN",
                            help="Print rendered workflows instead of writing them.",
                            action="store_true")

    return parser.parse_args(argv)


def parse_zulu_args(argv=None):
    """Arguments for the standalone azul-zulu-dependency command."""
    parser = argparse.ArgumentParser(
        prog="azul-zulu-dependency",
        description="Resolve the latest Azul Zulu bundle and print action outputs",
        parents=[_common_parser()],
    )
    add_zulu_arguments(parser)
    return parser.parse_args(argv)
