"""CLI entry for the Azul Zulu dependency lookup."""

import logging
import sys

from actions.inputs import Inputs
from actions.outputs import Outputs
from actions.zulu import resolve
from args import parse_zulu_args
from cli_config import apply_args
from constants import ExitCodes
from errors import PipelineBuilderError

logger = logging.getLogger(__name__)


def run_zulu_dependency(args) -> Outputs:
    """Resolve from INPUT_* env vars overlaid with CLI flags and print outputs."""
    inputs = Inputs.from_environ().overlay({
        "type": getattr(args, "TYPE", None),
        "version": getattr(args, "VERSION", None),
        "constraint": getattr(args, "CONSTRAINT", None),
    })
    outputs = resolve(inputs)
    outputs.write(sys.stdout)
    return outputs


def main(argv=None):
    """Standalone ``azul-zulu-dependency`` console script."""
    args = parse_zulu_args(argv)
    apply_args(args)
    try:
        run_zulu_dependency(args)
    except PipelineBuilderError as e:
        logger.error("%s", e)
        sys.exit(e.exit_code.value)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
