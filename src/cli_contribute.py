"""CLI entry for generating workflow contributions from a project descriptor."""

import logging
import sys
from typing import List

from octo import Contribution, Descriptor, contribute, write_contributions

logger = logging.getLogger(__name__)


def run_contribute(args) -> List[Contribution]:
    """Load the descriptor, build all contributions, then write or print them.

    Nothing is written unless every contributor succeeds.
    """
    descriptor = Descriptor.load(getattr(args, "DIRECTORY", None) or ".")
    contributions = contribute(descriptor)

    if not contributions:
        logger.info("No contributions for %s", descriptor.path)
        return contributions

    if getattr(args, "DRY_RUN", False):
        for c in contributions:
            sys.stdout.write(f"# {c.path}\n")
            sys.stdout.write(c.render())
            sys.stdout.write("---\n")
        sys.stdout.flush()
        return contributions

    root = getattr(args, "OUTPUT", None) or descriptor.path
    write_contributions(contributions, root)
    return contributions
