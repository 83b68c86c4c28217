"""Workflow contributors for build-pack projects."""

from typing import Callable, List

from .contribution import Contribution, new_action_contribution, write_contributions
from .descriptor import Descriptor
from .package_dependencies import contribute_package_dependencies

Contributor = Callable[[Descriptor], List[Contribution]]

CONTRIBUTORS: List[Contributor] = [
    contribute_package_dependencies,
]


def contribute(descriptor: Descriptor) -> List[Contribution]:
    """Run every contributor against ``descriptor``; the first error aborts."""
    contributions: List[Contribution] = []
    for contributor in CONTRIBUTORS:
        contributions.extend(contributor(descriptor))
    return contributions


__all__ = [
    "CONTRIBUTORS",
    "Contribution",
    "Descriptor",
    "contribute",
    "contribute_package_dependencies",
    "new_action_contribution",
    "write_contributions",
]
