"""Workflows that keep ``package.toml`` dependency images up to date."""

from __future__ import annotations

import logging
import os
import posixpath
from typing import List

from constants import Constants
from .contribution import Contribution, new_action_contribution
from .descriptor import Descriptor
from .package import load_package
from .scripts import script
from .workflow import Cron, Job, Schedule, Step, VirtualEnvironment, Workflow, WorkflowDispatch

logger = logging.getLogger(__name__)

OLD_VERSION = "${{ steps.package.outputs.old-version }}"
NEW_VERSION = "${{ steps.package.outputs.new-version }}"


def contribute_package_dependencies(descriptor: Descriptor) -> List[Contribution]:
    """Return one update workflow per ``package.toml`` dependency.

    Descriptors without a package section contribute nothing. Any decode or
    coordinate error aborts the whole pass.
    """
    if descriptor.package is None:
        return []

    file = os.path.join(descriptor.path, Constants.PACKAGE_TOML_FILE)
    package = load_package(file)

    names = [d.repository() for d in package.dependencies]
    contributions = [contribute_package_dependency(n) for n in names]
    logger.info("Contributing %d package dependency workflow(s)", len(contributions))
    return contributions


def contribute_package_dependency(name: str) -> Contribution:
    """Build the update workflow for image repository ``name``."""
    base = posixpath.basename(name)
    workflow = Workflow(
        name=f"Update {base}",
        on=[
            Schedule(crons=[Cron(minute="0")]),
            WorkflowDispatch(),
        ],
        jobs={
            "update": Job(
                name="Update Package Dependency",
                runs_on=[VirtualEnvironment.UBUNTU_LATEST],
                steps=_update_steps(name, base),
            ),
        },
    )
    return new_action_contribution(workflow)


def _update_steps(name: str, base: str) -> List[Step]:
    return [
        Step(uses="actions/checkout@v2"),
        Step(
            uses="actions/setup-go@v2",
            with_={"go-version": Constants.GO_VERSION},
        ),
        Step(name="Install crane", run=script("install-crane.sh")),
        Step(
            name="Install yj",
            run=script("install-yj.sh"),
            env={"YJ_VERSION": Constants.YJ_VERSION},
        ),
        Step(
            name="Install update-package-dependency",
            run=script("install-update-package-dependency.sh"),
        ),
        Step(
            uses="GoogleCloudPlatform/github-actions/setup-gcloud@master",
            with_={"service_account_key": "${{ secrets.JAVA_GCLOUD_SERVICE_ACCOUNT_KEY }}"},
        ),
        Step(name="Configure gcloud docker credentials", run="gcloud auth configure-docker"),
        Step(
            id="package",
            name="Update Package Dependency",
            run=script("update-package-dependency.sh"),
            env={"DEPENDENCY": name},
        ),
        Step(
            uses="peter-evans/create-pull-request@v3",
            with_=_pull_request_params(name, base),
        ),
    ]


def _pull_request_params(name: str, base: str) -> dict:
    return {
        "token": "${{ secrets.GITHUB_TOKEN }}",
        "commit-message": (
            f"Bump {name} from {OLD_VERSION} to {NEW_VERSION}\n"
            f"\n"
            f"Bumps {name} from {OLD_VERSION} to {NEW_VERSION}."
        ),
        "signoff": True,
        "branch": f"update-package/{base}",
        "delete-branch": True,
        "title": f"Bump {name} from {OLD_VERSION} to {NEW_VERSION}",
        "body": (
            f"Bumps [`{name}`](https://{name}) "
            f"from [`{OLD_VERSION}`](https://{name}:{OLD_VERSION}) "
            f"to [`{NEW_VERSION}`](https://{name}:{NEW_VERSION})."
        ),
        "labels": "semver:minor, type:dependency-upgrade",
    }
