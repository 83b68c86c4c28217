"""Contributions: generated files destined for a project's repository."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Iterable, List

import yaml

from constants import Constants
from errors import WriteError
from .workflow import Workflow

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME = re.compile(r"[^A-Za-z0-9_-]")


class _WorkflowDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_WorkflowDumper.add_representer(str, _represent_str)


@dataclass
class Contribution:
    """A project-relative path and the workflow document to write there."""
    path: str
    workflow: Workflow

    def render(self) -> str:
        return yaml.dump(
            self.workflow.to_dict(),
            Dumper=_WorkflowDumper,
            sort_keys=False,
            default_flow_style=False,
            width=4096,
        )


def workflow_filename(name: str) -> str:
    """Lower-case ``name`` and replace anything outside ``[A-Za-z0-9_-]`` with ``-``."""
    return f"{_UNSAFE_FILENAME.sub('-', name.lower())}.yml"


def new_action_contribution(workflow: Workflow) -> Contribution:
    path = os.path.join(Constants.WORKFLOWS_DIR, workflow_filename(workflow.name))
    return Contribution(path=path, workflow=workflow)


def write_contributions(contributions: Iterable[Contribution], root: str) -> List[str]:
    """Render each contribution beneath ``root``; returns the written paths.

    Raises:
        WriteError: When any file cannot be written. Files already written by
            this call are removed first.
    """
    written: List[str] = []
    for c in contributions:
        file = os.path.join(root, c.path)
        try:
            os.makedirs(os.path.dirname(file), exist_ok=True)
            with open(file, "w", encoding="utf-8") as f:
                f.write(c.render())
        except OSError as exc:
            _remove_written(written)
            raise WriteError(f"unable to write {file}\n{exc}", file) from exc
        logger.info("Wrote %s", file)
        written.append(file)
    return written


def _remove_written(files: List[str]) -> None:
    for file in files:
        try:
            os.remove(file)
        except OSError as exc:
            logger.warning("Unable to remove partially written %s: %s", file, exc)
