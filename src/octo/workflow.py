"""Typed GitHub Actions workflow documents.

Each type serializes to a plain dict via ``to_dict()``; keys appear in the
order GitHub documents them and empty fields are omitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class EventType(Enum):
    """Workflow trigger names."""
    SCHEDULE = "schedule"
    WORKFLOW_DISPATCH = "workflow_dispatch"


class VirtualEnvironment(Enum):
    """Hosted runner labels."""
    UBUNTU_LATEST = "ubuntu-latest"


@dataclass(frozen=True)
class Cron:
    """One cron entry; unset fields mean ``*``."""
    minute: str = "*"
    hour: str = "*"
    day_of_month: str = "*"
    month: str = "*"
    day_of_week: str = "*"

    def expression(self) -> str:
        return " ".join((self.minute, self.hour, self.day_of_month, self.month, self.day_of_week))


@dataclass
class Schedule:
    crons: List[Cron] = field(default_factory=list)

    event_type = EventType.SCHEDULE

    def to_dict(self) -> List[Dict[str, str]]:
        return [{"cron": c.expression()} for c in self.crons]


@dataclass
class WorkflowDispatch:
    event_type = EventType.WORKFLOW_DISPATCH

    def to_dict(self) -> Dict[str, Any]:
        return {}


Event = Union[Schedule, WorkflowDispatch]


@dataclass
class Step:
    """A single job step; exactly one of ``uses`` or ``run`` is normally set."""
    id: Optional[str] = None
    name: Optional[str] = None
    uses: Optional[str] = None
    run: Optional[str] = None
    env: Dict[str, str] = field(default_factory=dict)
    with_: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        if self.id:
            d["id"] = self.id
        if self.name:
            d["name"] = self.name
        if self.uses:
            d["uses"] = self.uses
        if self.run:
            d["run"] = self.run
        if self.env:
            d["env"] = dict(self.env)
        if self.with_:
            d["with"] = dict(self.with_)
        return d


@dataclass
class Job:
    name: str
    runs_on: List[VirtualEnvironment]
    steps: List[Step] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        runs_on: Union[str, List[str]] = [v.value for v in self.runs_on]
        if len(runs_on) == 1:
            runs_on = runs_on[0]
        return {
            "name": self.name,
            "runs-on": runs_on,
            "steps": [s.to_dict() for s in self.steps],
        }


@dataclass
class Workflow:
    name: str
    on: List[Event] = field(default_factory=list)
    jobs: Dict[str, Job] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "on": {e.event_type.value: e.to_dict() for e in self.on},
            "jobs": {k: j.to_dict() for k, j in self.jobs.items()},
        }
