"""Action outputs written as ``key=value`` lines."""

from __future__ import annotations

import sys
from typing import Mapping, Optional, TextIO

from versioning.models import ResolvedVersion


class Outputs(dict):
    """Ordered mapping of output name to value, written once per run."""

    def write(self, stream: Optional[TextIO] = None) -> None:
        stream = sys.stdout if stream is None else stream
        for key, value in self.items():
            stream.write(f"{key}={value}\n")
        stream.flush()


def new_outputs(uri: str, version: ResolvedVersion,
                additional: Optional[Mapping[str, str]] = None) -> Outputs:
    """Build the standard ``version``/``uri`` outputs plus any extras."""
    outputs = Outputs()
    outputs["version"] = version.triple()
    outputs["uri"] = uri
    if additional:
        outputs.update(additional)
    return outputs
