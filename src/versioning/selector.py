"""Latest-version selection over a version catalog using semantic versioning."""

import logging
from typing import List, Optional, Union

import semantic_version

from errors import ResolutionError
from .models import ResolvedVersion, VersionCatalog

logger = logging.getLogger(__name__)

Spec = Union[semantic_version.NpmSpec, semantic_version.SimpleSpec]


def parse_version(raw: str) -> semantic_version.Version:
    """Parse ``raw`` leniently; partial forms like ``11`` become ``11.0.0``."""
    try:
        return semantic_version.Version(raw)
    except ValueError:
        pass
    try:
        return semantic_version.Version.coerce(raw)
    except ValueError as exc:
        raise ResolutionError(f"unable to parse version {raw!r}") from exc


def parse_constraint(raw: str) -> Spec:
    """Parse an npm-style range, falling back to SimpleSpec grammar."""
    try:
        return semantic_version.NpmSpec(raw)
    except ValueError:
        pass
    try:
        return semantic_version.SimpleSpec(raw)
    except ValueError as exc:
        raise ResolutionError(f"invalid version constraint {raw!r}") from exc


def get_latest_version(catalog: VersionCatalog, constraint: Optional[str] = None) -> ResolvedVersion:
    """Return the highest catalog version satisfying ``constraint``.

    Args:
        catalog: Versions to choose from.
        constraint: Optional range expression (e.g. ``^11``, ``>=8,<9``).

    Returns:
        ResolvedVersion: The selected version and its catalog key.

    Raises:
        ResolutionError: On an unparsable key or constraint, or when nothing
            matches.
    """
    spec = parse_constraint(constraint) if constraint else None

    candidates: List[ResolvedVersion] = []
    for key in catalog:
        ver = parse_version(key)
        if spec is not None and not spec.match(ver):
            logger.debug("Version %s does not satisfy %s", key, constraint)
            continue
        candidates.append(ResolvedVersion(version=ver, original=key))

    if not candidates:
        if constraint:
            raise ResolutionError(f"no version matches constraint {constraint!r}")
        raise ResolutionError("no versions available")

    return max(candidates, key=lambda c: c.version)
