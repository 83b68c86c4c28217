"""``package.toml`` parsing and image coordinate handling."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List

try:
    import tomllib as toml  # type: ignore
except ImportError:  # Python < 3.11
    import tomli as toml  # type: ignore

from errors import CoordinateError, DescriptorError

logger = logging.getLogger(__name__)

_COORDINATES = re.compile(r"^(.+):[^:]+$")


@dataclass(frozen=True)
class Dependency:
    """A ``[[dependencies]]`` entry."""
    image: str

    def repository(self) -> str:
        """Return the image name with its tag stripped.

        Raises:
            CoordinateError: When the image has no ``:tag`` suffix.
        """
        m = _COORDINATES.match(self.image)
        if m is None:
            raise CoordinateError(
                f"unable to parse image coordinates from {self.image}", self.image
            )
        return m.group(1)


@dataclass
class Package:
    dependencies: List[Dependency] = field(default_factory=list)


def load_package(path: str) -> Package:
    """Decode the ``package.toml`` at ``path``.

    Raises:
        DescriptorError: When the file cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as f:
            data = toml.load(f)
    except (OSError, UnicodeDecodeError, toml.TOMLDecodeError) as exc:
        raise DescriptorError(f"unable to decode {path}\n{exc}", path) from exc

    deps = data.get("dependencies", [])
    if not isinstance(deps, list):
        raise DescriptorError(f"unable to decode {path}\ndependencies must be an array of tables", path)

    package = Package()
    for entry in deps:
        image = entry.get("image", entry.get("Image")) if isinstance(entry, dict) else None
        if not isinstance(image, str):
            raise DescriptorError(f"unable to decode {path}\ndependency without image: {entry!r}", path)
        package.dependencies.append(Dependency(image=image))

    logger.debug("Loaded %d dependencies from %s", len(package.dependencies), path)
    return package
