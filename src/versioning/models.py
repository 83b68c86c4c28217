"""Data models for version catalogs and resolution."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

import semantic_version


class VersionCatalog(Mapping):
    """Read-only mapping of version string to download URL.

    Built from a single upstream response and consumed once by the selector.
    """

    def __init__(self, entries: Mapping[str, str]):
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"VersionCatalog({dict(self._entries)!r})"


@dataclass(frozen=True)
class ResolvedVersion:
    """Selected version plus the catalog key it was parsed from."""
    version: semantic_version.Version
    original: str

    @property
    def major(self) -> int:
        return self.version.major

    @property
    def minor(self) -> int:
        return self.version.minor

    @property
    def patch(self) -> int:
        return self.version.patch

    def triple(self) -> str:
        """Return ``major.minor.patch`` without prerelease/build parts."""
        return f"{self.major}.{self.minor}.{self.patch}"
