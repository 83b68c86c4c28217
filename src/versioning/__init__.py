"""Version catalogs and latest-version selection."""

from .models import ResolvedVersion, VersionCatalog
from .selector import get_latest_version

__all__ = ["ResolvedVersion", "VersionCatalog", "get_latest_version"]
