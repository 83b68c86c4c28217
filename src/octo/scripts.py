"""Shell scripts shipped alongside the package and inlined into workflow steps."""

from functools import lru_cache
from pathlib import Path

SCRIPTS_DIR = Path(__file__).parent / "scripts"


@lru_cache(maxsize=None)
def script(name: str) -> str:
    """Return the contents of the bundled script ``name`` (e.g. ``install-yj.sh``)."""
    return (SCRIPTS_DIR / name).read_text(encoding="utf-8")
