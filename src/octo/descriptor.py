"""Project descriptor (``.github/pipeline-descriptor.yml``) loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from errors import DescriptorError

logger = logging.getLogger(__name__)


@dataclass
class Descriptor:
    """A project directory and the sections its descriptor declares.

    ``package`` holds the raw ``package`` mapping; contributors only check
    whether it is present.
    """
    path: str
    package: Optional[Dict[str, Any]] = None

    @classmethod
    def load(cls, path: str) -> "Descriptor":
        """Read the descriptor file beneath project directory ``path``.

        Raises:
            DescriptorError: When the file is missing, not valid UTF-8 YAML,
                or not a mapping.
        """
        path = os.path.abspath(path)
        file = os.path.join(path, Constants.DESCRIPTOR_FILE)
        try:
            # bytes let PyYAML report bad encodings as a ReaderError
            with open(file, "rb") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise DescriptorError(f"unable to decode {file}\n{exc}", file) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DescriptorError(f"unable to decode {file}\nexpected a mapping", file)

        package = data.get("package")
        if package is not None and not isinstance(package, dict):
            raise DescriptorError(f"unable to decode {file}\npackage must be a mapping", file)

        logger.debug("Loaded descriptor %s (package=%s)", file, package is not None)
        return cls(path=path, package=package)
