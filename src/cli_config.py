"""CLI configuration: logging setup and YAML overrides for runtime tunables.

Config values are applied onto ``Constants`` before any subcommand runs. A
missing or unreadable config file is logged and ignored.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from common.logging_utils import configure_logging
from constants import Constants

logger = logging.getLogger(__name__)

# config key -> (Constants attribute, converter)
_TUNABLES = {
    "go_version": ("GO_VERSION", str),
    "yj_version": ("YJ_VERSION", str),
    "request_timeout": ("REQUEST_TIMEOUT", float),
    "azul_bundle_url": ("AZUL_BUNDLE_URL", str),
}


def setup_logging(args: Any) -> None:
    """Configure logging from --loglevel / --logfile, falling back to the environment."""
    configure_logging(getattr(args, "LOG_LEVEL", None), getattr(args, "LOG_FILE", None))


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a YAML config file.

    Args:
        config_path: Path to the YAML file, or None.

    Returns:
        The top-level mapping, or an empty dict when unavailable.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config %s: %s", config_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping; ignoring", config_path)
        return {}
    return data


def apply_config(config: Dict[str, Any]) -> None:
    """Apply known tunables from ``config`` onto Constants."""
    for key, value in config.items():
        if key not in _TUNABLES:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        attr, convert = _TUNABLES[key]
        try:
            setattr(Constants, attr, convert(value))
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid value for %s: %r", key, value)
            continue
        logger.debug("Config override %s=%r", attr, getattr(Constants, attr))


def apply_args(args: Any) -> None:
    """Set up logging then apply the --config file, if any."""
    setup_logging(args)
    apply_config(load_config(getattr(args, "CONFIG", None)))
