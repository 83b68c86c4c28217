"""Azul Zulu bundle lookup.

Queries the Azul community catalog for the latest bundle matching a feature
set (``jdk``, ``jre``, ...) and JDK version prefix, then turns it into action
outputs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Tuple

from common.http_client import get_json, prepared_url
from constants import Constants
from errors import PayloadError
from versioning.models import VersionCatalog
from versioning.selector import get_latest_version
from .inputs import Inputs
from .outputs import Outputs, new_outputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bundle:
    """A single bundle entry returned by the catalog API."""
    jdk_version: Tuple[int, int, int]
    url: str

    @classmethod
    def from_json(cls, data: Any) -> "Bundle":
        if not isinstance(data, dict):
            raise PayloadError("unable to decode payload\nexpected a JSON object")
        version = data.get("jdk_version")
        url = data.get("url")
        if (not isinstance(version, list) or len(version) < 3
                or not all(isinstance(v, int) and not isinstance(v, bool) for v in version[:3])):
            raise PayloadError(
                f"unable to decode payload\njdk_version must be [major, minor, patch], got {version!r}"
            )
        if not isinstance(url, str) or not url:
            raise PayloadError(f"unable to decode payload\nurl must be a string, got {url!r}")
        return cls(jdk_version=tuple(version[:3]), url=url)

    def version_key(self) -> str:
        major, minor, patch = self.jdk_version
        return f"{major}.{minor}.{patch}"


def bundle_params(features: str, jdk_version: str) -> List[Tuple[str, str]]:
    """Return the catalog query parameters for ``features`` and ``jdk_version``."""
    return [
        ("arch", Constants.AZUL_ARCH),
        ("ext", Constants.AZUL_EXT),
        ("features", features),
        ("hw_bitness", Constants.AZUL_HW_BITNESS),
        ("jdk_version", jdk_version),
        ("os", Constants.AZUL_OS),
        ("javafx", Constants.AZUL_JAVAFX),
    ]


def bundle_url(features: str, jdk_version: str) -> str:
    """Return the full catalog query URL, as sent, for logs and errors."""
    return prepared_url(Constants.AZUL_BUNDLE_URL, bundle_params(features, jdk_version))


def fetch_bundle(features: str, jdk_version: str) -> Bundle:
    logger.info("Fetching Zulu %s %s bundle", features, jdk_version)
    payload = get_json(
        Constants.AZUL_BUNDLE_URL,
        context="azul",
        params=bundle_params(features, jdk_version),
    )
    return Bundle.from_json(payload)


def resolve(inputs: Inputs) -> Outputs:
    """Resolve the latest Zulu bundle for ``inputs``.

    Requires the ``type`` and ``version`` inputs; an optional ``constraint``
    input narrows the accepted versions.

    Returns:
        Outputs: ``version`` and ``uri``, plus ``cpe`` for Java 8.
    """
    features = inputs.require("type")
    jdk_version = inputs.require("version")

    bundle = fetch_bundle(features, jdk_version)
    catalog = VersionCatalog({bundle.version_key(): bundle.url})

    latest = get_latest_version(catalog, inputs.get("constraint"))
    outputs = new_outputs(catalog[latest.original], latest)

    if latest.major == 8:
        # Java 8 CPEs use `1.8.0` with `updateXX` rather than 8.0.x
        outputs["cpe"] = f"update{latest.patch}"

    logger.info("Resolved Zulu %s %s to %s", features, jdk_version, outputs["version"])
    return outputs
