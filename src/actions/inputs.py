"""Action inputs sourced from the environment and command-line flags."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from constants import Constants
from errors import InputError


class Inputs(dict):
    """Mapping of lower-cased input names to values.

    GitHub Actions exposes ``with:`` values as ``INPUT_<NAME>`` environment
    variables; flags supplied on the command line override them.
    """

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Inputs":
        environ = os.environ if environ is None else environ
        inputs = cls()
        prefix = Constants.INPUT_ENV_PREFIX
        for key, value in environ.items():
            if key.startswith(prefix) and value:
                inputs[key[len(prefix):].lower()] = value
        return inputs

    def overlay(self, overrides: Mapping[str, Optional[str]]) -> "Inputs":
        """Return a copy with every non-empty value in ``overrides`` applied."""
        merged = Inputs(self)
        for key, value in overrides.items():
            if value:
                merged[key.lower()] = value
        return merged

    def require(self, name: str) -> str:
        """Return input ``name`` or raise InputError when it is missing."""
        value = self.get(name)
        if not value:
            raise InputError(f"{name} must be specified")
        return value
