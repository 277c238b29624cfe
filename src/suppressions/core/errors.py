"""
Exception hierarchy for the suppressions package.

Exports:
    - SuppressionsError: Base class for every error raised by the package.
    - UnknownConstantError: A name (or literal value) outside a closed namespace.
    - RegistryIntegrityError: Bundled data failed validation.
    - ConfigError: Configuration file could not be read or validated.
"""

import difflib
from typing import Iterable, List, Optional

__all__ = [
    "SuppressionsError",
    "UnknownConstantError",
    "RegistryIntegrityError",
    "ConfigError",
]


class SuppressionsError(Exception):
    """Base class for all suppressions errors."""


class UnknownConstantError(SuppressionsError, KeyError):
    """Raised when a lookup targets something the namespace does not define."""

    def __init__(self, namespace: str, name: str, candidates: Optional[Iterable[str]] = None):
        self.namespace = namespace
        self.name = name
        self.suggestions: List[str] = (
            difflib.get_close_matches(name, list(candidates), n=3) if candidates else []
        )
        super().__init__(name)

    def __str__(self) -> str:
        message = f"Unknown {self.namespace} constant: {self.name!r}"
        if self.suggestions:
            message += f" (did you mean {', '.join(self.suggestions)}?)"
        return message


class RegistryIntegrityError(SuppressionsError, ValueError):
    """Raised when constant data has duplicates, bad tokens or dangling aliases."""


class ConfigError(SuppressionsError):
    """Raised when a configuration file cannot be loaded."""
