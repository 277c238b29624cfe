"""
Named warning-suppression tokens for PMD and the Eclipse compiler.

Reference constants instead of inline string literals::

    from suppressions import pmd, compiler
    pmd.JUMBLED_INCREMENTER      # "PMD.JumbledIncrementer"
    compiler.DEPRECATION         # "deprecation"

    from suppressions import lookup
    lookup("pmd", "GOD_CLASS")   # "PMD.GodClass"
"""

from typing import Union

from suppressions.core.enums import Namespace
from suppressions.core.errors import UnknownConstantError
from suppressions.core.loader import load_registry
from suppressions.core.registry import ConstantRegistry
from suppressions.core.logging import logger
from suppressions.core.version import __version__

# Library code stays silent until an application calls configure_logging
logger.disable("suppressions")

_LAZY_REGISTRIES = {
    "PMD_WARNINGS": Namespace.PMD,
    "COMPILER_WARNINGS": Namespace.COMPILER,
}


def __getattr__(name: str) -> ConstantRegistry:
    # Registries load on first access so a broken data file fails where it is used
    if name in _LAZY_REGISTRIES:
        return load_registry(_LAZY_REGISTRIES[name])
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def get_registry(namespace: Union[Namespace, str]) -> ConstantRegistry:
    """Return the registry for ``namespace`` (``"pmd"`` or ``"compiler"``)."""
    return load_registry(Namespace(namespace))


def lookup(namespace: Union[Namespace, str], name: str) -> str:
    """Return the canonical token for ``name`` in ``namespace``."""
    return get_registry(namespace).lookup(name)


__all__ = [
    "COMPILER_WARNINGS",
    "ConstantRegistry",
    "Namespace",
    "PMD_WARNINGS",
    "UnknownConstantError",
    "get_registry",
    "lookup",
    "__version__",
]
