"""
Eclipse compiler warning tokens for ``@SuppressWarnings``.

    from suppressions.compiler import DEPRECATION, NLS
    DEPRECATION   # "deprecation"
    NLS           # "nls"

Exports:
    - REGISTRY: The ConstantRegistry backing this module.
    - One string constant per compiler warning token.
"""

from suppressions.core.enums import Namespace
from suppressions.core.loader import load_registry

REGISTRY = load_registry(Namespace.COMPILER)

for _name, _value in REGISTRY.items():
    globals()[_name] = _value
del _name, _value


def __getattr__(name):
    # Deprecated aliases resolve through the registry, which logs a warning
    if name in REGISTRY.aliases:
        return REGISTRY.lookup(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["REGISTRY"] + REGISTRY.names()
