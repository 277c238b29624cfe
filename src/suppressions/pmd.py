"""
PMD rule identifiers for ``@SuppressWarnings``.

Every rule is available as a module attribute holding its canonical token::

    from suppressions.pmd import GOD_CLASS, JUMBLED_INCREMENTER
    GOD_CLASS             # "PMD.GodClass"
    JUMBLED_INCREMENTER   # "PMD.JumbledIncrementer"

``PMD`` itself suppresses every PMD warning.

Exports:
    - REGISTRY: The ConstantRegistry backing this module.
    - One string constant per PMD rule.
"""

from suppressions.core.enums import Namespace
from suppressions.core.loader import load_registry

REGISTRY = load_registry(Namespace.PMD)

# Export by constant name
for _name, _value in REGISTRY.items():
    globals()[_name] = _value
del _name, _value


def __getattr__(name):
    # Deprecated aliases resolve through the registry, which logs a warning
    if name in REGISTRY.aliases:
        return REGISTRY.lookup(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["REGISTRY"] + REGISTRY.names()
