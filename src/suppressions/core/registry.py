"""
Read-only registry mapping symbolic names to suppression tokens.

A ``ConstantRegistry`` holds one namespace (PMD rules or Eclipse compiler
warnings). It behaves like an immutable ``Mapping[str, str]`` from name to
canonical token and also exposes every entry as an attribute, so both
``registry["GOD_CLASS"]`` and ``registry.GOD_CLASS`` return ``"PMD.GodClass"``.

Deprecated aliases resolve to their canonical entry with a logged warning and
never show up when the registry is enumerated.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .enums import Namespace, PmdRuleset
from .errors import RegistryIntegrityError, UnknownConstantError
from .logging import logger
from .models import ConstantInfo

__all__ = ["ConstantRegistry"]


class ConstantRegistry(Mapping):
    """Immutable, namespace-scoped mapping from symbolic name to token.

    Deprecated aliases are resolved by ``lookup``, ``info``, ``registry[name]``,
    ``registry.get(name)`` and attribute access, each logging a warning. They
    are not members: ``alias in registry`` is False and iteration, ``len`` and
    ``names`` only cover canonical entries. Use ``registry.aliases`` to test
    for an alias.
    """

    __slots__ = ("_namespace", "_title", "_tool", "_reference", "_by_name", "_by_value", "_aliases")

    def __init__(
        self,
        namespace: Namespace,
        constants: Iterable[ConstantInfo],
        aliases: Optional[Dict[str, str]] = None,
        title: str = "",
        tool: str = "",
        reference: Optional[str] = None,
    ):
        by_name: Dict[str, ConstantInfo] = {}
        by_value: Dict[str, ConstantInfo] = {}
        for const in constants:
            if const.namespace is not namespace:
                raise RegistryIntegrityError(
                    f"{const.name} belongs to {const.namespace.value}, not {namespace.value}"
                )
            if const.name in by_name:
                raise RegistryIntegrityError(f"Duplicate {namespace.value} name: {const.name}")
            if const.value in by_value:
                raise RegistryIntegrityError(
                    f"Duplicate {namespace.value} value {const.value!r}: "
                    f"{by_value[const.value].name} and {const.name}"
                )
            by_name[const.name] = const
            by_value[const.value] = const

        aliases = dict(aliases or {})
        for alias, target in aliases.items():
            if alias in by_name or target not in by_name:
                raise RegistryIntegrityError(f"Invalid alias {alias} -> {target}")

        setattr_ = object.__setattr__
        setattr_(self, "_namespace", namespace)
        setattr_(self, "_title", title)
        setattr_(self, "_tool", tool)
        setattr_(self, "_reference", reference)
        setattr_(self, "_by_name", MappingProxyType(by_name))
        setattr_(self, "_by_value", MappingProxyType(by_value))
        setattr_(self, "_aliases", MappingProxyType(aliases))

    # --- Identification ---

    @property
    def namespace(self) -> Namespace:
        return self._namespace

    @property
    def title(self) -> str:
        return self._title

    @property
    def tool(self) -> str:
        return self._tool

    @property
    def reference(self) -> Optional[str]:
        return self._reference

    @property
    def aliases(self) -> Mapping:
        return self._aliases

    # --- Lookup ---

    def _resolve(self, name: str) -> ConstantInfo:
        const = self._by_name.get(name)
        if const is not None:
            return const
        target = self._aliases.get(name)
        if target is not None:
            logger.warning(
                f"{self._namespace.value}.{name} is a deprecated alias; use {target} "
                f"({self._by_name[target].value!r}) instead"
            )
            return self._by_name[target]
        raise UnknownConstantError(self._namespace.value, name, self._by_name.keys())

    def lookup(self, name: str) -> str:
        """Return the canonical token for ``name``; unknown names raise immediately."""
        return self._resolve(name).value

    def info(self, name: str) -> ConstantInfo:
        """Return the full ``ConstantInfo`` record for ``name``."""
        return self._resolve(name)

    def find_by_value(self, value: str) -> ConstantInfo:
        """Reverse lookup: which constant produces the literal token ``value``."""
        try:
            return self._by_value[value]
        except KeyError:
            raise UnknownConstantError(self._namespace.value, value, self._by_value.keys()) from None

    def by_ruleset(self, ruleset: PmdRuleset) -> List[ConstantInfo]:
        """Return all constants in a given PMD ruleset."""
        ruleset = PmdRuleset(ruleset)
        return [c for c in self._by_name.values() if c.ruleset == ruleset]

    def search(self, term: str) -> List[ConstantInfo]:
        """Case-insensitive substring search over names, values and descriptions."""
        needle = term.lower()
        return [
            c for c in self._by_name.values()
            if needle in c.name.lower() or needle in c.value.lower() or needle in c.description.lower()
        ]

    # --- Enumeration ---

    @property
    def constants(self) -> Tuple[ConstantInfo, ...]:
        return tuple(self._by_name.values())

    def names(self) -> List[str]:
        return list(self._by_name)

    def as_dict(self) -> Dict[str, str]:
        return {name: const.value for name, const in self._by_name.items()}

    # --- Mapping protocol ---

    def __getitem__(self, name: str) -> str:
        return self.lookup(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __getattr__(self, name: str) -> str:
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.lookup(name)
        except UnknownConstantError as exc:
            raise AttributeError(str(exc)) from None

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._by_name))

    # --- Immutability ---

    def __setattr__(self, name, value):
        raise TypeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise TypeError(f"{type(self).__name__} is read-only")

    def __setitem__(self, name, value):
        raise TypeError(f"{type(self).__name__} is read-only")

    def __delitem__(self, name):
        raise TypeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"<ConstantRegistry {self._namespace.value}: {len(self)} constants>"
