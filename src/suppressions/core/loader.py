"""
Load the bundled namespace documents into registries.

Exports:
    - load_document: Parse and validate a namespace document (packaged or from a path).
    - build_registry: Turn a validated document into a ConstantRegistry.
    - load_registry: Cached, process-wide registry for a packaged namespace.
"""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from .enums import Namespace
from .errors import RegistryIntegrityError
from .logging import logger
from .models import NamespaceDocument
from .registry import ConstantRegistry

__all__ = [
    "DATA_PACKAGE",
    "load_document",
    "build_registry",
    "load_registry",
]

DATA_PACKAGE = "suppressions.data"


def _read_packaged(namespace: Namespace) -> str:
    return resources.files(DATA_PACKAGE).joinpath(f"{namespace.value}.yaml").read_text(encoding="utf-8")


def load_document(
    namespace: Union[Namespace, str],
    path: Optional[Union[str, Path]] = None,
) -> NamespaceDocument:
    """
    Parse and validate a namespace document.

    Args:
        namespace: Namespace the document must describe.
        path: Alternative YAML file; the packaged data is used when omitted.

    Raises:
        RegistryIntegrityError: If the YAML is malformed or fails validation.
    """
    namespace = Namespace(namespace)
    source = str(path) if path is not None else f"{DATA_PACKAGE}/{namespace.value}.yaml"
    try:
        text = Path(path).read_text(encoding="utf-8") if path is not None else _read_packaged(namespace)
        raw = yaml.safe_load(text)
    except (OSError, yaml.YAMLError) as exc:
        raise RegistryIntegrityError(f"Cannot read {source}: {exc}") from exc

    if not isinstance(raw, dict):
        raise RegistryIntegrityError(f"{source} does not contain a mapping")

    try:
        document = NamespaceDocument.model_validate(raw)
    except ValidationError as exc:
        raise RegistryIntegrityError(f"Invalid data in {source}:\n{exc}") from exc

    if document.namespace is not namespace:
        raise RegistryIntegrityError(
            f"{source} describes namespace {document.namespace.value}, expected {namespace.value}"
        )
    return document


def build_registry(document: NamespaceDocument) -> ConstantRegistry:
    return ConstantRegistry(
        document.namespace,
        document.constants,
        aliases=document.aliases,
        title=document.title,
        tool=document.tool,
        reference=document.reference,
    )


@lru_cache(maxsize=None)
def load_registry(namespace: Union[Namespace, str]) -> ConstantRegistry:
    """Return the registry for a packaged namespace, loading it on first use."""
    namespace = Namespace(namespace)
    registry = build_registry(load_document(namespace))
    logger.debug(f"Loaded {len(registry)} {namespace.value} constants")
    return registry
