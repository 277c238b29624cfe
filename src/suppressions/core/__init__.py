from .enums import ExportFormat, Namespace, PmdRuleset
from .errors import ConfigError, RegistryIntegrityError, SuppressionsError, UnknownConstantError
from .loader import load_registry
from .models import ConstantInfo, NamespaceDocument
from .registry import ConstantRegistry

__all__ = [
    "ConstantInfo",
    "ConstantRegistry",
    "ConfigError",
    "ExportFormat",
    "Namespace",
    "NamespaceDocument",
    "PmdRuleset",
    "RegistryIntegrityError",
    "SuppressionsError",
    "UnknownConstantError",
    "load_registry",
]
