"""
Pydantic models describing suppression tokens and the documents that bundle them.

Exports:
    - ConstantInfo: Metadata and canonical value for a single suppression token.
    - NamespaceDocument: A complete namespace as stored in the packaged YAML data.
"""

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import Namespace, PmdRuleset

__all__ = [
    "ConstantInfo",
    "NamespaceDocument",
    "VALUE_PATTERNS",
]

NAME_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")

# Token shape each tool accepts inside @SuppressWarnings
VALUE_PATTERNS: Dict[Namespace, re.Pattern] = {
    Namespace.PMD: re.compile(r"^PMD(\.[A-Za-z0-9]+)?$"),
    Namespace.COMPILER: re.compile(r"^[a-z]+(-[a-z]+)*$"),
}


class ConstantInfo(BaseModel):
    """Complete metadata and value for a single suppression token."""
    model_config = ConfigDict(frozen=True)

    # Core identification
    name: str = Field(..., description="Symbolic name (used as key)")
    value: str = Field(..., min_length=1, description="Canonical token passed to @SuppressWarnings")
    namespace: Namespace = Field(..., description="Vocabulary this token belongs to")

    # Documentation
    description: str = Field("", description="What the suppressed warning reports")
    ruleset: Optional[PmdRuleset] = Field(None, description="PMD ruleset, if any")
    since: Optional[str] = Field(None, description="Tool version that introduced the rule")
    reference: Optional[str] = Field(None, description="Namespace-wide documentation URL")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not NAME_PATTERN.match(v):
            raise ValueError(f"Constant names must be UPPER_SNAKE_CASE, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_value_shape(self) -> "ConstantInfo":
        if not VALUE_PATTERNS[self.namespace].match(self.value):
            raise ValueError(
                f"{self.name}: {self.value!r} is not a valid {self.namespace.value} token"
            )
        if self.ruleset is not None and self.namespace is not Namespace.PMD:
            raise ValueError(f"{self.name}: only PMD rules belong to a ruleset")
        return self

    @property
    def documentation_url(self) -> Optional[str]:
        if self.ruleset is not None:
            return self.ruleset.documentation_url
        return self.reference


class NamespaceDocument(BaseModel):
    """A namespace as bundled under ``suppressions/data``."""
    model_config = ConfigDict(frozen=True)

    namespace: Namespace
    tool: str
    title: str
    reference: Optional[str] = None
    aliases: Dict[str, str] = Field(default_factory=dict)
    constants: List[ConstantInfo] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def propagate_namespace(cls, data):
        # Entries in the data files omit the namespace and reference they share
        if isinstance(data, dict) and isinstance(data.get("constants"), list):
            shared = {"namespace": data.get("namespace"), "reference": data.get("reference")}
            data = dict(data)
            data["constants"] = [
                {**shared, **entry} if isinstance(entry, dict) else entry
                for entry in data["constants"]
            ]
        return data

    @model_validator(mode="after")
    def validate_aliases(self) -> "NamespaceDocument":
        names = {c.name for c in self.constants}
        for alias, target in self.aliases.items():
            if alias in names:
                raise ValueError(f"Alias {alias} shadows an existing constant")
            if target not in names:
                raise ValueError(f"Alias {alias} points at unknown constant {target}")
        return self
