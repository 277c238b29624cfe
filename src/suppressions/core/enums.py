# suppressions/core/enums.py

from enum import Enum

PMD_RULES_URL = "http://pmd.sourceforge.net/pmd-5.0.5/rules/java/{ruleset}.html"


class Namespace(str, Enum):
    """Independent vocabularies of suppression tokens."""
    PMD = "pmd"            # PMD rule identifiers
    COMPILER = "compiler"  # Eclipse compiler warning tokens


class PmdRuleset(str, Enum):
    """PMD 5.0.5 Java rulesets a rule identifier belongs to."""
    BASIC = "basic"
    BRACES = "braces"
    CLONE = "clone"
    CODESIZE = "codesize"
    COMMENTS = "comments"
    CONTROVERSIAL = "controversial"
    COUPLING = "coupling"
    DESIGN = "design"
    EMPTY = "empty"
    FINALIZERS = "finalizers"
    IMPORTS = "imports"
    J2EE = "j2ee"
    JAVABEANS = "javabeans"
    JUNIT = "junit"
    LOGGING_JAKARTA_COMMONS = "logging-jakarta-commons"
    LOGGING_JAVA = "logging-java"
    MIGRATING = "migrating"
    NAMING = "naming"
    OPTIMIZATIONS = "optimizations"
    STRICTEXCEPTION = "strictexception"
    STRINGS = "strings"
    SUNSECURE = "sunsecure"
    UNNECESSARY = "unnecessary"
    UNUSEDCODE = "unusedcode"

    @property
    def documentation_url(self) -> str:
        return PMD_RULES_URL.format(ruleset=self.value)


class ExportFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"
    MARKDOWN = "md"


__all__ = [
    "Namespace",
    "PmdRuleset",
    "ExportFormat",
    "PMD_RULES_URL",
]
