import pytest
from pydantic import ValidationError

from suppressions.core.enums import Namespace, PmdRuleset
from suppressions.core.models import ConstantInfo, NamespaceDocument


def test_constant_info_is_frozen():
    const = ConstantInfo(name="NLS", value="nls", namespace=Namespace.COMPILER)
    with pytest.raises(ValidationError):
        const.value = "other"


@pytest.mark.parametrize(
    "name, value, namespace",
    [
        ("god_class", "PMD.GodClass", Namespace.PMD),       # lower-case name
        ("GOD_CLASS", "GodClass", Namespace.PMD),           # missing tool prefix
        ("GOD_CLASS", "PMD.God Class", Namespace.PMD),      # whitespace
        ("STATIC_ACCESS", "static_access", Namespace.COMPILER),
        ("STATIC_ACCESS", "Static-Access", Namespace.COMPILER),
        ("EMPTY", "", Namespace.COMPILER),
    ],
)
def test_invalid_constants_rejected(name, value, namespace):
    with pytest.raises(ValidationError):
        ConstantInfo(name=name, value=value, namespace=namespace)


def test_ruleset_only_for_pmd():
    with pytest.raises(ValidationError):
        ConstantInfo(name="NLS", value="nls", namespace=Namespace.COMPILER, ruleset=PmdRuleset.BASIC)


def test_document_propagates_namespace_and_reference():
    doc = NamespaceDocument.model_validate(
        {
            "namespace": "pmd",
            "tool": "PMD",
            "title": "PMD",
            "reference": "http://example.org/pmd",
            "constants": [{"name": "GOD_CLASS", "value": "PMD.GodClass", "ruleset": "design"}],
        }
    )
    const = doc.constants[0]
    assert const.namespace is Namespace.PMD
    assert const.reference == "http://example.org/pmd"
    assert const.documentation_url == PmdRuleset.DESIGN.documentation_url


def test_document_alias_validation():
    base = {
        "namespace": "compiler",
        "tool": "Eclipse JDT",
        "title": "Eclipse",
        "constants": [{"name": "NLS", "value": "nls"}],
    }
    with pytest.raises(ValidationError):
        NamespaceDocument.model_validate({**base, "aliases": {"OLD_NLS": "MISSING"}})
    with pytest.raises(ValidationError):
        NamespaceDocument.model_validate({**base, "aliases": {"NLS": "NLS"}})
    doc = NamespaceDocument.model_validate({**base, "aliases": {"OLD_NLS": "NLS"}})
    assert doc.aliases == {"OLD_NLS": "NLS"}
