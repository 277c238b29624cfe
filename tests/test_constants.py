import pytest

from suppressions import COMPILER_WARNINGS, PMD_WARNINGS, compiler, lookup, pmd
from suppressions.core.enums import Namespace, PmdRuleset

COMPILER_REFERENCE = {
    "ALL": "all",
    "BOXING": "boxing",
    "CAST": "cast",
    "DEP_ANN": "dep-ann",
    "DEPRECATION": "deprecation",
    "FALLTHROUGH": "fallthrough",
    "FINALLY": "finally",
    "HIDING": "hiding",
    "INCOMPLETE_SWITCH": "incomplete-switch",
    "JAVADOC": "javadoc",
    "NLS": "nls",
    "NULL": "null",
    "RAWTYPES": "rawtypes",
    "RESOURCE": "resource",
    "RESTRICTION": "restriction",
    "SERIAL": "serial",
    "STATIC_ACCESS": "static-access",
    "STATIC_METHOD": "static-method",
    "SUPER": "super",
    "SYNTHETIC_ACCESS": "synthetic-access",
    "SYNC_OVERRIDE": "sync-override",
    "UNCHECKED": "unchecked",
    "UNQUALIFIED_FIELD_ACCESS": "unqualified-field-access",
    "UNUSED": "unused",
}


def test_registries_are_not_empty():
    """Sanity check that both registries exist and have entries."""
    assert len(PMD_WARNINGS) > 0
    assert len(COMPILER_WARNINGS) > 0


def test_pmd_golden_values(pmd_reference):
    """Every PMD name maps to exactly its documented token."""
    for name, value in pmd_reference:
        assert PMD_WARNINGS.lookup(name) == value, name


def test_pmd_completeness(pmd_reference):
    """No missing and no extra PMD entries."""
    assert len(pmd_reference) == 265
    assert PMD_WARNINGS.as_dict() == dict(pmd_reference)


def test_compiler_golden_values_and_completeness():
    assert len(COMPILER_WARNINGS) == 24
    assert COMPILER_WARNINGS.as_dict() == COMPILER_REFERENCE


@pytest.mark.parametrize("registry", [PMD_WARNINGS, COMPILER_WARNINGS], ids=["pmd", "compiler"])
def test_names_and_values_unique(registry):
    names = [c.name for c in registry.constants]
    values = [c.value for c in registry.constants]
    assert len(names) == len(set(names)), "Duplicate constant names found"
    assert len(values) == len(set(values)), "Two constants share a token"
    assert all(values)


@pytest.mark.parametrize(
    "namespace, name, expected",
    [
        (Namespace.PMD, "JUMBLED_INCREMENTER", "PMD.JumbledIncrementer"),
        (Namespace.PMD, "GOD_CLASS", "PMD.GodClass"),
        (Namespace.PMD, "PMD", "PMD"),
        (Namespace.COMPILER, "DEPRECATION", "deprecation"),
        (Namespace.COMPILER, "NLS", "nls"),
    ],
)
def test_documented_scenarios(namespace, name, expected):
    assert lookup(namespace, name) == expected
    assert lookup(namespace.value, name) == expected


def test_lookup_is_stable():
    first = PMD_WARNINGS.lookup("GOD_CLASS")
    second = PMD_WARNINGS.lookup("GOD_CLASS")
    assert first == second
    assert first is second


def test_module_level_bindings():
    """Constants are importable as plain module attributes."""
    from suppressions.compiler import DEPRECATION
    from suppressions.pmd import JUMBLED_INCREMENTER

    assert JUMBLED_INCREMENTER == "PMD.JumbledIncrementer"
    assert DEPRECATION == "deprecation"
    assert pmd.GOD_CLASS == "PMD.GodClass"
    assert compiler.NLS == "nls"
    assert set(pmd.__all__) == {"REGISTRY", *PMD_WARNINGS.names()}
    assert set(compiler.__all__) == {"REGISTRY", *COMPILER_WARNINGS.names()}


def test_token_shapes():
    assert all(v == "PMD" or v.startswith("PMD.") for v in PMD_WARNINGS.values())
    assert all(v == v.lower() and " " not in v for v in COMPILER_WARNINGS.values())


def test_every_pmd_rule_has_a_ruleset_except_catch_all():
    missing = [c.name for c in PMD_WARNINGS.constants if c.ruleset is None]
    assert missing == ["PMD"]
    assert len(PMD_WARNINGS.by_ruleset(PmdRuleset.DESIGN)) == 52


def test_deprecated_alias_importable_from_module(log_messages):
    """The old misspelled compiler name still imports, with a warning."""
    from suppressions.compiler import SYNTHETHIC_ACCESS

    assert SYNTHETHIC_ACCESS == "synthetic-access"
    assert any(r["level"].name == "WARNING" and "SYNTHETHIC_ACCESS" in r["message"] for r in log_messages)
    with pytest.raises(ImportError):
        from suppressions.compiler import NOT_A_WARNING  # noqa: F401
    assert not hasattr(pmd, "NOT_A_RULE")
