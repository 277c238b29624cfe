import textwrap

import pytest

from suppressions.core.enums import Namespace
from suppressions.core.errors import RegistryIntegrityError
from suppressions.core.loader import build_registry, load_document, load_registry


def _write(tmp_path, body):
    path = tmp_path / "namespace.yaml"
    path.write_text(textwrap.dedent(body))
    return path


def test_load_registry_is_cached():
    assert load_registry(Namespace.PMD) is load_registry(Namespace.PMD)
    assert load_registry(Namespace.COMPILER).namespace is Namespace.COMPILER


def test_packaged_documents_validate():
    pmd = load_document("pmd")
    assert pmd.tool == "PMD"
    assert len(pmd.constants) == 265
    compiler = load_document(Namespace.COMPILER)
    assert compiler.aliases == {"SYNTHETHIC_ACCESS": "SYNTHETIC_ACCESS"}


@pytest.mark.parametrize("namespace", list(Namespace))
def test_each_packaged_document_loads(namespace):
    """Every bundled data file parses and builds a registry on its own."""
    registry = build_registry(load_document(namespace))
    assert registry.namespace is namespace
    assert all(isinstance(name, str) for name in registry)


def test_yaml_keywords_stay_strings():
    """Names such as NULL must not be read as YAML null."""
    registry = build_registry(load_document(Namespace.COMPILER))
    assert registry.lookup("NULL") == "null"
    assert registry.info("NULL").name == "NULL"


def test_custom_document(tmp_path):
    path = _write(tmp_path, """\
        namespace: compiler
        tool: Eclipse JDT
        title: Subset
        constants:
          - name: NLS
            value: nls
          - name: UNUSED
            value: unused
    """)
    registry = build_registry(load_document(Namespace.COMPILER, path))
    assert dict(registry) == {"NLS": "nls", "UNUSED": "unused"}
    assert registry.title == "Subset"


def test_duplicate_values_in_document_rejected(tmp_path):
    path = _write(tmp_path, """\
        namespace: compiler
        tool: Eclipse JDT
        title: Broken
        constants:
          - name: NLS
            value: nls
          - name: NLS_AGAIN
            value: nls
    """)
    with pytest.raises(RegistryIntegrityError):
        build_registry(load_document(Namespace.COMPILER, path))


def test_invalid_token_rejected(tmp_path):
    path = _write(tmp_path, """\
        namespace: pmd
        tool: PMD
        title: Broken
        constants:
          - name: GOD_CLASS
            value: GodClass
    """)
    with pytest.raises(RegistryIntegrityError, match="Invalid data"):
        load_document(Namespace.PMD, path)


def test_namespace_mismatch_rejected(tmp_path):
    path = _write(tmp_path, """\
        namespace: compiler
        tool: Eclipse JDT
        title: Compiler
        constants: []
    """)
    with pytest.raises(RegistryIntegrityError, match="expected pmd"):
        load_document(Namespace.PMD, path)


def test_unreadable_documents(tmp_path):
    with pytest.raises(RegistryIntegrityError):
        load_document(Namespace.PMD, tmp_path / "missing.yaml")
    with pytest.raises(RegistryIntegrityError):
        load_document(Namespace.PMD, _write(tmp_path, "- just\n- a list\n"))
    with pytest.raises(RegistryIntegrityError):
        load_document(Namespace.PMD, _write(tmp_path, "key: [unclosed\n"))


def test_unknown_namespace():
    with pytest.raises(ValueError):
        load_document("checkstyle")
