# tests/core/config/test_locator.py
"""
Testes da descoberta de fragmentos (locate_fragments).

Os testes asseguram que:
- apenas arquivos `.yaml`/`.yml` no nível do diretório são candidatos
- a ordem de descoberta é estável (nome de arquivo)
- diretório inexistente, vazio e inválido geram erros distinguíveis
"""

from pathlib import Path

import pytest

try:
    from conman.core.config.locator import locate_fragments
    from conman.core.config.errors import (
        ConfigDirectoryNotFoundError,
        DiscoveryError,
        NoFragmentsFoundError,
    )
except Exception as e:  # noqa: BLE001
    locate_fragments = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing locator/errors modules. Implement:\n"
            "- src/conman/core/config/locator.py (locate_fragments)\n"
            "- src/conman/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_locates_yaml_files_in_name_order(write_fragments):
    """
    Verifica que os fragmentos são retornados em ordem de nome de arquivo.

    Invariantes:
        - Arquivos com outras extensões são ignorados
        - `.yml` também é reconhecido por padrão
    """
    _require_imports()
    directory = write_fragments(
        {
            "b.yaml": "b: 1\n",
            "a.yaml": "a: 1\n",
            "c.yml": "c: 1\n",
            "notes.txt": "ignore me\n",
            "config.json": "{}",
        }
    )

    found = locate_fragments(directory)

    assert [p.name for p in found] == ["a.yaml", "b.yaml", "c.yml"]
    assert all(p.parent == directory for p in found)


def test_does_not_recurse_into_subdirectories(write_fragments):
    _require_imports()
    directory = write_fragments({"top.yaml": "x: 1\n"})
    nested = directory / "nested"
    nested.mkdir()
    (nested / "deep.yaml").write_text("y: 2\n", encoding="utf-8")
    (directory / "dir.yaml").mkdir()

    found = locate_fragments(directory)

    assert [p.name for p in found] == ["top.yaml"]


def test_custom_patterns(write_fragments):
    _require_imports()
    directory = write_fragments({"a.yaml": "a: 1\n", "b.yml": "b: 1\n"})

    found = locate_fragments(directory, patterns=["*.yaml"])

    assert [p.name for p in found] == ["a.yaml"]


def test_empty_directory_raises_no_fragments(tmp_path: Path):
    """
    Verifica que um diretório existente sem fragmentos não produz lista vazia.

    Invariantes:
        - A exceção é `NoFragmentsFoundError`
        - A exceção NÃO é uma `DiscoveryError`
    """
    _require_imports()
    (tmp_path / "readme.md").write_text("# nada\n", encoding="utf-8")

    with pytest.raises(NoFragmentsFoundError) as excinfo:
        locate_fragments(tmp_path)

    assert not isinstance(excinfo.value, DiscoveryError)


def test_missing_directory_raises_discovery_error(tmp_path: Path):
    """
    Verifica que um diretório inexistente é distinguível de um diretório vazio.

    Decisões arquiteturais:
        - `ConfigDirectoryNotFoundError` é capturável como `DiscoveryError`
          e como `NoFragmentsFoundError`
    """
    _require_imports()
    missing = tmp_path / "foobar"

    with pytest.raises(DiscoveryError) as excinfo:
        locate_fragments(missing)

    assert isinstance(excinfo.value, ConfigDirectoryNotFoundError)
    assert isinstance(excinfo.value, NoFragmentsFoundError)


def test_file_instead_of_directory_raises_discovery_error(tmp_path: Path):
    _require_imports()
    not_a_dir = tmp_path / "config.yaml"
    not_a_dir.write_text("a: 1\n", encoding="utf-8")

    with pytest.raises(DiscoveryError) as excinfo:
        locate_fragments(not_a_dir)

    assert not isinstance(excinfo.value, NoFragmentsFoundError)


def test_permission_denied_listing_raises_discovery_error(tmp_path: Path, monkeypatch):
    """
    Verifica que permissão negada na listagem é uma falha de descoberta tipada.

    Invariantes:
        - `PermissionError` nunca escapa sem tipo
        - A exceção original é encadeada em `__cause__`
        - Não é confundida com "nenhum fragmento encontrado"
    """
    _require_imports()
    (tmp_path / "a.yaml").write_text("a: 1\n", encoding="utf-8")

    def _denied(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "exists", lambda self, *a, **k: _denied(self))
    monkeypatch.setattr(Path, "iterdir", _denied)

    with pytest.raises(DiscoveryError) as excinfo:
        locate_fragments(tmp_path)

    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert not isinstance(excinfo.value, NoFragmentsFoundError)


def test_hidden_files_are_ignored(write_fragments):
    """
    Verifica que arquivos ocultos (ex.: AppleDouble `._a.yaml`) não são fragmentos.
    """
    _require_imports()
    directory = write_fragments({"a.yaml": "a: 1\n", ".editor.yaml": "x: 1\n"})
    (directory / "._a.yaml").write_bytes(b"\x00\x05\x16\x07junk")

    found = locate_fragments(directory)

    assert [p.name for p in found] == ["a.yaml"]


def test_hidden_files_match_explicit_dot_pattern(write_fragments):
    _require_imports()
    directory = write_fragments({".local.yaml": "x: 1\n", "a.yaml": "a: 1\n"})

    found = locate_fragments(directory, patterns=[".*.yaml", "*.yaml"])

    assert [p.name for p in found] == [".local.yaml", "a.yaml"]


def test_only_hidden_files_raises_no_fragments(write_fragments):
    _require_imports()
    directory = write_fragments({"._a.yaml": "junk\n"})

    with pytest.raises(NoFragmentsFoundError):
        locate_fragments(directory)
