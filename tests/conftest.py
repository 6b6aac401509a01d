# tests/conftest.py
"""
Fixtures compartilhados para testes do conman.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos YAML de fragmentos semelhantes ao uso real do projeto
- um diretório de fragmentos materializado em `tmp_path`
- fábricas de `Fragment` em memória (sem I/O)

Decisões arquiteturais:
    - Conteúdos YAML são fornecidos como string
    - Cenários de filesystem usam sempre `tmp_path` (isolamento por teste)
    - Imports do core são realizados de forma lazy dentro das fixtures

Invariantes:
    - Nenhuma fixture escreve fora de `tmp_path`
    - Todas as fixtures são determinísticas

Limites explícitos:
    - Não substituir testes de integração do pipeline
    - Não conter lógica condicional complexa
"""

from pathlib import Path
from typing import Callable, Dict

import pytest


# =====================================================
# Fragment contents
# =====================================================

@pytest.fixture
def fragment_texts() -> Dict[str, str]:
    """
    Fixture que fornece o conteúdo de um diretório de fragmentos típico.

    O fragmento `config.yaml` é a camada de override: redefine `d`
    (definido também em `d.yaml`) e adiciona a árvore `bar`.

    Usado por:
        - Testes do pipeline completo
        - Testes do adapter de plugin

    Returns:
        Dict[str, str]: nome do arquivo -> conteúdo YAML.
    """
    return {
        "a.yaml": "a:\n  foo: bar\n\n",
        "b.yaml": "b:\n  bar: [foo, baz]\n\n",
        "config.yaml": (
            "d: bar\n"
            "nothing: ~\n"
            "bar:\n"
            "  foo:\n"
            "    thing: beep\n"
        ),
        "d.yaml": "d: 'foo'\n\n",
    }


@pytest.fixture
def write_fragments(tmp_path: Path) -> Callable[..., Path]:
    """
    Fábrica que materializa fragmentos em um diretório temporário.

    Returns:
        Callable: `write(files, subdir="conf") -> Path` do diretório criado.
    """

    def _write(files: Dict[str, str], subdir: str = "conf") -> Path:
        directory = tmp_path / subdir
        directory.mkdir(parents=True, exist_ok=True)
        for name, content in files.items():
            (directory / name).write_text(content, encoding="utf-8")
        return directory

    return _write


@pytest.fixture
def mock_config_dir(write_fragments, fragment_texts) -> Path:
    """Diretório com `a.yaml`, `b.yaml`, `config.yaml` e `d.yaml`."""
    return write_fragments(fragment_texts)


@pytest.fixture
def make_fragment() -> Callable[[str, str], object]:
    """
    Fábrica de `Fragment` em memória.

    Permite testar ordering e parser sem tocar o filesystem.
    """
    from conman.core.config.fragments import Fragment

    def _make(path: str, raw: str = "") -> Fragment:
        return Fragment(path=Path(path), raw_content=raw)

    return _make
