# src/conman/core/config/locator.py
"""
Descoberta de fragmentos de configuração.

Este módulo expande os padrões de fragmento sobre um diretório e
produz a lista de arquivos candidatos, em ordem de descoberta estável.

Decisões arquiteturais:
    - Apenas arquivos diretamente dentro do diretório (sem recursão)
    - A ordem de descoberta é a ordem lexicográfica dos nomes de arquivo
    - Diretório inexistente, vazio e ilegível são erros distintos

Limites explícitos:
    - Não lê conteúdo de arquivos
    - Não decide a ordem de merge (responsabilidade de `ordering`)
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, List, Union

from .errors import ConfigDirectoryNotFoundError, DiscoveryError, NoFragmentsFoundError
from .options import DEFAULT_PATTERNS


def _matches(name: str, patterns: Iterable[str]) -> bool:
    # arquivos ocultos só casam com padrões que também começam com "."
    hidden = name.startswith(".")
    return any(
        fnmatchcase(name, pattern)
        for pattern in patterns
        if not hidden or pattern.startswith(".")
    )


def locate_fragments(
    config_dir: Union[str, Path],
    *,
    patterns: Iterable[str] = DEFAULT_PATTERNS,
) -> List[Path]:
    """
    Localiza os fragmentos de configuração de um diretório.

    Política de descoberta:
        - Um arquivo é candidato se seu nome corresponde a qualquer padrão
        - Subdiretórios nunca são candidatos, mesmo que o nome corresponda
        - Arquivos ocultos (`.nome`) são ignorados, salvo padrão iniciado por `.`
        - Qualquer falha de listagem (inclusive permissão negada) é `DiscoveryError`
        - O resultado é ordenado pelo nome do arquivo

    Args:
        config_dir (Union[str, Path]): diretório de configuração.
        patterns (Iterable[str]): padrões glob aplicados ao nome do arquivo.

    Returns:
        List[Path]: caminhos dos fragmentos, em ordem de descoberta.

    Raises:
        ConfigDirectoryNotFoundError: se o diretório não existir.
        DiscoveryError: se a listagem falhar ou o caminho não for diretório.
        NoFragmentsFoundError: se nenhum arquivo corresponder aos padrões.
    """
    directory = Path(config_dir)
    patterns = tuple(patterns)

    try:
        found = [
            entry
            for entry in directory.iterdir()
            if _matches(entry.name, patterns) and entry.is_file()
        ]
    except FileNotFoundError as exc:
        raise ConfigDirectoryNotFoundError(
            f"Diretório de configuração não encontrado: {directory}"
        ) from exc
    except OSError as exc:
        raise DiscoveryError(f"Falha ao listar diretório de configuração {directory}: {exc}") from exc

    if not found:
        raise NoFragmentsFoundError(
            f"Nenhum fragmento ({', '.join(patterns)}) encontrado em: {directory}"
        )

    return sorted(found, key=lambda p: p.name)
