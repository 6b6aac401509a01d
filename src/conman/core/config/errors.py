# src/conman/core/config/errors.py
"""
Exceções canônicas da camada de configuração do conman.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a descoberta, leitura e parse de fragmentos de configuração.

As exceções aqui definidas representam **falhas de inicialização
explícitas**: qualquer uma delas invalida o carregamento inteiro.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de fragmento sempre identificam o arquivo de origem
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção é levantada após a inicialização (consulta não falha)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos (responsabilidade do `LoadTrace`)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple


class ConfigError(Exception):
    """
    Exceção base para erros de carregamento de configuração do conman.

    Todas as exceções levantadas durante descoberta, leitura e parse de
    fragmentos devem herdar desta classe, permitindo captura genérica
    no ponto de inicialização.
    """


class DiscoveryError(ConfigError):
    """
    Exceção levantada quando a listagem do diretório de configuração falha.

    Exemplos:
        - permissão negada ao listar o diretório
        - falha de I/O durante a listagem
        - o caminho informado não é um diretório

    Limites explícitos:
        - Não indica ausência de fragmentos (ver `NoFragmentsFoundError`)
    """


class NoFragmentsFoundError(ConfigError):
    """
    Exceção levantada quando nenhum fragmento corresponde aos padrões.

    Decisões arquiteturais:
        - "Nada para carregar" é distinto de "configuração vazia carregada"
        - Um diretório sem fragmentos nunca produz um `ConfigStore` vazio
    """


class ConfigDirectoryNotFoundError(DiscoveryError, NoFragmentsFoundError):
    """
    Exceção levantada quando o diretório de configuração não existe.

    É ao mesmo tempo uma falha de descoberta e um resultado sem
    fragmentos: capturável por `except DiscoveryError` e por
    `except NoFragmentsFoundError`. Um diretório existente e vazio
    levanta apenas `NoFragmentsFoundError`, o que mantém os dois casos
    distinguíveis.
    """


class FragmentError(ConfigError):
    """
    Exceção base para falhas associadas a um fragmento específico.

    Atributos:
        path (Path): arquivo de origem da falha.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class ReadError(FragmentError):
    """Fragmento localizado não pôde ser lido (I/O ou encoding)."""


class ParseError(FragmentError):
    """
    Exceção levantada quando o conteúdo de um fragmento não é YAML válido.

    O parse é independente por fragmento: todos são tentados, e o erro
    reporta o primeiro fragmento inválido na ordem de merge, listando
    também todos os demais caminhos inválidos do lote.

    Atributos:
        path (Path): primeiro fragmento inválido.
        line (Optional[int]): linha (1-based) do erro, quando disponível.
        column (Optional[int]): coluna (1-based) do erro, quando disponível.
        failed_paths (Tuple[Path, ...]): todos os fragmentos inválidos.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        line: Optional[int] = None,
        column: Optional[int] = None,
        failed_paths: Sequence[Path] = (),
    ) -> None:
        super().__init__(message, path=path)
        self.line = line
        self.column = column
        self.failed_paths: Tuple[Path, ...] = tuple(Path(p) for p in failed_paths) or (self.path,)
