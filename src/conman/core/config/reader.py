# src/conman/core/config/reader.py
"""
Leitura de fragmentos de configuração.

Este módulo lê o conteúdo textual completo de cada fragmento localizado,
preservando a identidade do arquivo junto ao conteúdo.

Decisões arquiteturais:
    - As leituras são independentes e executadas em paralelo (thread pool)
    - Todas as leituras são concluídas antes do retorno (barreira)
    - A ordem do resultado é sempre a ordem de entrada
    - Qualquer falha aborta o lote inteiro (sem resultado parcial)

Limites explícitos:
    - Não escreve no filesystem
    - Não interpreta o conteúdo (responsabilidade de `parser`)
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import ReadError
from .fragments import Fragment
from .options import DEFAULT_ENCODING


def read_fragment(path: Union[str, Path], *, encoding: str = DEFAULT_ENCODING) -> Fragment:
    """
    Lê um único fragmento.

    Raises:
        ReadError: se o arquivo não puder ser aberto, lido ou decodificado
            (inclusive com encoding desconhecido).
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise ReadError(f"Falha ao ler fragmento {path}: {exc}", path=path) from exc
    return Fragment(path=path, raw_content=raw)


def read_fragments(
    paths: Iterable[Union[str, Path]],
    *,
    encoding: str = DEFAULT_ENCODING,
    max_workers: Optional[int] = None,
) -> List[Fragment]:
    """
    Lê todos os fragmentos candidatos.

    Args:
        paths: caminhos em ordem de descoberta.
        encoding: encoding fixo de leitura.
        max_workers: limite de threads (None = padrão do executor).

    Returns:
        List[Fragment]: um fragmento por caminho, na ordem recebida.

    Raises:
        ReadError: no primeiro fragmento (em ordem) que não puder ser lido.
    """
    paths = [Path(p) for p in paths]
    if not paths:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # map preserva a ordem de entrada e relança a exceção do worker
        return list(pool.map(lambda p: read_fragment(p, encoding=encoding), paths))
