# src/conman/core/config/ordering.py
"""
Política de ordenação de fragmentos.

Partição estável: todo fragmento cujo nome de arquivo é exatamente o
nome de override vai para o fim; os demais mantêm a ordem recebida.

Invariantes:
    - Zero, um ou vários fragmentos de override são aceitos sem erro
    - Fragmentos de override mantêm a ordem relativa entre si
    - A sequência de entrada não é mutada
"""

from __future__ import annotations

from typing import Iterable, List

from .fragments import Fragment
from .options import DEFAULT_OVERRIDE_NAME


def is_override(fragment: Fragment, override_name: str = DEFAULT_OVERRIDE_NAME) -> bool:
    """
    Indica se o fragmento é a camada de override.

    Decisões arquiteturais:
        - Comparação exata com o último segmento do caminho
          (`myconfig.yaml` não é `config.yaml`)

    Limites explícitos:
        - Não inspeciona diretórios ancestrais nem o conteúdo do arquivo
    """
    return fragment.name == override_name


def order_fragments(
    fragments: Iterable[Fragment],
    *,
    override_name: str = DEFAULT_OVERRIDE_NAME,
) -> List[Fragment]:
    """Retorna uma nova lista com os fragmentos de override ao final."""
    # sorted é estável: chaves iguais preservam a ordem de descoberta
    return sorted(fragments, key=lambda f: is_override(f, override_name))
