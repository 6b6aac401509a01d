# src/conman/core/config/fragments.py
"""
Tipos canônicos de fragmento de configuração.

Componentes principais:
    - Fragment       → arquivo lido (caminho + texto bruto)
    - ParsedFragment → documento YAML estruturado associado ao caminho

Invariantes:
    - Ambos os tipos são imutáveis (frozen)
    - O caminho de origem acompanha o conteúdo em todas as etapas

Limites explícitos:
    - Não lê arquivos
    - Não realiza parse nem merge
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Fragment:
    """Um arquivo de configuração lido do disco, ainda não interpretado."""

    path: Path
    raw_content: str

    @property
    def name(self) -> str:
        """Último segmento do caminho (nome do arquivo)."""
        return self.path.name


@dataclass(frozen=True)
class ParsedFragment:
    """
    Documento estruturado produzido a partir de um `Fragment`.

    `document` é a árvore de mappings/sequências/escalares retornada pelo
    parser YAML; `None` representa um arquivo vazio (camada no-op no merge).
    """

    path: Path
    document: Any
