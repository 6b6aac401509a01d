# src/conman/core/config/options.py
"""
Opções de carregamento do pipeline de configuração.

Os valores padrão reproduzem o comportamento canônico do conman:
    - fragmentos: arquivos `*.yaml` e `*.yml` no nível do diretório
    - camada de override: `config.yaml`
    - encoding de leitura: UTF-8
    - separador de keypath: `.`

Invariantes:
    - `LoaderOptions` é imutável
    - Opções inválidas são rejeitadas na construção
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_PATTERNS: Tuple[str, ...] = ("*.yaml", "*.yml")
DEFAULT_OVERRIDE_NAME = "config.yaml"
DEFAULT_ENCODING = "utf-8"
DEFAULT_KEY_SEPARATOR = "."


@dataclass(frozen=True)
class LoaderOptions:
    """
    Configuração do próprio loader.

    Campos:
        - patterns: padrões glob (sobre o nome do arquivo) que selecionam fragmentos
        - override_name: nome exato do fragmento aplicado por último
        - encoding: encoding fixo de leitura dos fragmentos
        - max_workers: limite de threads de leitura (None = padrão do executor)
        - key_separator: delimitador de segmentos de keypath em `get`

    Raises:
        ValueError: se algum campo estiver vazio, o encoding for desconhecido
            ou `max_workers` < 1.
    """

    patterns: Tuple[str, ...] = DEFAULT_PATTERNS
    override_name: str = DEFAULT_OVERRIDE_NAME
    encoding: str = DEFAULT_ENCODING
    max_workers: Optional[int] = None
    key_separator: str = DEFAULT_KEY_SEPARATOR

    def __post_init__(self) -> None:
        if isinstance(self.patterns, str):
            object.__setattr__(self, "patterns", (self.patterns,))
        else:
            object.__setattr__(self, "patterns", tuple(self.patterns))

        if not self.patterns or any(not p for p in self.patterns):
            raise ValueError("LoaderOptions.patterns deve conter ao menos um padrão não vazio")
        if not self.override_name:
            raise ValueError("LoaderOptions.override_name não pode ser vazio")
        if not self.encoding:
            raise ValueError("LoaderOptions.encoding não pode ser vazio")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"LoaderOptions.encoding desconhecido: {self.encoding}") from exc
        if not self.key_separator:
            raise ValueError("LoaderOptions.key_separator não pode ser vazio")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"LoaderOptions.max_workers deve ser >= 1, recebido: {self.max_workers}")
