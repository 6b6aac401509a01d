# src/conman/core/config/store.py
"""
ConfigStore — configuração agregada e consulta por keypath.

O `ConfigStore` é o único produto de `load_config`: contém a configuração
agregada (imutável após a construção) e expõe `get` com fallback para
um valor default.

Regra de travessia de `get`:
    - O keypath é dividido pelo separador (padrão `.`)
    - A cada segmento, se o nó atual é um mapping e contém a chave,
      desce para o valor; caso contrário a travessia para
    - Chaves não-string do YAML (int, float, bool, null) casam pelo texto
      do segmento (ex.: `ports.8080`, `flags.on`)
    - Ausência em qualquer ponto do caminho retorna o default informado,
      ou o sentinela `ABSENT` quando nenhum default foi informado

Decisões arquiteturais:
    - Ausência de chave é dado, não erro: `get` nunca levanta exceção
    - Um `null` armazenado é um valor legítimo e é retornado como `None`
    - Valores retornados são cópias profundas; o agregado nunca é exposto por referência
    - Sequências não são indexáveis por keypath (apenas mappings)

Limites explícitos:
    - Não carrega arquivos
    - Não permite escrita ou recarga
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from .hashing import compute_config_hash
from .options import DEFAULT_KEY_SEPARATOR
from .trace import LoadTrace


class _Absent:
    """Sentinela de "nenhum valor encontrado" (singleton, falsy)."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Absent":
        return self


ABSENT = _Absent()

# grafias YAML 1.1 que o PyYAML resolve para bool/None em chaves
_TRUE_SPELLINGS = frozenset({"true", "yes", "on"})
_FALSE_SPELLINGS = frozenset({"false", "no", "off"})
_NULL_SPELLINGS = frozenset({"null", "~"})


def _segment_matches(key: Any, segment: str) -> bool:
    if isinstance(key, bool):
        return segment.lower() in (_TRUE_SPELLINGS if key else _FALSE_SPELLINGS)
    if key is None:
        return segment.lower() in _NULL_SPELLINGS
    return str(key) == segment


def _find_key(node: Mapping, segment: str) -> Any:
    """
    Localiza uma chave não-string cujo texto corresponde ao segmento.

    O YAML converte chaves como `8080`, `1.5`, `on` e `null` para int,
    float, bool e None; o segmento de keypath é sempre texto.

    Decisões arquiteturais:
        - Usado apenas quando a busca direta pela string falha
        - A primeira chave correspondente, na ordem do mapping, vence

    Returns:
        Any: a chave encontrada, ou `ABSENT`.
    """
    for key in node:
        if not isinstance(key, str) and _segment_matches(key, segment):
            return key
    return ABSENT


class ConfigStore:
    """
    Configuração agregada imutável com consulta por keypath.

    Atributos (somente leitura):
        - sources: fragmentos que contribuíram camadas, em ordem de merge
        - config_hash: SHA-256 canônico do agregado
        - trace: event log da inicialização (quando fornecido)
    """

    __slots__ = ("_data", "_sources", "_separator", "_hash", "_trace")

    def __init__(
        self,
        data: Any,
        *,
        sources: Sequence[Path] = (),
        key_separator: str = DEFAULT_KEY_SEPARATOR,
        trace: Optional[LoadTrace] = None,
    ) -> None:
        if not key_separator:
            raise ValueError("key_separator não pode ser vazio")
        self._data = deepcopy(data)
        self._sources: Tuple[Path, ...] = tuple(Path(p) for p in sources)
        self._separator = key_separator
        self._hash = compute_config_hash(self._data)
        self._trace = trace

    def _lookup(self, key_path: str) -> Any:
        node = self._data
        for segment in key_path.split(self._separator):
            if not isinstance(node, Mapping):
                return ABSENT
            if segment in node:
                node = node[segment]
                continue
            key = _find_key(node, segment)
            if key is ABSENT:
                return ABSENT
            node = node[key]
        return node

    def get(self, key_path: str, default: Any = ABSENT) -> Any:
        """
        Retorna o valor em `key_path` ou `default`.

        Args:
            key_path (str): segmentos separados por `.` (ex.: "db.host").
            default (Any): valor retornado quando o caminho não existe.

        Returns:
            Any: cópia profunda do valor encontrado, `default`, ou `ABSENT`.
        """
        value = self._lookup(key_path)
        if value is ABSENT:
            return default
        # inclui sets (!!set) e qualquer outro valor mutável produzido pelo YAML
        return deepcopy(value)

    def has(self, key_path: str) -> bool:
        """
        Indica se `key_path` resolve para um valor armazenado.

        Invariantes:
            - Usa exatamente a mesma travessia de `get`
            - Um `null` armazenado conta como presente

        Limites explícitos:
            - Não retorna nem copia o valor
        """
        return self._lookup(key_path) is not ABSENT

    def __contains__(self, key_path: object) -> bool:
        return isinstance(key_path, str) and self.has(key_path)

    def as_dict(self) -> Any:
        """Cópia profunda do agregado completo."""
        return deepcopy(self._data)

    @property
    def sources(self) -> Tuple[Path, ...]:
        return self._sources

    @property
    def config_hash(self) -> str:
        return self._hash

    @property
    def trace(self) -> Optional[LoadTrace]:
        return self._trace

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigStore):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigStore(sources={len(self._sources)}, config_hash={self._hash[:12]})"
