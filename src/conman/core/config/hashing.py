# src/conman/core/config/hashing.py
"""
Hashing canônico da configuração agregada.

O hash representa a **identidade estrutural** da configuração resolvida
e permite verificar que duas inicializações sobre o mesmo diretório
produziram configurações equivalentes.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Valores não-JSON do YAML (datas, chaves não-string) via `str`
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from collections.abc import Mapping
from typing import Any, FrozenSet


def _canonical(value: Any, _ancestors: FrozenSet[int] = frozenset()) -> Any:
    # chaves YAML podem ser int/bool/None; json exige string e sort exige tipos comparáveis
    if isinstance(value, (Mapping, list, tuple)):
        if id(value) in _ancestors:
            raise ValueError("Configuração cíclica não pode ser serializada para hashing")
        ancestors = _ancestors | {id(value)}
        if isinstance(value, Mapping):
            return {str(k): _canonical(v, ancestors) for k, v in value.items()}
        return [_canonical(v, ancestors) for v in value]
    if isinstance(value, (set, frozenset)):
        # ordem de iteração de set depende de PYTHONHASHSEED
        return sorted(str(v) for v in value)
    return value


def compute_config_hash(config: Any) -> str:
    """
    Gera um hash determinístico da configuração agregada.

    Args:
        config (Any): configuração agregada (normalmente um mapping).

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        ValueError: se a configuração contiver referências cíclicas.
    """
    canonical_json = json.dumps(
        _canonical(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
