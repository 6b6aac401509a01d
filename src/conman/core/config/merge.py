# src/conman/core/config/merge.py
"""
Utilitário canônico de deep-merge de fragmentos.

Este módulo implementa a política de deep-merge utilizada pelo conman
para combinar os documentos de todos os fragmentos, em ordem, em uma
única configuração agregada.

Política de merge (v1):
    - mapping + mapping → merge recursivo por chave
    - list              → sobrescrita total (sem concatenação)
    - escalar           → sobrescrita direta
    - documento vazio (None) no nível raiz → camada no-op
    - documento raiz não-mapping → substitui o agregado inteiro

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - Não existem erros próprios: entradas inválidas já foram barradas no parse

Limites explícitos:
    - Não carrega arquivos
    - Não realiza coerção de tipos
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, Iterable


def deep_merge(base: Any, override: Any) -> Any:
    """
    Realiza um deep-merge determinístico entre duas camadas de configuração.

    Política de merge (v1):
        - mapping + mapping → merge recursivo por chave
        - override None     → base preservada (camada vazia)
        - qualquer outro caso → override substitui a base (cópia profunda)

    A regra de `None` vale apenas para o documento inteiro; um `null`
    explícito aninhado em uma chave substitui o valor anterior.

    Args:
        base (Any): agregado acumulado até aqui.
        override (Any): documento da próxima camada.

    Returns:
        Any: nova estrutura resultante; os inputs nunca são mutados.
    """
    if override is None:
        return deepcopy(base)

    if not (isinstance(base, Mapping) and isinstance(override, Mapping)):
        return deepcopy(override)

    return _merge_mappings(base, override)


def _merge_mappings(base: Mapping, override: Mapping) -> Dict[Any, Any]:
    """
    Merge recursivo de dois mappings, chave a chave.

    Invariantes:
        - Chaves ausentes no override são preservadas da base
        - A recursão só ocorre quando ambos os valores são mappings
        - O resultado é sempre um novo `dict`, sem aliasing com os inputs
    """
    result: Dict[Any, Any] = deepcopy(dict(base))

    for key, override_value in override.items():
        base_value = result.get(key)

        # mapping -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = _merge_mappings(base_value, override_value)
            continue

        # list, escalar, null -> sobrescrita
        result[key] = deepcopy(override_value)

    return result


def merge_documents(documents: Iterable[Any]) -> Any:
    """
    Combina documentos da esquerda para a direita a partir de `{}`.

    Args:
        documents (Iterable[Any]): documentos já ordenados (override por último).

    Returns:
        Any: configuração agregada; um mapping, salvo quando a última camada
            não vazia for um documento raiz não-mapping.
    """
    aggregate: Any = {}
    for document in documents:
        aggregate = deep_merge(aggregate, document)
    return aggregate
