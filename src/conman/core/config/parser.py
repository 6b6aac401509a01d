# src/conman/core/config/parser.py
"""
Parse YAML de fragmentos de configuração.

Cada fragmento é interpretado de forma independente com `yaml.safe_load`.
Um fragmento inválido não impede o parse dos demais, mas o lote como um
todo falha com `ParseError` se qualquer fragmento for inválido.

Decisões arquiteturais:
    - Apenas o loader seguro do PyYAML é utilizado (sem tags arbitrárias)
    - Arquivos vazios produzem `document=None`
    - O erro reporta o primeiro fragmento inválido na ordem recebida,
      com linha/coluna quando o PyYAML fornece a posição

Limites explícitos:
    - Não valida tipo raiz (política do merge)
    - Não realiza coerção de tipos além do YAML
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, FrozenSet, Iterable, List, Optional, Tuple

import yaml  # PyYAML

from .errors import ParseError
from .fragments import Fragment, ParsedFragment


def _error_position(exc: yaml.YAMLError) -> Tuple[Optional[int], Optional[int]]:
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    if mark is None:
        return None, None
    return mark.line + 1, mark.column + 1


def _is_cyclic(node: Any, ancestors: FrozenSet[int] = frozenset()) -> bool:
    """
    Indica se o documento contém um ciclo (alias recursivo, ex.: `a: &x [1, *x]`).

    Aliases compartilhados sem ciclo (o mesmo nó referenciado em dois
    ramos) são permitidos: apenas a cadeia de ancestrais é verificada.
    """
    if isinstance(node, Mapping):
        children = node.values()
    elif isinstance(node, list):
        children = node
    else:
        return False

    if id(node) in ancestors:
        return True
    ancestors = ancestors | {id(node)}
    return any(_is_cyclic(child, ancestors) for child in children)


def parse_fragment(fragment: Fragment) -> ParsedFragment:
    """
    Interpreta um único fragmento.

    Decisões arquiteturais:
        - Documentos cíclicos são rejeitados: não podem ser mesclados,
          consultados por keypath nem serializados para hashing

    Raises:
        ParseError: se o conteúdo não for YAML válido ou for cíclico.
    """
    try:
        document = yaml.safe_load(fragment.raw_content)
    except yaml.YAMLError as exc:
        line, column = _error_position(exc)
        where = f" (linha {line}, coluna {column})" if line is not None else ""
        raise ParseError(
            f"YAML inválido em {fragment.path}{where}: {exc}",
            path=fragment.path,
            line=line,
            column=column,
        ) from exc

    if _is_cyclic(document):
        raise ParseError(
            f"YAML inválido em {fragment.path}: documento contém referência cíclica (alias recursivo)",
            path=fragment.path,
        )
    return ParsedFragment(path=fragment.path, document=document)


def parse_fragments(fragments: Iterable[Fragment]) -> List[ParsedFragment]:
    """
    Interpreta todos os fragmentos, na ordem recebida.

    Returns:
        List[ParsedFragment]: um documento por fragmento.

    Raises:
        ParseError: se ao menos um fragmento for inválido; `path` aponta o
            primeiro e `failed_paths` lista todos.
    """
    parsed: List[ParsedFragment] = []
    failures: List[ParseError] = []

    for fragment in fragments:
        try:
            parsed.append(parse_fragment(fragment))
        except ParseError as exc:
            failures.append(exc)

    if failures:
        first = failures[0]
        failed_paths: List[Path] = [f.path for f in failures]
        raise ParseError(
            str(first),
            path=first.path,
            line=first.line,
            column=first.column,
            failed_paths=failed_paths,
        ) from first.__cause__

    return parsed
