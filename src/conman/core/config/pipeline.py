# src/conman/core/config/pipeline.py
"""
Loader canônico de configuração do conman.

Este módulo é o ponto de entrada de inicialização: executa uma única vez
o pipeline completo e retorna um `ConfigStore` pronto, ou falha.

Pipeline:
    locate → read → order → parse → merge → ConfigStore

Princípios fundamentais:
    - Função pura de inicialização: nenhum objeto meio-construído é exposto
    - Cada etapa falha rápido e aborta a inicialização inteira
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - O fragmento de override é sempre a última camada
    - Nenhuma configuração parcial é retornada em caso de erro
    - Toda falha é registrada no `LoadTrace` e então propagada

Limites explícitos:
    - Não valida schema
    - Não observa mudanças no diretório
    - Não persiste a configuração resolvida
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .errors import ConfigError
from .locator import locate_fragments
from .merge import merge_documents
from .options import LoaderOptions
from .ordering import is_override, order_fragments
from .parser import parse_fragments
from .reader import read_fragments
from .store import ConfigStore
from .trace import LoadTrace


def load_config(
    config_dir: Union[str, Path],
    *,
    options: Optional[LoaderOptions] = None,
    trace: Optional[LoadTrace] = None,
) -> ConfigStore:
    """
    Carrega e resolve a configuração de um diretório de fragmentos.

    Política de resolução:
        - Todos os arquivos que correspondem a `options.patterns` são camadas
        - Camadas são aplicadas em ordem de descoberta (nome de arquivo)
        - `options.override_name` (padrão `config.yaml`) é aplicado por último
        - A resolução utiliza `merge_documents` (deep-merge, listas substituídas)

    Args:
        config_dir (Union[str, Path]): diretório com os fragmentos YAML.
        options (Optional[LoaderOptions]): opções do loader; padrão quando None.
        trace (Optional[LoadTrace]): event log a preencher; um novo é criado
            quando None e anexado ao store retornado.

    Returns:
        ConfigStore: configuração agregada pronta para consulta.

    Raises:
        ConfigDirectoryNotFoundError: se o diretório não existir.
        DiscoveryError: se a listagem do diretório falhar.
        NoFragmentsFoundError: se nenhum fragmento for encontrado.
        ReadError: se algum fragmento não puder ser lido.
        ParseError: se algum fragmento não for YAML válido.
    """
    opts = options or LoaderOptions()
    trace = trace if trace is not None else LoadTrace()
    directory = Path(config_dir)

    trace.log(stage="load.start", level="INFO", message="Inicializando configuração", config_dir=str(directory))

    try:
        paths = locate_fragments(directory, patterns=opts.patterns)
        trace.log(
            stage="locate",
            level="INFO",
            message=f"{len(paths)} fragmento(s) localizado(s)",
            paths=[str(p) for p in paths],
        )

        fragments = read_fragments(paths, encoding=opts.encoding, max_workers=opts.max_workers)
        trace.log(stage="read", level="INFO", message=f"{len(fragments)} fragmento(s) lido(s)")

        ordered = order_fragments(fragments, override_name=opts.override_name)
        overrides = [str(f.path) for f in ordered if is_override(f, opts.override_name)]
        if len(overrides) > 1:
            trace.log(
                stage="order",
                level="WARNING",
                message=f"Múltiplos fragmentos de override: {len(overrides)}",
                overrides=overrides,
            )
        trace.log(
            stage="order",
            level="INFO",
            message="Ordem de merge definida",
            order=[str(f.path) for f in ordered],
            overrides=overrides,
        )

        parsed = parse_fragments(ordered)
        empty = [str(p.path) for p in parsed if p.document is None]
        trace.log(stage="parse", level="INFO", message=f"{len(parsed)} fragmento(s) interpretado(s)", empty=empty)

        aggregate = merge_documents(p.document for p in parsed)
        store = ConfigStore(
            aggregate,
            sources=[p.path for p in parsed],
            key_separator=opts.key_separator,
            trace=trace,
        )
    except ConfigError as exc:
        trace.log(
            stage="load.failed",
            level="ERROR",
            message=str(exc),
            error=type(exc).__name__,
            path=str(getattr(exc, "path", directory)),
        )
        raise

    trace.log(stage="merge", level="INFO", message="Configuração agregada", config_hash=store.config_hash)
    return store
