# src/conman/adapters/plugin.py
"""
Adapter de plugin: expõe `get` a um namespace de plugins do hospedeiro.

O framework hospedeiro registra o plugin uma única vez na inicialização;
outros plugins passam a consultar `plugins["conman"].get("chave.aninhada")`.

Decisões arquiteturais:
    - O plugin expõe exatamente uma capacidade: `get` vinculado ao store
    - Falhas de carregamento são propagadas ao hospedeiro (nenhum registro parcial)
    - Nomes já registrados não são sobrescritos silenciosamente
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, MutableMapping, Optional, Union

from conman.core.config import ConfigStore, LoaderOptions, load_config

DEFAULT_PLUGIN_NAME = "conman"


@dataclass(frozen=True)
class ConfigPlugin:
    """Namespace exposto ao hospedeiro (somente `get`)."""

    get: Callable[..., Any]


def register(
    plugins: MutableMapping[str, Any],
    *,
    config_path: Union[str, Path],
    name: str = DEFAULT_PLUGIN_NAME,
    options: Optional[LoaderOptions] = None,
) -> ConfigStore:
    """
    Carrega a configuração e registra o plugin em `plugins[name]`.

    Args:
        plugins: namespace de plugins do hospedeiro.
        config_path: diretório de fragmentos.
        name: chave de registro do plugin.
        options: opções do loader.

    Returns:
        ConfigStore: store carregado (para uso direto pelo hospedeiro).

    Raises:
        ValueError: se `name` já estiver registrado.
        ConfigError: qualquer falha de `load_config`; nada é registrado.
    """
    if name in plugins:
        raise ValueError(f"Plugin já registrado: {name}")

    store = load_config(config_path, options=options)
    plugins[name] = ConfigPlugin(get=store.get)
    return store
