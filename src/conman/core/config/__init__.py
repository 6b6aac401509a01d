# src/conman/core/config/__init__.py

"""
Camada de configuração do conman.

Este pacote contém as estruturas e utilitários responsáveis por
descobrir, ler, ordenar, interpretar e mesclar fragmentos YAML de um
diretório, produzindo um `ConfigStore` consultável por keypath.

A configuração no conman é:
    - fragmentada (um arquivo por assunto)
    - determinística
    - sobrescrita por uma única camada reservada (`config.yaml`)

Responsabilidades do pacote:
    - Descoberta de fragmentos (`locator`)
    - Leitura paralela de arquivos (`reader`)
    - Ordenação com override por último (`ordering`)
    - Parse YAML por fragmento (`parser`)
    - Deep-merge determinístico (`merge`)
    - Consulta imutável por keypath (`store`)
    - Hash canônico e event log da inicialização (`hashing`, `trace`)

Invariantes:
    - A inicialização ou retorna um `ConfigStore` pronto, ou levanta `ConfigError`
    - A configuração agregada não é mutada após a construção
    - Consultas nunca falham: ausência retorna default ou `ABSENT`

Limites explícitos:
    - Não valida schema
    - Não recarrega arquivos
    - Não persiste a configuração resolvida
"""

from .errors import (
    ConfigDirectoryNotFoundError,
    ConfigError,
    DiscoveryError,
    FragmentError,
    NoFragmentsFoundError,
    ParseError,
    ReadError,
)
from .fragments import Fragment, ParsedFragment
from .options import LoaderOptions
from .pipeline import load_config
from .store import ABSENT, ConfigStore
from .trace import LoadTrace

__all__ = [
    "ABSENT",
    "ConfigDirectoryNotFoundError",
    "ConfigError",
    "ConfigStore",
    "DiscoveryError",
    "Fragment",
    "FragmentError",
    "LoadTrace",
    "LoaderOptions",
    "NoFragmentsFoundError",
    "ParseError",
    "ParsedFragment",
    "ReadError",
    "load_config",
]
