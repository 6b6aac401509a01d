# src/conman/__init__.py
"""
conman — agregação de fragmentos de configuração YAML.

Este pacote raiz define o namespace público do conman, uma biblioteca
que reúne um diretório de fragmentos YAML em um único objeto de
configuração consultável por keypath.

Princípios centrais:
    - Um arquivo reservado (`config.yaml`) é sempre a última camada
    - A resolução é determinística e reprodutível
    - A configuração resolvida é imutável após a inicialização
    - Falhas de carregamento são tipadas e nunca silenciadas

Arquitetura em alto nível:
    - core.config → descoberta, leitura, ordenação, parse, merge e consulta
    - adapters    → integração com frameworks hospedeiros (plugin `get`)

Limites explícitos:
    - Não valida schema
    - Não recarrega arquivos em tempo de execução
    - Não persiste a configuração resolvida

Este módulo existe para estabelecer o namespace do conman e expor
seus pontos de entrada públicos.
"""

from .core.config import ABSENT, ConfigStore, LoaderOptions, load_config

__all__ = ["ABSENT", "ConfigStore", "LoaderOptions", "load_config"]
