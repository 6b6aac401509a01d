# src/conman/core/__init__.py
"""
Core do conman.

Este pacote contém a implementação canônica e independente de adapters
do pipeline de agregação de configuração.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de frameworks hospedeiros

Componentes principais:
    - config → pipeline de fragmentos (locator, reader, ordering, parser,
      merge) e o `ConfigStore` resultante

Limites explícitos:
    - Não registra plugins em frameworks externos
    - Não depende de CLI ou serviços externos
"""
