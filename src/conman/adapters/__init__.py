# src/conman/adapters/__init__.py
"""
Adapters de integração do conman com frameworks hospedeiros.

Adapters consomem apenas o contrato público do core (`load_config` e
`ConfigStore.get`) e não contêm lógica de agregação.
"""

from .plugin import DEFAULT_PLUGIN_NAME, ConfigPlugin, register

__all__ = ["DEFAULT_PLUGIN_NAME", "ConfigPlugin", "register"]
