# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do conman.

Este módulo garante apenas que o pacote é importável e expõe seus
pontos de entrada públicos.

Limites explícitos:
    - Não testar lógica de carregamento
    - Não acumular asserts funcionais
"""


def test_smoke():
    """
    Smoke test mínimo do repositório.

    Valida que o pacote raiz importa sem falhas e expõe a API pública.
    """
    import conman

    assert callable(conman.load_config)
    assert not conman.ABSENT
