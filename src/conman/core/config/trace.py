# src/conman/core/config/trace.py
"""
LoadTrace — log estruturado de uma inicialização de configuração.

Cada etapa do pipeline registra eventos explícitos (fragmentos
localizados, lidos, ordenados, interpretados, agregados) e a falha,
quando houver, antes de a exceção ser propagada ao chamador.

Princípios fundamentais:
    - Nenhum evento é impresso ou enviado a backends externos
    - A ordem dos eventos reflete a ordem real de execução
    - UTC é o timezone canônico dos timestamps
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class LoadTrace:
    """
    Event log de uma execução de `load_config`.

    Campos:
        - events: lista ordenada de eventos `{stage, level, message, timestamp, ...}`
    """

    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def stages(self) -> List[str]:
        """Retorna os estágios registrados, em ordem."""
        return [e["stage"] for e in self.events]

    def last(self) -> Dict[str, Any]:
        """
        Retorna o evento mais recente.

        Usado para inspecionar o desfecho de uma carga (`merge` ou `load.failed`).

        Raises:
            IndexError: se nenhum evento foi registrado.
        """
        if not self.events:
            raise IndexError("LoadTrace sem eventos")
        return self.events[-1]
