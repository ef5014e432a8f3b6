# src/config_packager/core/context.py
"""
Contexto de execução de uma geração de pacotes.

Este módulo define o `GenerationContext`, a estrutura canônica que carrega
a identidade da geração, as settings resolvidas e o log estruturado de
eventos produzido por métodos de atribuição, renderer e writers.

Princípios fundamentais:
    - Isolamento por execução (cada geração possui seu próprio contexto)
    - Eventos são explícitos e rastreáveis
    - Ausência de estado global compartilhado

Invariantes:
    - Eventos sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não executa atribuição nem renderização
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid


@dataclass
class GenerationContext:
    """
    Contexto compartilhado de uma geração.

    Campos canônicos:
    - run_id: identificador único da geração
    - created_at: timestamp UTC de criação do contexto
    - settings: settings efetivas (defaults + local deep-merge)
    - events: log estruturado de eventos
    - warnings: warnings por step_id
    """

    settings: Dict[str, Any]
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Settings
    # -----------------------------
    def section(self, key: str) -> Dict[str, Any]:
        value = (self.settings or {}).get(key) or {}
        return value if isinstance(value, dict) else {}

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)
        self.log(step_id=step_id, level="warning", message=message)

    def events_for(self, step_id: str, level: Optional[str] = None) -> List[Dict[str, Any]]:
        return [
            e for e in self.events
            if e["step_id"] == step_id and (level is None or e["level"] == level)
        ]
