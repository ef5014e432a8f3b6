# src/config_packager/core/assignment/method.py
"""
Contrato canônico de método de atribuição.

Um método de atribuição é uma política nomeada que, aplicada ao motor de
atribuição, inicializa pacotes e reivindica itens da coleção (ex.: por
tipo de entidade, por bundle, por dependência).

Princípios fundamentais:
    - Métodos não conhecem o Assigner nem o planner
    - Métodos não controlam a ordem de execução; apenas declaram
      `depends_on` (métodos que devem rodar antes, quando habilitados)
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - Cada método possui um `id` único
    - `apply` respeita a idempotência do motor (itens atribuídos não mudam)
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from config_packager.core.context import GenerationContext

from .engine import AssignmentEngine


@runtime_checkable
class AssignmentMethod(Protocol):
    """
    Contrato de um método de atribuição.

    Atributos obrigatórios:
        - id: identificador único e estável do método
        - depends_on: ids de métodos que, se habilitados, rodam antes
    """
    id: str
    depends_on: List[str]

    def apply(self, engine: AssignmentEngine, ctx: GenerationContext) -> None:
        """Aplica o método sobre o registry do motor, registrando eventos no contexto."""
        ...
