# src/config_packager/core/assignment/registry.py
"""
Registro de métodos de atribuição.

Este módulo define o `MethodRegistry`, responsável por registrar métodos de
atribuição e validar a unicidade de seus identificadores antes que sejam
planejados e aplicados pelo `Assigner`.

Decisões arquiteturais:
    - A validação ocorre no momento do registro
    - A ordem de registro é preservada separadamente do armazenamento
    - Duplicidade é erro estrutural fatal

Limites explícitos:
    - Não planeja a ordem de aplicação (ver planner)
    - Não aplica métodos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from config_packager.core.exceptions import UnknownAssignmentMethodError

from .method import AssignmentMethod


class DuplicateMethodIdError(ValueError):
    """
    Exceção levantada quando dois métodos de atribuição compartilham o mesmo `id`.

    Invariantes:
        - O primeiro método registrado permanece; o registry não é alterado
    """


@dataclass
class MethodRegistry:
    """Registro canônico de métodos de atribuição, em ordem de registro."""

    _methods: Dict[str, AssignmentMethod] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, method: AssignmentMethod) -> None:
        method_id = getattr(method, "id", None)
        if not isinstance(method_id, str) or not method_id.strip():
            raise ValueError("method.id must be a non-empty string")

        if method_id in self._methods:
            raise DuplicateMethodIdError(f"Duplicate assignment method id: {method_id}")

        self._methods[method_id] = method
        self._order.append(method_id)

    def has(self, method_id: str) -> bool:
        return method_id in self._methods

    def get(self, method_id: str) -> AssignmentMethod:
        if method_id not in self._methods:
            raise UnknownAssignmentMethodError(
                message=f"Método de atribuição desconhecido: {method_id}",
                details={"method": method_id, "available": list(self._order)},
            )
        return self._methods[method_id]

    def list(self) -> List[AssignmentMethod]:
        return [self._methods[mid] for mid in self._order]
