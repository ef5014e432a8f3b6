# src/config_packager/core/assignment/assigner.py
"""
Assigner: aplica métodos de atribuição habilitados em ordem planejada.

O Assigner combina:
    - o `MethodRegistry` (métodos disponíveis)
    - o `plan_methods` (ordem determinística entre os habilitados)
    - o `AssignmentEngine` (operações de atribuição sobre o registry)

Decisões arquiteturais:
    - Apenas dependências para métodos habilitados restringem a ordem
      (regra aplicada pelo planner)
    - Violações de invariantes (método desconhecido, pacote não inicializado)
      propagam ao chamador; não existe atribuição parcial "best-effort"
    - Cada aplicação é registrada no log estruturado do contexto
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from config_packager.core.context import GenerationContext
from config_packager.core.registry import PackageRegistry

from .engine import AssignmentEngine
from .method import AssignmentMethod
from .methods import default_methods
from .planner import plan_methods
from .registry import MethodRegistry


class Assigner:
    """Aplica métodos de atribuição sobre um registry de pacotes."""

    def __init__(
        self,
        *,
        registry: PackageRegistry,
        ctx: GenerationContext,
        methods: Optional[Iterable[AssignmentMethod]] = None,
    ):
        self.registry = registry
        self.ctx = ctx
        self.engine = AssignmentEngine(registry)
        self.methods = MethodRegistry()
        for method in default_methods() if methods is None else methods:
            self.methods.add(method)

    def enabled_method_ids(self) -> List[str]:
        return list(self.ctx.section("assignment").get("enabled") or [])

    def plan(self, method_ids: Iterable[str]) -> List[AssignmentMethod]:
        return plan_methods(self.methods.list(), enabled=method_ids)

    def apply_assignment_method(self, method_id: str) -> None:
        method = self.methods.get(method_id)
        method.apply(self.engine, self.ctx)
        self.ctx.log(
            step_id=method_id,
            level="notice",
            message="assignment method applied",
            packages=list(self.registry.get_packages()),
        )

    def assign_configuration(self, method_ids: Optional[Iterable[str]] = None) -> List[str]:
        """
        Aplica os métodos habilitados (ou os informados) em ordem planejada.

        Returns:
            List[str]: Ids dos métodos aplicados, na ordem de aplicação.
        """
        ids = self.enabled_method_ids() if method_ids is None else list(method_ids)
        applied: List[str] = []
        for method in self.plan(ids):
            self.apply_assignment_method(method.id)
            applied.append(method.id)
        return applied
