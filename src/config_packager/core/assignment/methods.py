# src/config_packager/core/assignment/methods.py
"""
Métodos de atribuição canônicos (v1).

- core       → reúne itens de tipos compartilhados no pacote `core`
- base       → cria um pacote por item de tipo base (ex.: um por node type),
               reivindica itens cujo short name casa com o bundle e propaga
               para dependentes
- dependency → uma passada de propagação para dependentes diretos

Os tipos considerados vêm das settings (`assignment.core.types`,
`assignment.base.types`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from config_packager.core.context import GenerationContext

from .engine import AssignmentEngine
from .method import AssignmentMethod


def _types_for(ctx: GenerationContext, method_id: str) -> List[str]:
    section = ctx.section("assignment").get(method_id) or {}
    return list(section.get("types") or [])


@dataclass
class CoreTypeAssignment:
    """Atribui ao pacote `core` os itens de tipos compartilhados."""

    id: str = "core"
    depends_on: List[str] = field(default_factory=list)

    def apply(self, engine: AssignmentEngine, ctx: GenerationContext) -> None:
        types = set(_types_for(ctx, self.id))
        registry = engine.registry
        registry.init_core_package()

        names = [
            name for name, item in registry.get_config_collection().items()
            if item.type in types
        ]
        assigned = engine.assign_config_package("core", names)
        ctx.log(step_id=self.id, level="info", message="core types assigned", assigned=assigned)


@dataclass
class BaseTypeAssignment:
    """Cria um pacote por item de tipo base e reivindica itens relacionados."""

    id: str = "base"
    depends_on: List[str] = field(default_factory=lambda: ["core"])

    def apply(self, engine: AssignmentEngine, ctx: GenerationContext) -> None:
        types = set(_types_for(ctx, self.id))
        registry = engine.registry

        patterns = {}
        for name, item in list(registry.get_config_collection().items()):
            if item.type not in types:
                continue
            registry.init_package(item.short_name, item.label)
            engine.assign_config_package(item.short_name, [name])
            patterns[item.short_name] = item.short_name

        by_pattern = engine.assign_config_by_pattern(patterns)
        by_dependents = engine.assign_config_dependents()
        ctx.log(
            step_id=self.id,
            level="info",
            message="base types assigned",
            packages=sorted(patterns),
            by_pattern=by_pattern,
            by_dependents=by_dependents,
        )


@dataclass
class DependencyAssignment:
    """Propaga atribuições existentes para dependentes diretos."""

    id: str = "dependency"
    depends_on: List[str] = field(default_factory=lambda: ["base", "core"])

    def apply(self, engine: AssignmentEngine, ctx: GenerationContext) -> None:
        assigned = engine.assign_config_dependents()
        ctx.log(step_id=self.id, level="info", message="dependents assigned", assigned=assigned)


def default_methods() -> List[AssignmentMethod]:
    return [CoreTypeAssignment(), BaseTypeAssignment(), DependencyAssignment()]
