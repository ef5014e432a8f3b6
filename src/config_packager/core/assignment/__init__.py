"""
Atribuição de itens de configuração a pacotes: motor de atribuição,
métodos de atribuição plugáveis e o Assigner que os aplica.
"""

from .assigner import Assigner
from .engine import AssignmentEngine, matches_pattern
from .method import AssignmentMethod
from .methods import BaseTypeAssignment, CoreTypeAssignment, DependencyAssignment
from .planner import CycleDetectedError, UnknownDependencyError, plan_methods
from .registry import DuplicateMethodIdError, MethodRegistry

__all__ = [
    "Assigner",
    "AssignmentEngine",
    "AssignmentMethod",
    "BaseTypeAssignment",
    "CoreTypeAssignment",
    "CycleDetectedError",
    "DependencyAssignment",
    "DuplicateMethodIdError",
    "MethodRegistry",
    "UnknownDependencyError",
    "matches_pattern",
    "plan_methods",
]
